"""Shared fixtures: a small TrueType font built in memory."""

from io import BytesIO
from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import newTable
from fontTools.ttLib.tables._k_e_r_n import KernTable_format_0

from glyphpath import Font

UPM = 1000
POINT_SIZE = 12
DPI = 92

GLYPH_ORDER = [".notdef", "space", "A", "O", "V", "p"]
CMAP = {0x20: "space", 0x41: "A", 0x4F: "O", 0x56: "V", 0x70: "p"}
ADVANCES = {".notdef": 500, "space": 250, "A": 600, "O": 700, "V": 600, "p": 550}
KERNING = {("A", "V"): -80}


def _draw_box(pen: TTGlyphPen, x0: int, y0: int, x1: int, y1: int) -> None:
    pen.moveTo((x0, y0))
    pen.lineTo((x0, y1))
    pen.lineTo((x1, y1))
    pen.lineTo((x1, y0))
    pen.closePath()


def _draw_oval(pen: TTGlyphPen, x0: int, y0: int, x1: int, y1: int) -> None:
    mid_y = (y0 + y1) // 2
    pen.moveTo((x0, mid_y))
    pen.qCurveTo((x0, y1), (x1, y1), (x1, mid_y))
    pen.qCurveTo((x1, y0), (x0, y0), (x0, mid_y))
    pen.closePath()


def _build_glyphs() -> dict:
    glyphs = {}

    pen = TTGlyphPen(None)
    _draw_box(pen, 50, 0, 450, 700)
    glyphs[".notdef"] = pen.glyph()

    glyphs["space"] = TTGlyphPen(None).glyph()

    pen = TTGlyphPen(None)
    _draw_box(pen, 100, 0, 500, 700)
    glyphs["A"] = pen.glyph()

    pen = TTGlyphPen(None)
    _draw_oval(pen, 50, 0, 650, 700)
    _draw_oval(pen, 200, 150, 500, 550)
    glyphs["O"] = pen.glyph()

    pen = TTGlyphPen(None)
    pen.moveTo((0, 700))
    pen.lineTo((300, 0))
    pen.lineTo((600, 700))
    pen.closePath()
    glyphs["V"] = pen.glyph()

    pen = TTGlyphPen(None)
    _draw_box(pen, 50, -200, 450, 500)
    glyphs["p"] = pen.glyph()

    return glyphs


def build_test_font(kerning: bool = True) -> bytes:
    """Build a TrueType font with a handful of simple glyphs.

    Args:
        kerning: Include a legacy kern table with an A/V pair

    Returns:
        Compiled font data
    """
    fb = FontBuilder(UPM, isTTF=True)
    fb.setupGlyphOrder(GLYPH_ORDER)
    fb.setupCharacterMap(CMAP)
    fb.setupGlyf(_build_glyphs())

    glyf_table = fb.font["glyf"]
    metrics = {}
    for name, advance in ADVANCES.items():
        metrics[name] = (advance, getattr(glyf_table[name], "xMin", 0))
    fb.setupHorizontalMetrics(metrics)
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Glyphpath Test", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()

    if kerning:
        subtable = KernTable_format_0()
        subtable.coverage = 1
        subtable.kernTable = dict(KERNING)
        kern = newTable("kern")
        kern.version = 0
        kern.kernTables = [subtable]
        fb.font["kern"] = kern

    buf = BytesIO()
    fb.save(buf)
    return buf.getvalue()


@pytest.fixture(scope="session")
def font_bytes() -> bytes:
    """Compiled test font."""
    return build_test_font()


@pytest.fixture
def font_file(tmp_path: Path, font_bytes: bytes) -> Path:
    """Test font written to a temporary file."""
    path = tmp_path / "GlyphpathTest-Regular.ttf"
    path.write_bytes(font_bytes)
    return path


@pytest.fixture
def font(font_bytes: bytes) -> Font:
    """Test font at the default test size."""
    return Font.from_bytes(font_bytes, point_size=POINT_SIZE, dpi=DPI)
