"""Font source backed by fonttools.

This module wraps a parsed TrueType font and exposes only what the layout
engine needs from it: character mapping, scaled glyph outlines, kerning and
advance widths. All values handed out are scaled to 26.6 fixed point pixels
using the font scale, rounded half away from zero.
"""

from enum import Enum
from io import BytesIO
from pathlib import Path

import structlog
from fontTools.misc.roundTools import otRound
from fontTools.ttLib import TTFont

from glyphpath.domain.outline import GlyphBuffer, OutlinePoint
from glyphpath.exceptions import ExtractionError, FontParseError, FontSourceError

logger = structlog.get_logger(__name__)

# glyf point flag marking an on-curve point
FLAG_ON_CURVE = 0x01

# Tables a TrueType outline font must provide
REQUIRED_TABLES = ("head", "maxp", "cmap", "hhea", "hmtx", "loca", "glyf")

# kern subtable coverage bits (Microsoft layout)
KERN_HORIZONTAL = 0x01
KERN_MINIMUM = 0x02
KERN_CROSS_STREAM = 0x04
KERN_OVERRIDE = 0x08

# kern subtable coverage bits (Apple layout)
APPLE_KERN_VERTICAL = 0x80
APPLE_KERN_CROSS_STREAM = 0x40
APPLE_KERN_VARIATION = 0x20


class Hinting(str, Enum):
    """Hinting mode for outline loading. Only unhinted outlines are supported."""

    NONE = "none"


def scale_value(value: int, scale: int, units_per_em: int) -> int:
    """Scale a font unit value to 26.6 fixed point pixels.

    Args:
        value: Value in font units
        scale: Font scale in 26.6 fixed point pixels per em
        units_per_em: Font units per em

    Returns:
        value * scale / units_per_em, rounded half away from zero
    """
    product = value * scale
    half = units_per_em // 2
    if product >= 0:
        return (product + half) // units_per_em
    return -((-product + half) // units_per_em)


class FontSource:
    """A parsed TrueType font.

    Example:
        source = parse_font(Path("font.ttf").read_bytes())
        glyph = source.glyph_index(ord("A"))
        width = source.advance_width(scale, glyph)
    """

    def __init__(self, font: TTFont, name: str = "<bytes>") -> None:
        """Wrap an already parsed font.

        Args:
            font: fonttools font object
            name: Human-readable origin of the font, used in messages

        Raises:
            FontParseError: If the font is not a TrueType outline font
        """
        missing = [tag for tag in REQUIRED_TABLES if tag not in font]
        if missing:
            raise FontParseError(name, f"missing tables: {', '.join(missing)}")

        self._font = font
        self._name = name
        self._units_per_em: int = font["head"].unitsPerEm  # type: ignore[attr-defined]
        self._cmap: dict[int, str] = font.getBestCmap() or {}
        self._glyph_order: list[str] = font.getGlyphOrder()
        # hmtx decompiles maxp and hhea too, so damaged metrics fail here
        self._hmtx = font["hmtx"]
        self._kern_pairs = self._read_kern_pairs()

    @property
    def name(self) -> str:
        """Origin of the font."""
        return self._name

    @property
    def units_per_em(self) -> int:
        """Font units per em."""
        return self._units_per_em

    @property
    def glyph_count(self) -> int:
        """Number of glyphs in the font."""
        return len(self._glyph_order)

    def glyph_index(self, codepoint: int) -> int:
        """Map a codepoint to a glyph index.

        Args:
            codepoint: Unicode codepoint

        Returns:
            Glyph index, 0 (.notdef) for unmapped codepoints
        """
        glyph_name = self._cmap.get(codepoint)
        if glyph_name is None:
            return 0
        return self._font.getGlyphID(glyph_name)

    def load_glyph_outline(
        self,
        scale: int,
        glyph: int,
        buffer: GlyphBuffer,
        hinting: Hinting = Hinting.NONE,
    ) -> None:
        """Load a scaled glyph outline into a buffer.

        Composite glyphs are flattened into their component contours. The
        buffer is only replaced once the whole outline has been read.

        Args:
            scale: Font scale in 26.6 fixed point pixels per em
            glyph: Glyph index
            buffer: Buffer receiving the outline
            hinting: Hinting mode

        Raises:
            ExtractionError: If the glyph does not exist or its data is malformed
        """
        if hinting is not Hinting.NONE:
            raise ExtractionError(glyph, f"unsupported hinting mode {hinting!r}")
        if not 0 <= glyph < len(self._glyph_order):
            raise ExtractionError(glyph, "glyph index out of range")

        try:
            glyf_table = self._font["glyf"]
            tt_glyph = glyf_table[self._glyph_order[glyph]]
            coordinates, end_points, flags = tt_glyph.getCoordinates(glyf_table)
        except Exception as e:
            raise ExtractionError(glyph, str(e)) from e

        upm = self._units_per_em
        points = [
            OutlinePoint(
                scale_value(otRound(x), scale, upm),
                scale_value(otRound(y), scale, upm),
                bool(flag & FLAG_ON_CURVE),
            )
            for (x, y), flag in zip(coordinates, flags)
        ]
        # fonttools stores inclusive end indices
        ends = [end + 1 for end in end_points]

        try:
            buffer.load(points, ends)
        except ValueError as e:
            raise ExtractionError(glyph, str(e)) from e

    def kerning(self, scale: int, left: int, right: int) -> int:
        """Kerning adjustment between two glyphs.

        Args:
            scale: Font scale in 26.6 fixed point pixels per em
            left: Glyph index of the first glyph
            right: Glyph index of the following glyph

        Returns:
            Scaled adjustment, 0 when the pair is not kerned
        """
        value = self._kern_pairs.get((left, right), 0)
        if value == 0:
            return 0
        return scale_value(value, scale, self._units_per_em)

    def advance_width(self, scale: int, glyph: int) -> int:
        """Scaled advance width of a glyph.

        Args:
            scale: Font scale in 26.6 fixed point pixels per em
            glyph: Glyph index

        Returns:
            Scaled advance width, 0 for out-of-range glyphs
        """
        if not 0 <= glyph < len(self._glyph_order):
            return 0
        advance, _ = self._hmtx[self._glyph_order[glyph]]
        return scale_value(advance, scale, self._units_per_em)

    def _read_kern_pairs(self) -> dict[tuple[int, int], int]:
        """Collect kerning pairs from the legacy kern table.

        Only plain horizontal format 0 subtables are read. Their pairs are
        summed, except that an override subtable replaces the accumulated
        value.

        Returns:
            Mapping of (left, right) glyph indices to font unit adjustments
        """
        if "kern" not in self._font:
            return {}

        pairs: dict[tuple[int, int], int] = {}
        for subtable in self._font["kern"].kernTables:  # type: ignore[attr-defined]
            table = getattr(subtable, "kernTable", None)
            if not table or not _is_horizontal_kerning(subtable):
                continue
            override = _is_override(subtable)
            for (left_name, right_name), value in table.items():
                key = (self._font.getGlyphID(left_name), self._font.getGlyphID(right_name))
                pairs[key] = value if override else pairs.get(key, 0) + value
        return pairs


def _is_horizontal_kerning(subtable) -> bool:
    coverage = getattr(subtable, "coverage", KERN_HORIZONTAL)
    if getattr(subtable, "apple", False):
        return not coverage & (
            APPLE_KERN_VERTICAL | APPLE_KERN_CROSS_STREAM | APPLE_KERN_VARIATION
        )
    if not coverage & KERN_HORIZONTAL:
        return False
    return not coverage & (KERN_MINIMUM | KERN_CROSS_STREAM)


def _is_override(subtable) -> bool:
    if getattr(subtable, "apple", False):
        return False
    return bool(getattr(subtable, "coverage", 0) & KERN_OVERRIDE)


def parse_font(data: bytes, name: str = "<bytes>") -> FontSource:
    """Parse raw font file data.

    Args:
        data: Font file contents
        name: Human-readable origin of the data, used in messages

    Returns:
        FontSource for the data

    Raises:
        FontParseError: If the data is not a valid TrueType font
    """
    try:
        source = FontSource(TTFont(BytesIO(data)), name=name)
    except FontParseError:
        raise
    except Exception as e:
        raise FontParseError(name, str(e)) from e

    logger.debug(
        "Font parsed",
        font=name,
        glyphs=source.glyph_count,
        upm=source.units_per_em,
    )
    return source


def read_font_file(font_path: Path | str) -> FontSource:
    """Read and parse a font file.

    Args:
        font_path: Path to a TTF file

    Returns:
        FontSource for the file

    Raises:
        FontSourceError: If the file does not exist or cannot be read
        FontParseError: If the file is not a valid TrueType font
    """
    font_path = Path(font_path)
    if not font_path.exists():
        raise FontSourceError(str(font_path), "file not found")
    try:
        data = font_path.read_bytes()
    except OSError as e:
        raise FontSourceError(str(font_path), str(e)) from e
    return parse_font(data, name=str(font_path))
