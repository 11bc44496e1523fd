"""Fonts and string layout.

A Font couples a parsed font source with a size and lays out strings as
TextPaths: glyphs are placed along a baseline, separated by their advance
widths and kerning.

A Font owns one GlyphBuffer that every outline load reuses. A single Font is
therefore not safe for concurrent layouts unless it was created with
``reuse_glyph_buffer=False``, in which case each layout allocates its own
buffer.
"""

from pathlib import Path

import structlog

from glyphpath.config.settings import DEFAULT_DPI, LayoutConfig
from glyphpath.core.contour import append_contour
from glyphpath.core.units import funits_to_float, ttscale
from glyphpath.domain.outline import GlyphBuffer
from glyphpath.domain.path import TextPath
from glyphpath.exceptions import ExtractionError
from glyphpath.io.reader import FontSource, Hinting, parse_font, read_font_file

logger = structlog.get_logger(__name__)

DPI = DEFAULT_DPI


class Font:
    """A sized font that lays out text as vector paths.

    Example:
        font = Font.from_file(Path("font.ttf"), point_size=12)
        path = font.create_text_path("Hello", 10.0, 40.0)
        for op in path:
            ...
    """

    def __init__(
        self,
        source: FontSource,
        point_size: float,
        dpi: float = DPI,
        reuse_glyph_buffer: bool = True,
    ) -> None:
        """Initialize a font.

        Args:
            source: Parsed font
            point_size: Font size in points
            dpi: Device resolution in dots per inch
            reuse_glyph_buffer: Share one outline buffer between layouts
        """
        self.source = source
        self.point_size = point_size
        self.dpi = dpi
        self.scale = ttscale(point_size, dpi)
        self.reuse_glyph_buffer = reuse_glyph_buffer
        self._glyph_buffer = GlyphBuffer()

    @classmethod
    def from_bytes(cls, data: bytes, point_size: float, dpi: float = DPI, **kwargs: bool) -> "Font":
        """Create a font from font file contents.

        Raises:
            FontParseError: If the data is not a valid TrueType font
        """
        return cls(parse_font(data), point_size, dpi, **kwargs)

    @classmethod
    def from_file(
        cls, font_path: Path | str, point_size: float, dpi: float = DPI, **kwargs: bool
    ) -> "Font":
        """Create a font from a font file.

        Raises:
            FontSourceError: If the file cannot be read
            FontParseError: If the file is not a valid TrueType font
        """
        return cls(read_font_file(font_path), point_size, dpi, **kwargs)

    @classmethod
    def from_config(cls, font_path: Path | str, config: LayoutConfig) -> "Font":
        """Create a font from a font file using layout settings."""
        return cls.from_file(
            font_path,
            config.point_size,
            config.dpi,
            reuse_glyph_buffer=config.reuse_glyph_buffer,
        )

    def _layout_buffer(self) -> GlyphBuffer:
        if self.reuse_glyph_buffer:
            return self._glyph_buffer
        return GlyphBuffer()

    def append_glyph_path(
        self,
        glyph: int,
        dx: float,
        dy: float,
        path: TextPath,
        buffer: GlyphBuffer | None = None,
    ) -> None:
        """Append the outline of one glyph to a path.

        Args:
            glyph: Glyph index
            dx: Pen x position in pixels
            dy: Baseline y position in pixels
            path: Path receiving the contours
            buffer: Outline buffer to use. Defaults to the font's own buffer,
                or a fresh one when the font does not reuse its buffer

        Raises:
            ExtractionError: If the outline cannot be loaded; nothing is
                appended to the path in that case
        """
        if buffer is None:
            buffer = self._layout_buffer()
        self.source.load_glyph_outline(self.scale, glyph, buffer, Hinting.NONE)
        for contour in buffer.contours():
            append_contour(path, contour, dx, dy)

    def create_text_path(self, text: str, x: float = 0.0, y: float = 0.0) -> TextPath:
        """Lay out a string as a path.

        The left edge of the em square of the first character and the
        baseline intersect at (x, y). Most of the outline lies above and to
        the right of that point, but some glyphs (descenders, italic
        overhangs) reach below or left of it.

        If a glyph outline cannot be loaded, the failure is logged and the
        path built up to that glyph is returned.

        Args:
            text: String to lay out
            x: Starting pen x position in pixels
            y: Baseline y position in pixels

        Returns:
            Frozen TextPath whose width is the final pen x minus ``x``
        """
        result = TextPath()
        buffer = self._layout_buffer()
        start_x = x
        prev: int | None = None

        for char in text:
            index = self.source.glyph_index(ord(char))
            if prev is not None:
                x += funits_to_float(self.source.kerning(self.scale, prev, index))
            try:
                self.append_glyph_path(index, x, y, result, buffer)
            except ExtractionError as e:
                logger.error(
                    "Glyph extraction failed",
                    codepoint=f"U+{ord(char):04X}",
                    glyph=index,
                    error=e.reason,
                )
                return result.freeze()
            x += funits_to_float(self.source.advance_width(self.scale, index))
            result.width = x - start_x
            prev = index

        logger.debug("Text laid out", length=len(text), ops=len(result), width=result.width)
        return result.freeze()

    def measure(self, text: str) -> float:
        """Width in pixels of a string laid out from the origin."""
        return self.create_text_path(text).width

    def __repr__(self) -> str:
        return f"Font({self.source.name!r}, point_size={self.point_size}, dpi={self.dpi})"


def create_text_path(font: Font, text: str, x: float = 0.0, y: float = 0.0) -> TextPath:
    """Lay out a string with a font. See Font.create_text_path."""
    return font.create_text_path(text, x, y)
