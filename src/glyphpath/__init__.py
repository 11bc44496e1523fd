"""Glyphpath - Lay out text with TrueType outlines as vector paths.

Glyphpath converts the quadratic outlines of a TrueType font into a
renderer-agnostic sequence of move/line/quadratic-curve commands in device
pixel space, positioning successive glyphs with kerning and advance widths.
Rasterizers and drawing backends consume the resulting TextPath.

Example:
    >>> from glyphpath import Font
    >>> font = Font.from_file("DejaVuSans.ttf", point_size=12)
    >>> path = font.create_text_path("Hello", 10.0, 40.0)
    >>> path.width
"""

from glyphpath.core.font import DPI, Font, create_text_path
from glyphpath.domain.path import LineTo, MoveTo, PathOpKind, QuadCurveTo, TextPath

__version__ = "0.1.0"

__all__ = [
    "DPI",
    "Font",
    "LineTo",
    "MoveTo",
    "PathOpKind",
    "QuadCurveTo",
    "TextPath",
    "__version__",
    "create_text_path",
]
