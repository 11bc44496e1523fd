"""Font I/O layer for glyphpath.

This module handles reading TrueType fonts with fonttools and writing laid
out paths as SVG.

Key responsibilities:
- Parse TTF data and reject unsupported formats
- Map codepoints to glyphs and read scaled outlines, kerning and metrics
- Serialize TextPaths as SVG path data or documents

Key classes and functions:
- FontSource: Parsed font exposing what layout needs
- parse_font / read_font_file: Build a FontSource from bytes or a path
- to_svg_path_data / to_svg_document / write_svg: SVG output
"""

from glyphpath.io.reader import FontSource, Hinting, parse_font, read_font_file
from glyphpath.io.svg import to_svg_document, to_svg_path_data, write_svg

__all__ = [
    "FontSource",
    "Hinting",
    "parse_font",
    "read_font_file",
    "to_svg_document",
    "to_svg_path_data",
    "write_svg",
]
