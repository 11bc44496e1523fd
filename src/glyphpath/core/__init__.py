"""Core layout algorithms for glyphpath.

This module contains:

- Unit conversion from 26.6 fixed point font values to pixels
- Contour decoding (implicit on-curve points between control points)
- String layout with kerning and advance widths

Key functions:
- ttscale: Fixed-point scale for a point size and resolution
- funits_to_float: Convert a fixed-point value to pixels
- point_to_device: Map an outline point to device space (Y down)
- append_contour: Decode one closed contour into path operations
- create_text_path: Lay out a string with a font

Key classes:
- Font: A sized font that lays out strings as TextPaths
"""

from glyphpath.core.contour import append_contour
from glyphpath.core.font import DPI, Font, create_text_path
from glyphpath.core.units import FIXED_ONE, funits_to_float, point_to_device, ttscale

__all__ = [
    "DPI",
    "FIXED_ONE",
    "Font",
    "append_contour",
    "create_text_path",
    "funits_to_float",
    "point_to_device",
    "ttscale",
]
