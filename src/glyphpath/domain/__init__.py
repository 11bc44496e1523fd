"""Domain models for glyphpath.

This module contains the data types flowing through the layout pipeline:
glyph outlines coming from the font, and the path operations produced for
the renderer.

Key classes:
- OutlinePoint: A contour point in fixed-point font space
- GlyphBuffer: Reusable holder for one glyph's contours
- MoveTo, LineTo, QuadCurveTo: Device-space path operations
- TextPath: Ordered path operations plus total width
"""

from glyphpath.domain.outline import GlyphBuffer, OutlinePoint
from glyphpath.domain.path import (
    LineTo,
    MoveTo,
    PathOp,
    PathOpKind,
    QuadCurveTo,
    TextPath,
    op_to_dict,
)

__all__: list[str] = [
    # Enums
    "PathOpKind",
    # Outline types
    "GlyphBuffer",
    "OutlinePoint",
    # Path types
    "LineTo",
    "MoveTo",
    "PathOp",
    "QuadCurveTo",
    "TextPath",
    "op_to_dict",
]
