"""Glyph outline types.

This module defines the outline data handed over by the font collaborator:
- OutlinePoint: A contour point with its on-curve flag
- GlyphBuffer: Reusable scratch buffer holding one glyph's outline

Outline coordinates are integers in 26.6 fixed point (64 units per pixel)
with Y increasing upward, as produced by scaling font units.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class OutlinePoint:
    """A point on a glyph contour.

    Attributes:
        x: X coordinate
        y: Y coordinate, increasing upward
        on_curve: True for points on the outline, False for quadratic control points
    """

    x: int
    y: int
    on_curve: bool = True

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


@dataclass
class GlyphBuffer:
    """Scratch buffer for one glyph outline.

    The points of all contours are stored in a single flat list; ``ends``
    holds the exclusive end index of each contour within it. A Font reuses
    one buffer across loads, so a buffer must not be shared between
    concurrent layouts.

    Attributes:
        points: Outline points of every contour, in order
        ends: Exclusive end index of each contour in ``points``
    """

    points: list[OutlinePoint] = field(default_factory=list)
    ends: list[int] = field(default_factory=list)

    def clear(self) -> None:
        """Drop the current outline, keeping the list objects."""
        self.points.clear()
        self.ends.clear()

    def load(self, points: Sequence[OutlinePoint], ends: Sequence[int]) -> None:
        """Replace the buffer contents.

        Args:
            points: Flat point list
            ends: Exclusive contour end indices, non-decreasing and within range

        Raises:
            ValueError: If the end indices do not partition the points
        """
        previous = 0
        for end in ends:
            if end < previous or end > len(points):
                raise ValueError(f"invalid contour end index {end}")
            previous = end
        self.clear()
        self.points.extend(points)
        self.ends.extend(ends)

    @property
    def contour_count(self) -> int:
        """Number of contours in the buffer."""
        return len(self.ends)

    def contours(self) -> Iterator[list[OutlinePoint]]:
        """Yield the points of each contour in order."""
        start = 0
        for end in self.ends:
            yield self.points[start:end]
            start = end
