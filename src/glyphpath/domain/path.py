"""Path operations and the text path accumulator.

This module defines the output model of the layout engine:
- PathOpKind: Enum discriminating the three path operations
- MoveTo, LineTo, QuadCurveTo: The path operations themselves
- PathOp: Union of the three operation types
- TextPath: Ordered operations plus the total advance width

All coordinates are device-space floats (pixels) with Y increasing downward.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, ClassVar

from glyphpath.exceptions import TextPathFrozenError


class PathOpKind(Enum):
    """Kind of a path operation."""

    MOVE_TO = auto()
    LINE_TO = auto()
    QUAD_CURVE_TO = auto()


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start a new contour at (x, y).

    Attributes:
        x: X coordinate in pixels
        y: Y coordinate in pixels
    """

    kind: ClassVar[PathOpKind] = PathOpKind.MOVE_TO

    x: float
    y: float

    @property
    def control_x(self) -> float:
        """Control point X (the endpoint for straight ops)."""
        return self.x

    @property
    def control_y(self) -> float:
        """Control point Y (the endpoint for straight ops)."""
        return self.y


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight segment from the current point to (x, y).

    Attributes:
        x: X coordinate in pixels
        y: Y coordinate in pixels
    """

    kind: ClassVar[PathOpKind] = PathOpKind.LINE_TO

    x: float
    y: float

    @property
    def control_x(self) -> float:
        """Control point X (the endpoint for straight ops)."""
        return self.x

    @property
    def control_y(self) -> float:
        """Control point Y (the endpoint for straight ops)."""
        return self.y


@dataclass(frozen=True, slots=True)
class QuadCurveTo:
    """Quadratic Bezier segment from the current point to (x, y).

    Attributes:
        x: Endpoint X coordinate in pixels
        y: Endpoint Y coordinate in pixels
        control_x: Control point X coordinate in pixels
        control_y: Control point Y coordinate in pixels
    """

    kind: ClassVar[PathOpKind] = PathOpKind.QUAD_CURVE_TO

    x: float
    y: float
    control_x: float
    control_y: float


PathOp = MoveTo | LineTo | QuadCurveTo


def op_to_dict(op: PathOp) -> dict[str, Any]:
    """Serialize a path operation to a dictionary.

    Args:
        op: Path operation

    Returns:
        Dictionary with the op kind and its coordinates
    """
    match op:
        case QuadCurveTo(x=x, y=y, control_x=cx, control_y=cy):
            return {"kind": op.kind.name, "x": x, "y": y, "cx": cx, "cy": cy}
        case MoveTo(x=x, y=y) | LineTo(x=x, y=y):
            return {"kind": op.kind.name, "x": x, "y": y}
    raise TypeError(f"Not a path operation: {op!r}")


@dataclass
class TextPath:
    """Ordered path operations for a laid-out string.

    Operations are stored in drawing order. Several contours and glyphs
    are concatenated without boundary markers; every contour starts with
    a MoveTo.

    Once frozen (which layout does before returning a path), any further
    modification raises TextPathFrozenError.

    Attributes:
        ops: Path operations in drawing order
        width: Total horizontal advance in pixels
    """

    ops: list[PathOp] = field(default_factory=list)
    width: float = 0.0
    _frozen: bool = field(default=False, init=False, repr=False, compare=False)

    def __setattr__(self, name: str, value: object) -> None:
        if getattr(self, "_frozen", False):
            raise TextPathFrozenError()
        object.__setattr__(self, name, value)

    def _append(self, op: PathOp) -> None:
        if self._frozen:
            raise TextPathFrozenError()
        self.ops.append(op)

    def move_to(self, x: float, y: float) -> None:
        """Append a MoveTo."""
        self._append(MoveTo(x, y))

    def line_to(self, x: float, y: float) -> None:
        """Append a LineTo."""
        self._append(LineTo(x, y))

    def quad_curve_to(self, x: float, y: float, control_x: float, control_y: float) -> None:
        """Append a QuadCurveTo ending at (x, y) with the given control point."""
        self._append(QuadCurveTo(x, y, control_x, control_y))

    def freeze(self) -> "TextPath":
        """Make the path immutable.

        The ops list is converted to a tuple so it cannot be altered
        through the attribute either.

        Returns:
            The path itself
        """
        if not self._frozen:
            object.__setattr__(self, "ops", tuple(self.ops))
            object.__setattr__(self, "_frozen", True)
        return self

    @property
    def frozen(self) -> bool:
        """Whether the path can still be modified."""
        return self._frozen

    def is_empty(self) -> bool:
        """Check if the path has no operations."""
        return len(self.ops) == 0

    def __len__(self) -> int:
        return len(self.ops)

    def __iter__(self) -> Iterator[PathOp]:
        return iter(self.ops)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextPath):
            return NotImplemented
        return list(self.ops) == list(other.ops) and self.width == other.width

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the op list and width
        """
        return {
            "ops": [op_to_dict(op) for op in self.ops],
            "width": self.width,
        }
