"""Tests for domain models to verify they work correctly."""

import pytest

from glyphpath.domain import (
    GlyphBuffer,
    LineTo,
    MoveTo,
    OutlinePoint,
    PathOpKind,
    QuadCurveTo,
    TextPath,
    op_to_dict,
)
from glyphpath.exceptions import TextPathFrozenError


class TestPathOps:
    """Tests for the path operation types."""

    def test_kinds(self) -> None:
        """Each op type carries its discriminant."""
        assert MoveTo(1.0, 2.0).kind is PathOpKind.MOVE_TO
        assert LineTo(1.0, 2.0).kind is PathOpKind.LINE_TO
        assert QuadCurveTo(1.0, 2.0, 3.0, 4.0).kind is PathOpKind.QUAD_CURVE_TO

    def test_straight_ops_report_endpoint_as_control(self) -> None:
        """MoveTo and LineTo use their endpoint as control point."""
        for op in (MoveTo(3.5, -2.0), LineTo(3.5, -2.0)):
            assert (op.control_x, op.control_y) == (3.5, -2.0)

    def test_quad_control_point(self) -> None:
        """QuadCurveTo keeps endpoint and control point apart."""
        op = QuadCurveTo(10.0, 20.0, 5.0, 6.0)
        assert (op.x, op.y) == (10.0, 20.0)
        assert (op.control_x, op.control_y) == (5.0, 6.0)

    def test_ops_immutable(self) -> None:
        """Path operations cannot be modified."""
        op = LineTo(1.0, 2.0)
        with pytest.raises(AttributeError):
            op.x = 5.0  # type: ignore

    def test_pattern_matching(self) -> None:
        """Ops can be dispatched with match."""
        names = []
        for op in (MoveTo(0, 0), LineTo(1, 0), QuadCurveTo(2, 0, 1.5, 1)):
            match op:
                case MoveTo():
                    names.append("M")
                case LineTo():
                    names.append("L")
                case QuadCurveTo(control_x=cx):
                    names.append(f"Q{cx}")
        assert names == ["M", "L", "Q1.5"]

    def test_op_to_dict(self) -> None:
        """Ops serialize with their kind."""
        assert op_to_dict(MoveTo(1.0, 2.0)) == {"kind": "MOVE_TO", "x": 1.0, "y": 2.0}
        assert op_to_dict(QuadCurveTo(1.0, 2.0, 3.0, 4.0)) == {
            "kind": "QUAD_CURVE_TO",
            "x": 1.0,
            "y": 2.0,
            "cx": 3.0,
            "cy": 4.0,
        }

    def test_op_to_dict_rejects_other_objects(self) -> None:
        """Serializing something that is not an op fails."""
        with pytest.raises(TypeError):
            op_to_dict((1.0, 2.0))  # type: ignore[arg-type]


class TestTextPath:
    """Tests for TextPath class."""

    def test_empty(self) -> None:
        """A new path has no ops and zero width."""
        path = TextPath()
        assert path.is_empty()
        assert len(path) == 0
        assert path.width == 0.0

    def test_append_order(self) -> None:
        """Ops are kept in insertion order."""
        path = TextPath()
        path.move_to(0.0, 0.0)
        path.line_to(1.0, 0.0)
        path.quad_curve_to(2.0, 1.0, 2.0, 0.0)

        assert list(path) == [
            MoveTo(0.0, 0.0),
            LineTo(1.0, 0.0),
            QuadCurveTo(2.0, 1.0, 2.0, 0.0),
        ]

    def test_freeze_blocks_appends(self) -> None:
        """A frozen path rejects new ops."""
        path = TextPath()
        path.move_to(0.0, 0.0)
        path.freeze()

        assert path.frozen
        with pytest.raises(TextPathFrozenError):
            path.line_to(1.0, 1.0)
        assert len(path) == 1

    def test_freeze_blocks_width_change(self) -> None:
        """A frozen path rejects width updates."""
        path = TextPath(width=3.0).freeze()
        with pytest.raises(TextPathFrozenError):
            path.width = 4.0
        assert path.width == 3.0

    def test_frozen_ops_are_a_tuple(self) -> None:
        """The ops of a frozen path cannot be mutated in place."""
        path = TextPath()
        path.move_to(0.0, 0.0)
        path.freeze()
        assert isinstance(path.ops, tuple)

    def test_equality_ignores_frozen_state(self) -> None:
        """Paths with the same ops and width compare equal."""
        a = TextPath()
        a.move_to(1.0, 2.0)
        a.width = 5.0
        b = TextPath()
        b.move_to(1.0, 2.0)
        b.width = 5.0
        b.freeze()

        assert a == b

    def test_to_dict(self) -> None:
        """Path serializes ops and width."""
        path = TextPath()
        path.move_to(1.0, 2.0)
        path.width = 7.5
        assert path.to_dict() == {
            "ops": [{"kind": "MOVE_TO", "x": 1.0, "y": 2.0}],
            "width": 7.5,
        }


class TestOutlinePoint:
    """Tests for OutlinePoint class."""

    def test_defaults_on_curve(self) -> None:
        """Points are on-curve unless flagged otherwise."""
        assert OutlinePoint(1, 2).on_curve
        assert not OutlinePoint(1, 2, on_curve=False).on_curve

    def test_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert OutlinePoint(100, -200).to_tuple() == (100, -200)


class TestGlyphBuffer:
    """Tests for GlyphBuffer class."""

    def test_contours(self) -> None:
        """End indices partition the flat point list."""
        points = [OutlinePoint(i, i) for i in range(5)]
        buffer = GlyphBuffer()
        buffer.load(points, [3, 5])

        contours = list(buffer.contours())
        assert buffer.contour_count == 2
        assert contours == [points[:3], points[3:]]

    def test_reload_reuses_lists(self) -> None:
        """Loading replaces contents without replacing the lists."""
        buffer = GlyphBuffer()
        points_list = buffer.points
        buffer.load([OutlinePoint(0, 0)] * 4, [4])
        buffer.load([OutlinePoint(1, 1)], [1])

        assert buffer.points is points_list
        assert buffer.points == [OutlinePoint(1, 1)]
        assert buffer.ends == [1]

    def test_invalid_ends(self) -> None:
        """End indices beyond the points are rejected and keep the old outline."""
        buffer = GlyphBuffer()
        buffer.load([OutlinePoint(0, 0)], [1])
        with pytest.raises(ValueError):
            buffer.load([OutlinePoint(0, 0)], [2])
        assert buffer.ends == [1]

    def test_decreasing_ends(self) -> None:
        """End indices must not decrease."""
        buffer = GlyphBuffer()
        with pytest.raises(ValueError):
            buffer.load([OutlinePoint(0, 0)] * 3, [2, 1])

    def test_empty_contour_slice(self) -> None:
        """Repeated end indices yield empty contours."""
        buffer = GlyphBuffer()
        buffer.load([OutlinePoint(0, 0)] * 2, [2, 2])
        assert list(buffer.contours())[1] == []
