"""Contour to path conversion.

TrueType contours are quadratic B-splines: a run of consecutive off-curve
points implies an on-curve point halfway between each pair. This module
decodes one closed contour into explicit path operations.
"""

from collections.abc import Sequence

from glyphpath.core.units import point_to_device
from glyphpath.domain.outline import OutlinePoint
from glyphpath.domain.path import TextPath


def append_contour(
    path: TextPath,
    points: Sequence[OutlinePoint],
    dx: float = 0.0,
    dy: float = 0.0,
) -> None:
    """Append the operations tracing one closed contour.

    The first point opens the contour with a MoveTo and is treated as
    on-curve. The contour is closed back onto that point with a LineTo or,
    if the last point is a control point, a QuadCurveTo.

    Args:
        path: Path receiving the operations
        points: Contour points in order; an empty sequence appends nothing
        dx: Horizontal offset in pixels
        dy: Vertical offset in pixels
    """
    if not points:
        return

    start_x, start_y = point_to_device(points[0])
    path.move_to(start_x + dx, start_y + dy)

    prev_x, prev_y, prev_on = start_x, start_y, True
    for point in points[1:]:
        x, y = point_to_device(point)
        if point.on_curve:
            if prev_on:
                path.line_to(x + dx, y + dy)
            else:
                path.quad_curve_to(x + dx, y + dy, prev_x + dx, prev_y + dy)
        elif not prev_on:
            mid_x = (prev_x + x) / 2
            mid_y = (prev_y + y) / 2
            path.quad_curve_to(mid_x + dx, mid_y + dy, prev_x + dx, prev_y + dy)
        prev_x, prev_y, prev_on = x, y, point.on_curve

    if prev_on:
        path.line_to(start_x + dx, start_y + dy)
    else:
        path.quad_curve_to(start_x + dx, start_y + dy, prev_x + dx, prev_y + dy)
