"""Conversions between fixed-point font space and device space.

Outline points, kerning values and advance widths arrive from the font as
integers in 26.6 fixed point (already multiplied by the font scale). These
helpers turn them into floating-point pixels and flip the Y axis.
"""

from glyphpath.domain.outline import OutlinePoint

# 26.6 fixed point: 64 units per pixel
FIXED_ONE = 64


def ttscale(point_size: float, dpi: float) -> int:
    """Compute the fixed-point font scale for a point size.

    Args:
        point_size: Requested size in points
        dpi: Device resolution in dots per inch

    Returns:
        Scale in 26.6 fixed point pixels per em, truncated
    """
    return int(float(point_size) * float(dpi) * (64.0 / 72.0))


def funits_to_float(value: int) -> float:
    """Convert a scaled font value to floating-point pixels.

    The value is shifted into a 24.8 representation and split into an
    integer and a fractional part. Division truncates toward zero, so for
    negative values both the quotient and the remainder are negative.
    The result equals ``value / 64`` for every integer input.

    Args:
        value: Fixed-point value

    Returns:
        Value in pixels
    """
    scaled = value * 4
    quotient = abs(scaled) // 256
    remainder = abs(scaled) % 256
    if scaled < 0:
        quotient, remainder = -quotient, -remainder
    return float(quotient) + float(remainder) / 256.0


def point_to_device(point: OutlinePoint, dx: float = 0.0, dy: float = 0.0) -> tuple[float, float]:
    """Map an outline point to device space.

    Args:
        point: Point with Y increasing upward
        dx: Horizontal offset in pixels
        dy: Vertical offset in pixels

    Returns:
        (x, y) in pixels with Y increasing downward
    """
    return funits_to_float(point.x) + dx, funits_to_float(-point.y) + dy
