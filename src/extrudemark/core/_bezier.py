"""Internal Bezier curve sampling helpers.

This is an internal module containing helper functions for flatten.
Not intended for public use.
"""

from extrudemark.domain import Point


def quadratic_point(p0: Point, p1: Point, p2: Point, t: float) -> Point:
    """Evaluate a quadratic Bezier curve at parameter t.

    Args:
        p0: Start point
        p1: Control point
        p2: End point
        t: Curve parameter in [0, 1]

    Returns:
        Point on the curve
    """
    mt = 1.0 - t
    a = mt * mt
    b = 2.0 * mt * t
    c = t * t
    return Point(
        a * p0.x + b * p1.x + c * p2.x,
        a * p0.y + b * p1.y + c * p2.y,
    )


def cubic_point(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    """Evaluate a cubic Bezier curve at parameter t.

    Args:
        p0: Start point
        p1: First control point
        p2: Second control point
        p3: End point
        t: Curve parameter in [0, 1]

    Returns:
        Point on the curve
    """
    mt = 1.0 - t
    a = mt * mt * mt
    b = 3.0 * mt * mt * t
    c = 3.0 * mt * t * t
    d = t * t * t
    return Point(
        a * p0.x + b * p1.x + c * p2.x + d * p3.x,
        a * p0.y + b * p1.y + c * p2.y + d * p3.y,
    )


def sample_quadratic(p0: Point, p1: Point, p2: Point, resolution: int) -> list[Point]:
    """Sample a quadratic curve at ``resolution`` even steps in (0, 1].

    The final sample is the exact end point, not a re-evaluation.
    """
    samples = [quadratic_point(p0, p1, p2, i / resolution) for i in range(1, resolution)]
    samples.append(p2)
    return samples


def sample_cubic(p0: Point, p1: Point, p2: Point, p3: Point, resolution: int) -> list[Point]:
    """Sample a cubic curve at ``resolution`` even steps in (0, 1].

    The final sample is the exact end point, not a re-evaluation.
    """
    samples = [cubic_point(p0, p1, p2, p3, i / resolution) for i in range(1, resolution)]
    samples.append(p3)
    return samples
