"""Bounding box accumulation over rotated geometry.

All functions are pure. A missing box is ``None``; merging a point into
``None`` establishes the initial bounds. No padding is ever added here.
"""

from collections.abc import Iterable, Sequence

from extrudemark.domain import BoundingBox, Contour, Point


def merge(box: BoundingBox | None, point: Point) -> BoundingBox:
    """Widen a box to include a point.

    Args:
        box: Current bounds, or None if nothing was merged yet
        point: Point to include

    Returns:
        A box that contains both the old box and the point
    """
    if box is None:
        return BoundingBox.from_point(point)
    return BoundingBox(
        min(box.min_x, point.x),
        min(box.min_y, point.y),
        max(box.max_x, point.x),
        max(box.max_y, point.y),
    )


def merge_boxes(first: BoundingBox | None, second: BoundingBox | None) -> BoundingBox | None:
    """Union of two optional boxes."""
    if first is None:
        return second
    if second is None:
        return first
    return BoundingBox(
        min(first.min_x, second.min_x),
        min(first.min_y, second.min_y),
        max(first.max_x, second.max_x),
        max(first.max_y, second.max_y),
    )


def bounds_of_points(points: Iterable[Point], box: BoundingBox | None = None) -> BoundingBox | None:
    """Fold points into a box."""
    for point in points:
        box = merge(box, point)
    return box


def rotate_point(point: Point, center: Point, degrees: float) -> Point:
    """Rotate a point about a center by an angle in degrees."""
    return point.rotated(center, degrees)


def bounds_of_rotated_geometry(
    contours: Sequence[Contour],
    center: Point,
    degrees: float,
    offset: Point,
    box: BoundingBox | None = None,
) -> BoundingBox | None:
    """Bounds of a glyph's front and back samples after rotation.

    For every sampled point, both the front position and the back position
    (point + offset) are rotated about ``center`` and merged.

    Args:
        contours: Flattened front contours
        center: Rotation pivot
        degrees: Rotation angle
        offset: Extrusion vector
        box: Bounds to extend, or None to start fresh

    Returns:
        Extended bounds, or the input box if there were no points
    """
    for contour in contours:
        for point in contour.points:
            box = merge(box, point.rotated(center, degrees))
            box = merge(box, point.translated(offset.x, offset.y).rotated(center, degrees))
    return box
