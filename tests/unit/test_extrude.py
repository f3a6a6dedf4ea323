"""Unit tests for extrusion face construction and bounds."""

import pytest

from extrudemark.core.bounds import (
    bounds_of_points,
    bounds_of_rotated_geometry,
    merge,
    merge_boxes,
)
from extrudemark.core.extrude import ExtrusionBuilder, cycle_colors
from extrudemark.domain import BoundingBox, Close, Contour, LineTo, MoveTo, Point

COLORS = ["#c1", "#c2", "#c3", "#c4"]


def square(x: float = 0.0, y: float = 0.0, size: float = 10.0) -> Contour:
    """Closed square contour with its start point repeated."""
    return Contour(
        points=(
            Point(x, y),
            Point(x + size, y),
            Point(x + size, y + size),
            Point(x, y + size),
            Point(x, y),
        ),
        closed=True,
    )


class TestCycleColors:
    """Tests for the face color selector."""

    def test_cycles_by_face_index(self):
        select = cycle_colors(COLORS)
        assert [select(i, 0) for i in range(6)] == ["#c1", "#c2", "#c3", "#c4", "#c1", "#c2"]

    def test_glyph_index_shifts_start(self):
        select = cycle_colors(COLORS)
        assert select(0, 1) == "#c2"
        assert select(3, 2) == "#c2"

    def test_empty_palette_rejected(self):
        with pytest.raises(ValueError):
            cycle_colors([])


class TestExtrusionBuilder:
    """Tests for ExtrusionBuilder."""

    def test_square_has_four_faces(self):
        builder = ExtrusionBuilder(cycle_colors(COLORS))
        face_set = builder.build_faces([square()], Point(12, -5), glyph_index=0)
        assert len(face_set.faces) == 4
        assert face_set.dropped_edges == 0
        assert [f.color for f in face_set.faces] == COLORS

    def test_face_count_bounded_by_edges(self):
        contour = square()
        builder = ExtrusionBuilder(cycle_colors(COLORS))
        face_set = builder.build_faces([contour], Point(3, 3), glyph_index=0)
        assert len(face_set.faces) <= len(contour.points) - 1

    def test_coincident_points_produce_no_face(self):
        contour = Contour(points=(Point(0, 0), Point(0, 0), Point(0.2, 0.2), Point(10, 0)))
        builder = ExtrusionBuilder(cycle_colors(COLORS), face_epsilon=0.45)
        face_set = builder.build_faces([contour], Point(12, -5), glyph_index=0)
        assert len(face_set.faces) == 1
        assert face_set.dropped_edges == 2
        assert face_set.faces[0].a == Point(0.2, 0.2)

    def test_face_counter_spans_contours(self):
        """Color cycling continues from one contour to the next."""
        first = Contour(points=(Point(0, 0), Point(10, 0)))
        second = Contour(points=(Point(0, 5), Point(10, 5)))
        builder = ExtrusionBuilder(cycle_colors(COLORS))
        face_set = builder.build_faces([first, second], Point(1, 1), glyph_index=1)
        assert [f.color for f in face_set.faces] == ["#c2", "#c3"]

    def test_degenerate_contour_skipped(self):
        lone = Contour(points=(Point(0, 0),))
        builder = ExtrusionBuilder(cycle_colors(COLORS))
        face_set = builder.build_faces([lone, square()], Point(1, 1), glyph_index=0)
        assert len(face_set.faces) == 4
        assert face_set.dropped_edges == 0

    def test_face_carries_offset(self):
        builder = ExtrusionBuilder(cycle_colors(COLORS))
        face = builder.build_faces([square()], Point(12, -5), glyph_index=0).faces[0]
        assert face.polygon == (Point(12, -5), Point(22, -5), Point(10, 0), Point(0, 0))

    def test_back_path(self):
        commands = (MoveTo(Point(0, 0)), LineTo(Point(10, 0)), Close())
        back = ExtrusionBuilder.back_path(commands, Point(12, -5))
        assert back == (MoveTo(Point(12, -5)), LineTo(Point(22, -5)), Close())


class TestBounds:
    """Tests for bounding box accumulation."""

    def test_merge_into_none(self):
        assert merge(None, Point(3, 4)) == BoundingBox(3, 4, 3, 4)

    def test_merge_is_monotonic(self):
        """Merging never shrinks a box."""
        box = BoundingBox(0, 0, 10, 10)
        for point in (Point(5, 5), Point(-3, 2), Point(4, 20), Point(11, -1)):
            merged = merge(box, point)
            assert merged.min_x <= box.min_x
            assert merged.min_y <= box.min_y
            assert merged.max_x >= box.max_x
            assert merged.max_y >= box.max_y
            assert merged.contains(point)
            box = merged
        assert box == BoundingBox(-3, -1, 11, 20)

    def test_merge_boxes_with_none(self):
        box = BoundingBox(0, 0, 1, 1)
        assert merge_boxes(None, box) is box
        assert merge_boxes(box, None) is box
        assert merge_boxes(None, None) is None

    def test_bounds_of_no_points(self):
        assert bounds_of_points([]) is None

    def test_rotated_geometry_includes_back(self):
        contour = Contour(points=(Point(0, 0), Point(10, 0)))
        box = bounds_of_rotated_geometry([contour], Point(5, 0), 0.0, Point(5, -3))
        assert box == BoundingBox(0, -3, 15, 0)

    def test_rotated_geometry_quarter_turn(self):
        contour = Contour(points=(Point(0, 0), Point(10, 0)))
        box = bounds_of_rotated_geometry([contour], Point(0, 0), 90.0, Point(0, 0))
        assert box is not None
        assert box.min_x == pytest.approx(0.0, abs=1e-9)
        assert box.max_x == pytest.approx(0.0, abs=1e-9)
        assert box.min_y == pytest.approx(0.0)
        assert box.max_y == pytest.approx(10.0)

    def test_rotated_geometry_extends_existing_box(self):
        start = BoundingBox(-100, -100, -90, -90)
        contour = Contour(points=(Point(0, 0), Point(10, 0)))
        box = bounds_of_rotated_geometry([contour], Point(0, 0), 0.0, Point(0, 0), box=start)
        assert box == BoundingBox(-100, -100, 10, 0)

    def test_rotated_geometry_without_points(self):
        assert bounds_of_rotated_geometry([], Point(0, 0), 45.0, Point(1, 1)) is None
