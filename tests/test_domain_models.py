"""Tests for domain models to verify they work correctly."""

import pytest

from extrudemark.domain import (
    BoundingBox,
    Close,
    Contour,
    CubicTo,
    GlyphOutline,
    LayoutMode,
    LayoutResult,
    LineTo,
    MoveTo,
    Point,
    QuadTo,
    SideFace,
    translate_commands,
)


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        p = Point(100.0, 200.0)
        assert p.to_tuple() == (100.0, 200.0)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_translated(self) -> None:
        assert Point(1, 2).translated(3, -4) == Point(4, -2)

    def test_rotated_zero_is_identity(self) -> None:
        p = Point(3.5, -2.0)
        assert p.rotated(Point(10, 10), 0) is p

    def test_rotated_quarter_turn(self) -> None:
        """A positive angle turns clockwise on a y-down canvas."""
        p = Point(10, 0).rotated(Point(0, 0), 90)
        assert p.x == pytest.approx(0.0, abs=1e-9)
        assert p.y == pytest.approx(10.0)

    def test_rotated_about_center(self) -> None:
        p = Point(12, 5).rotated(Point(10, 5), 180)
        assert p.x == pytest.approx(8.0)
        assert p.y == pytest.approx(5.0)

    def test_distance_to(self) -> None:
        assert Point(0, 0).distance_to(Point(3, 4)) == 5.0


class TestPathCommands:
    """Tests for path command transforms."""

    def test_translate_commands_keeps_structure(self) -> None:
        commands = (
            MoveTo(Point(0, 0)),
            LineTo(Point(10, 0)),
            QuadTo(Point(15, 5), Point(10, 10)),
            CubicTo(Point(8, 12), Point(2, 12), Point(0, 10)),
            Close(),
        )
        moved = translate_commands(commands, 12, -5)

        assert [type(c) for c in moved] == [type(c) for c in commands]
        assert moved[0] == MoveTo(Point(12, -5))
        assert moved[2] == QuadTo(Point(27, 0), Point(22, 5))
        assert moved[3] == CubicTo(Point(20, 7), Point(14, 7), Point(12, 5))
        assert moved[4] == Close()

    def test_translate_empty(self) -> None:
        assert translate_commands((), 1, 1) == ()


class TestContour:
    """Tests for Contour class."""

    def test_contour_creation(self) -> None:
        """Test basic contour creation."""
        points = (Point(0, 0), Point(100, 0), Point(100, 100))
        contour = Contour(points=points, closed=False)
        assert len(contour.points) == 3
        assert not contour.closed

    def test_degenerate(self) -> None:
        assert Contour(points=(Point(0, 0),)).is_degenerate
        assert not Contour(points=(Point(0, 0), Point(1, 0))).is_degenerate

    def test_edges_do_not_wrap(self) -> None:
        """Edges are consecutive pairs; closure comes from the repeated start point."""
        a, b, c = Point(0, 0), Point(10, 0), Point(10, 10)
        assert Contour(points=(a, b, c)).edges() == [(a, b), (b, c)]


class TestBoundingBox:
    """Tests for BoundingBox class."""

    def test_from_point(self) -> None:
        box = BoundingBox.from_point(Point(3, 4))
        assert box == BoundingBox(3, 4, 3, 4)
        assert box.width == 0
        assert box.height == 0

    def test_dimensions_and_center(self) -> None:
        box = BoundingBox(-10, 0, 30, 20)
        assert box.width == 40
        assert box.height == 20
        assert box.center == Point(10, 10)

    def test_contains(self) -> None:
        box = BoundingBox(0, 0, 10, 10)
        assert box.contains(Point(10, 0))
        assert not box.contains(Point(10.01, 5))

    def test_to_dict(self) -> None:
        assert BoundingBox(1, 2, 3, 4).to_dict() == {
            "min_x": 1,
            "min_y": 2,
            "max_x": 3,
            "max_y": 4,
        }


class TestSideFace:
    """Tests for SideFace class."""

    def test_polygon_order(self) -> None:
        """Vertices run back edge first, then front edge reversed."""
        face = SideFace(a=Point(0, 0), b=Point(10, 0), offset=Point(12, -5), color="#78b3d6")
        assert face.polygon == (Point(12, -5), Point(22, -5), Point(10, 0), Point(0, 0))


class TestLayoutModels:
    """Tests for GlyphOutline and LayoutResult."""

    def test_outline_is_empty(self) -> None:
        assert GlyphOutline(commands=(), advance_width=250).is_empty
        assert not GlyphOutline(commands=(MoveTo(Point(0, 0)),), advance_width=250).is_empty

    def test_empty_layout_summary(self) -> None:
        result = LayoutResult(
            geometries=(),
            bounds=None,
            width=0.0,
            height=0.0,
            translate_x=0.0,
            translate_y=0.0,
            mode=LayoutMode.AUTO,
        )
        assert result.is_empty
        assert result.face_count == 0
        assert result.to_dict() == {
            "mode": "auto",
            "glyphs": 0,
            "faces": 0,
            "width": 0.0,
            "height": 0.0,
            "bounds": None,
        }
