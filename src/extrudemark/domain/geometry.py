"""Core geometric types for outline representation.

This module defines the fundamental geometric types used throughout extrudemark:
- Point: An immutable 2D point
- MoveTo, LineTo, QuadTo, CubicTo, Close: Path commands of a glyph outline
- Contour: A flattened polyline produced from one subpath
- BoundingBox: An axis-aligned rectangle that only ever grows
"""

import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def translated(self, dx: float, dy: float) -> "Point":
        """Return this point moved by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)

    def rotated(self, center: "Point", degrees: float) -> "Point":
        """Rotate this point about a center.

        Uses the standard 2D rotation matrix. With a y-down canvas a positive
        angle turns clockwise on screen, matching SVG ``rotate()``.

        Args:
            center: Pivot point
            degrees: Rotation angle in degrees

        Returns:
            Rotated point
        """
        if degrees == 0:
            return self
        radians = math.radians(degrees)
        cos_a = math.cos(radians)
        sin_a = math.sin(radians)
        dx = self.x - center.x
        dy = self.y - center.y
        return Point(
            center.x + dx * cos_a - dy * sin_a,
            center.y + dx * sin_a + dy * cos_a,
        )

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)


PointMapping = Callable[[Point], Point]


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start a new subpath at ``point``."""

    point: Point

    def transformed(self, fn: PointMapping) -> "MoveTo":
        return MoveTo(fn(self.point))


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight segment from the current point to ``point``."""

    point: Point

    def transformed(self, fn: PointMapping) -> "LineTo":
        return LineTo(fn(self.point))


@dataclass(frozen=True, slots=True)
class QuadTo:
    """Quadratic Bezier segment from the current point to ``point``."""

    control: Point
    point: Point

    def transformed(self, fn: PointMapping) -> "QuadTo":
        return QuadTo(fn(self.control), fn(self.point))


@dataclass(frozen=True, slots=True)
class CubicTo:
    """Cubic Bezier segment from the current point to ``point``."""

    control1: Point
    control2: Point
    point: Point

    def transformed(self, fn: PointMapping) -> "CubicTo":
        return CubicTo(fn(self.control1), fn(self.control2), fn(self.point))


@dataclass(frozen=True, slots=True)
class Close:
    """Close the current subpath."""

    def transformed(self, fn: PointMapping) -> "Close":  # noqa: ARG002
        return self


PathCommand = MoveTo | LineTo | QuadTo | CubicTo | Close


def translate_commands(
    commands: tuple[PathCommand, ...], dx: float, dy: float
) -> tuple[PathCommand, ...]:
    """Translate every command, keeping the command structure.

    Args:
        commands: Path commands to move
        dx: Horizontal offset
        dy: Vertical offset

    Returns:
        New tuple of commands
    """
    return tuple(command.transformed(lambda p: p.translated(dx, dy)) for command in commands)


@dataclass(frozen=True, slots=True)
class Contour:
    """A flattened polyline produced from one subpath.

    If the subpath was closed, the first and last points coincide.

    Attributes:
        points: Ordered sample points
        closed: True if the subpath ended with a Close command
    """

    points: tuple[Point, ...]
    closed: bool = False

    @property
    def is_degenerate(self) -> bool:
        """Contours with fewer than two points cannot form an edge."""
        return len(self.points) < 2

    def edges(self) -> list[tuple[Point, Point]]:
        """Consecutive point pairs, without wrapping past the last point."""
        return list(zip(self.points, self.points[1:], strict=False))


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned bounding box.

    Absence of bounds is represented by ``None`` at the call site, never by a
    zero-sized box.

    Attributes:
        min_x: Left edge
        min_y: Top edge (canvas coordinates are y-down)
        max_x: Right edge
        max_y: Bottom edge
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_point(cls, point: Point) -> "BoundingBox":
        """Zero-area box at a single point."""
        return cls(point.x, point.y, point.x, point.y)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Point:
        return Point((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    def contains(self, point: Point) -> bool:
        """Check whether a point lies inside or on the box."""
        return self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the four edges
        """
        return {
            "min_x": self.min_x,
            "min_y": self.min_y,
            "max_x": self.max_x,
            "max_y": self.max_y,
        }
