"""Layout-level domain models.

This module defines the values produced by one layout pass: glyph outlines
as delivered by an outline provider, per-glyph placements, side faces,
extrusion geometry and the overall layout result.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from extrudemark.domain.geometry import BoundingBox, Contour, PathCommand, Point


class LayoutMode(str, Enum):
    """Canvas sizing policy."""

    AUTO = "auto"
    FIXED = "fixed"


@dataclass(frozen=True, slots=True)
class GlyphOutline:
    """Outline of one character in font units (y-up).

    Attributes:
        commands: Path commands, possibly several subpaths
        advance_width: Horizontal advance in font units
    """

    commands: tuple[PathCommand, ...]
    advance_width: float

    @property
    def is_empty(self) -> bool:
        return len(self.commands) == 0


@dataclass(frozen=True, slots=True)
class GlyphPlacement:
    """Where and how one glyph is drawn.

    Attributes:
        character: The grapheme cluster being drawn
        origin: Baseline origin on the canvas
        font_size: Font size in canvas units
        rotation: Rotation in degrees about the glyph's bounding-box center
        offset: Extrusion vector (dx, dy) in canvas units
        index: Position of the glyph among drawn glyphs
    """

    character: str
    origin: Point
    font_size: float
    rotation: float
    offset: Point
    index: int


@dataclass(frozen=True, slots=True)
class SideFace:
    """Quadrilateral connecting a front edge to its translated back copy.

    Attributes:
        a: Edge start on the front contour
        b: Edge end on the front contour
        offset: Extrusion vector
        color: Fill color assigned by the face color selector
    """

    a: Point
    b: Point
    offset: Point
    color: str

    @property
    def polygon(self) -> tuple[Point, Point, Point, Point]:
        """Vertices in drawing order: a+offset, b+offset, b, a."""
        return (
            self.a.translated(self.offset.x, self.offset.y),
            self.b.translated(self.offset.x, self.offset.y),
            self.b,
            self.a,
        )


@dataclass(frozen=True, slots=True)
class ExtrusionGeometry:
    """Everything needed to draw one extruded glyph.

    Attributes:
        placement: The glyph placement this geometry was built for
        front: Front path commands in canvas coordinates
        back: Front path translated by the placement offset
        contours: Flattened, non-degenerate front contours
        faces: Side faces in drawing order
        dropped_edges: Number of edges too short to produce a face
        center: Rotation pivot (center of the front contours' bounds)
        bounds: Bounds of front and back after rotation
    """

    placement: GlyphPlacement
    front: tuple[PathCommand, ...]
    back: tuple[PathCommand, ...]
    contours: tuple[Contour, ...]
    faces: tuple[SideFace, ...]
    dropped_edges: int
    center: Point
    bounds: BoundingBox | None


@dataclass(frozen=True, slots=True)
class LayoutResult:
    """Outcome of one layout pass.

    Attributes:
        geometries: Extrusion geometry per drawn glyph, left to right
        bounds: Union of all glyph bounds, None if nothing was drawn
        width: Content width (auto) or canvas width (fixed)
        height: Content height (auto) or canvas height (fixed)
        translate_x: Shift that moves content to the origin (auto mode)
        translate_y: Shift that moves content to the origin (auto mode)
        mode: Canvas sizing policy used
    """

    geometries: tuple[ExtrusionGeometry, ...]
    bounds: BoundingBox | None
    width: float
    height: float
    translate_x: float
    translate_y: float
    mode: LayoutMode

    @property
    def is_empty(self) -> bool:
        return len(self.geometries) == 0

    @property
    def face_count(self) -> int:
        return sum(len(g.faces) for g in self.geometries)

    def to_dict(self) -> dict[str, Any]:
        """Summarize the layout for logging.

        Returns:
            Dictionary with sizes, glyph and face counts
        """
        return {
            "mode": self.mode.value,
            "glyphs": len(self.geometries),
            "faces": self.face_count,
            "width": round(self.width, 2),
            "height": round(self.height, 2),
            "bounds": self.bounds.to_dict() if self.bounds else None,
        }
