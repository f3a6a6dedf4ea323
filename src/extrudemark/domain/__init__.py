"""Domain models for extrudemark.

This module contains the core domain models representing outlines, contours,
bounding boxes and layout results. All models are designed to be:

- Immutable (using frozen dataclasses)
- Comparable by value, so two layout passes can be checked for equality
- Independent of fonttools and svgwrite implementation details

Key classes:
- Point: An immutable 2D point
- MoveTo, LineTo, QuadTo, CubicTo, Close: Path commands
- Contour: A flattened polyline
- BoundingBox: An axis-aligned bounding box
- GlyphOutline: Outline and advance of one character
- GlyphPlacement: Position, rotation and offset of one drawn glyph
- SideFace: One extrusion side quadrilateral
- ExtrusionGeometry: Front, back and faces of one glyph
- LayoutResult: All glyphs plus canvas sizing values
"""

from extrudemark.domain.geometry import (
    BoundingBox,
    Close,
    Contour,
    CubicTo,
    LineTo,
    MoveTo,
    PathCommand,
    Point,
    QuadTo,
    translate_commands,
)
from extrudemark.domain.layout import (
    ExtrusionGeometry,
    GlyphOutline,
    GlyphPlacement,
    LayoutMode,
    LayoutResult,
    SideFace,
)

__all__: list[str] = [
    # Enums
    "LayoutMode",
    # Geometry
    "Point",
    "MoveTo",
    "LineTo",
    "QuadTo",
    "CubicTo",
    "Close",
    "PathCommand",
    "Contour",
    "BoundingBox",
    "translate_commands",
    # Layout
    "GlyphOutline",
    "GlyphPlacement",
    "SideFace",
    "ExtrusionGeometry",
    "LayoutResult",
]
