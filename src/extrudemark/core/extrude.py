"""Extrusion side-face construction.

Given flattened front contours and an offset vector, builds the quadrilateral
side faces that connect the front outline to its translated back copy.

Face polygons use the vertex order [a+offset, b+offset, b, a]. For concave
contours combined with large offsets this polygon can self-intersect; the
decorative depths used for wordmarks keep that out of sight, so the order
is kept as is.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from extrudemark.domain import Contour, PathCommand, Point, SideFace, translate_commands

DEFAULT_FACE_EPSILON = 0.45

# (face_index, glyph_index) -> color
FaceColorSelector = Callable[[int, int], str]


def cycle_colors(colors: Sequence[str]) -> FaceColorSelector:
    """Create a selector that cycles through colors face by face.

    The glyph index shifts the starting color so neighbouring glyphs do not
    begin on the same accent.

    Args:
        colors: Non-empty list of colors

    Returns:
        Face color selector

    Raises:
        ValueError: If colors is empty
    """
    palette = tuple(colors)
    if not palette:
        raise ValueError("At least one face color is required")

    def select(face_index: int, glyph_index: int) -> str:
        return palette[(face_index + glyph_index) % len(palette)]

    return select


@dataclass(frozen=True, slots=True)
class FaceSet:
    """Faces built for one glyph plus the number of suppressed edges."""

    faces: tuple[SideFace, ...]
    dropped_edges: int


class ExtrusionBuilder:
    """Builds side faces and back paths for extruded glyphs.

    Example:
        builder = ExtrusionBuilder(color_selector=cycle_colors(["#f00", "#0f0"]))
        face_set = builder.build_faces(contours, Point(12, -5), glyph_index=0)
    """

    def __init__(
        self,
        color_selector: FaceColorSelector,
        face_epsilon: float = DEFAULT_FACE_EPSILON,
    ) -> None:
        """Initialize the builder.

        Args:
            color_selector: Maps (face_index, glyph_index) to a fill color
            face_epsilon: Edges shorter than this produce no face
        """
        self.color_selector = color_selector
        self.face_epsilon = face_epsilon

    def build_faces(
        self,
        contours: Sequence[Contour],
        offset: Point,
        glyph_index: int,
    ) -> FaceSet:
        """Build side faces for all contours of one glyph.

        The face counter runs across every contour of the glyph, so color
        cycling continues from one contour to the next. Degenerate contours
        are skipped. Edges are consecutive point pairs only; a closed contour
        already repeats its start point, so closure is covered without
        wrapping.

        Args:
            contours: Flattened front contours
            offset: Extrusion vector
            glyph_index: Index of the glyph among drawn glyphs

        Returns:
            FaceSet with faces in drawing order
        """
        faces: list[SideFace] = []
        dropped = 0
        face_index = 0

        for contour in contours:
            if contour.is_degenerate:
                continue
            for a, b in contour.edges():
                if a.distance_to(b) < self.face_epsilon:
                    dropped += 1
                    continue
                color = self.color_selector(face_index, glyph_index)
                faces.append(SideFace(a=a, b=b, offset=offset, color=color))
                face_index += 1

        return FaceSet(faces=tuple(faces), dropped_edges=dropped)

    @staticmethod
    def back_path(commands: tuple[PathCommand, ...], offset: Point) -> tuple[PathCommand, ...]:
        """Front path commands translated by the offset."""
        return translate_commands(commands, offset.x, offset.y)
