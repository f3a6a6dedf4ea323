"""Text layout engine for extruded wordmarks and icons.

This module places glyphs along a baseline using advance widths, kerning and
tracking, gives each glyph a rotation and extrusion offset, and builds its
extrusion geometry and rotated bounds.

Key components:
- LayoutEngine: Wordmark and icon layout over an outline provider
"""

from collections.abc import Callable
from dataclasses import dataclass

from extrudemark.config import BrandSettings
from extrudemark.core.bounds import bounds_of_points, bounds_of_rotated_geometry, merge_boxes
from extrudemark.core.extrude import ExtrusionBuilder, cycle_colors
from extrudemark.core.flatten import flatten_outline
from extrudemark.core.prng import SeededRandom
from extrudemark.core.text import is_whitespace, iter_clusters
from extrudemark.domain import (
    BoundingBox,
    ExtrusionGeometry,
    GlyphOutline,
    GlyphPlacement,
    LayoutMode,
    LayoutResult,
    Point,
)
from extrudemark.io.outlines import OutlineProvider
from extrudemark.utils import RenderLogger

# Fixed-canvas defaults, as fractions of the canvas height / icon size
FIXED_BASELINE_RATIO = 0.68
ICON_FONT_RATIO = 0.62
ICON_BASELINE_RATIO = 0.70

# Draws (rotation, offset) for the next glyph
Orientation = Callable[[], tuple[float, Point]]


@dataclass(frozen=True, slots=True)
class _Line:
    geometries: tuple[ExtrusionGeometry, ...]
    bounds: BoundingBox | None


class LayoutEngine:
    """Lays out extruded glyphs for a wordmark or an icon.

    Every call owns its own PRNG and bounding box, so repeated calls with
    the same inputs return equal results and independent calls can run
    side by side.

    Example:
        engine = LayoutEngine(BlockOutlineProvider(), BrandSettings())
        result = engine.layout_wordmark("ACME", seed=3)
        print(result.width, result.height)
    """

    def __init__(
        self,
        provider: OutlineProvider,
        settings: BrandSettings,
        render_logger: RenderLogger | None = None,
    ) -> None:
        """Initialize the layout engine.

        Args:
            provider: Source of outlines, advances and kerning
            settings: Validated application settings
            render_logger: Optional logger for per-glyph events
        """
        self.provider = provider
        self.settings = settings
        self.render_logger = render_logger
        self.builder = ExtrusionBuilder(
            color_selector=cycle_colors(settings.palette.accents),
            face_epsilon=settings.extrusion.face_epsilon,
        )

    def measure(self, text: str, font_size: float, tracking: float) -> float:
        """Total advance of a text run in canvas units.

        Sums ``advance + kerning`` (scaled) plus tracking for every cluster,
        spaces included.

        Args:
            text: Text to measure
            font_size: Font size in canvas units
            tracking: Extra spacing after each cluster

        Returns:
            Width of the run

        Raises:
            GlyphNotFoundError: If a character has no outline
        """
        scale = font_size / self.provider.units_per_em
        width = 0.0
        previous: str | None = None
        for cluster in iter_clusters(text):
            outline = self._cluster_outline(cluster)
            if previous is not None:
                width += self.provider.kerning(previous[0], cluster[0]) * scale
            width += outline.advance_width * scale + tracking
            previous = cluster
        return width

    def layout_wordmark(self, text: str | None = None, seed: int | None = None) -> LayoutResult:
        """Lay out the wordmark.

        Uses the fixed canvas when both canvas dimensions are configured,
        otherwise sizes the canvas to the content bounds.

        Args:
            text: Text to render (default: configured text)
            seed: PRNG seed (default: configured seed)

        Returns:
            LayoutResult for the wordmark

        Raises:
            GlyphNotFoundError: If a character has no outline
            MalformedOutlineError: If an outline is corrupt
        """
        layout_cfg = self.settings.layout
        extrusion = self.settings.extrusion
        text = layout_cfg.text if text is None else text
        rng = SeededRandom(self.settings.seed if seed is None else seed)

        def orient() -> tuple[float, Point]:
            rotation = rng.centered(extrusion.tilt)
            angle = extrusion.depth_angle + rng.centered(extrusion.depth_jitter)
            depth = extrusion.depth * (1.0 + rng.centered(extrusion.depth_variance))
            dx, dy = extrusion.offset_vector(depth, angle)
            return rotation, Point(dx, dy)

        if layout_cfg.is_fixed_canvas:
            width = float(layout_cfg.canvas_width or 0.0)
            height = float(layout_cfg.canvas_height or 0.0)
            baseline = layout_cfg.baseline
            if baseline is None:
                baseline = height * FIXED_BASELINE_RATIO
            return self.layout_fixed(
                text,
                font_size=layout_cfg.font_size,
                tracking=layout_cfg.tracking,
                canvas_width=width,
                canvas_height=height,
                baseline=baseline,
                orient=orient,
            )

        return self.layout_auto(
            text,
            font_size=layout_cfg.font_size,
            tracking=layout_cfg.tracking,
            orient=orient,
        )

    def layout_icon(self, text: str | None = None) -> LayoutResult:
        """Lay out the square icon.

        The icon glyph is centered on a fixed square canvas with a fixed
        rotation and an un-jittered offset.

        Args:
            text: Icon text (default: configured icon text)

        Returns:
            Fixed-canvas LayoutResult
        """
        layout_cfg = self.settings.layout
        extrusion = self.settings.extrusion
        text = layout_cfg.icon_text if text is None else text
        size = float(layout_cfg.icon_size)
        dx, dy = extrusion.offset_vector(
            extrusion.depth * layout_cfg.icon_depth_scale, extrusion.depth_angle
        )
        offset = Point(dx, dy)

        def orient() -> tuple[float, Point]:
            return layout_cfg.icon_rotation, offset

        return self.layout_fixed(
            text,
            font_size=size * ICON_FONT_RATIO,
            tracking=0.0,
            canvas_width=size,
            canvas_height=size,
            baseline=size * ICON_BASELINE_RATIO,
            orient=orient,
        )

    def layout_auto(
        self,
        text: str,
        font_size: float,
        tracking: float,
        orient: Orientation,
    ) -> LayoutResult:
        """Auto-sized layout: canvas derived from the content bounds.

        The line starts at x = 0 on baseline y = 0; the result carries the
        translation that moves the minimum corner to the origin.
        """
        line = self._layout_line(text, font_size, tracking, 0.0, 0.0, orient)
        if line.bounds is None:
            result = LayoutResult(
                geometries=line.geometries,
                bounds=None,
                width=0.0,
                height=0.0,
                translate_x=0.0,
                translate_y=0.0,
                mode=LayoutMode.AUTO,
            )
        else:
            result = LayoutResult(
                geometries=line.geometries,
                bounds=line.bounds,
                width=line.bounds.width,
                height=line.bounds.height,
                translate_x=-line.bounds.min_x,
                translate_y=-line.bounds.min_y,
                mode=LayoutMode.AUTO,
            )
        return result

    def layout_fixed(
        self,
        text: str,
        font_size: float,
        tracking: float,
        canvas_width: float,
        canvas_height: float,
        baseline: float,
        orient: Orientation,
    ) -> LayoutResult:
        """Fixed-canvas layout: text centered horizontally by measured width."""
        text_width = self.measure(text, font_size, tracking)
        start_x = (canvas_width - text_width) / 2
        line = self._layout_line(text, font_size, tracking, start_x, baseline, orient)
        result = LayoutResult(
            geometries=line.geometries,
            bounds=line.bounds,
            width=canvas_width,
            height=canvas_height,
            translate_x=0.0,
            translate_y=0.0,
            mode=LayoutMode.FIXED,
        )
        return result

    def _layout_line(
        self,
        text: str,
        font_size: float,
        tracking: float,
        start_x: float,
        baseline: float,
        orient: Orientation,
    ) -> _Line:
        extrusion = self.settings.extrusion
        scale = font_size / self.provider.units_per_em
        cursor = start_x
        previous: str | None = None
        total: BoundingBox | None = None
        geometries: list[ExtrusionGeometry] = []

        for cluster in iter_clusters(text):
            outline = self._cluster_outline(cluster)
            if previous is not None:
                cursor += self.provider.kerning(previous[0], cluster[0]) * scale
            previous = cluster
            advance = outline.advance_width * scale + tracking

            if is_whitespace(cluster):
                cursor += advance
                continue

            origin = Point(cursor, baseline)

            def to_canvas(p: Point) -> Point:
                return Point(origin.x + p.x * scale, origin.y - p.y * scale)

            front = tuple(command.transformed(to_canvas) for command in outline.commands)
            rotation, offset = orient()
            placement = GlyphPlacement(
                character=cluster,
                origin=origin,
                font_size=font_size,
                rotation=rotation,
                offset=offset,
                index=len(geometries),
            )

            contours = flatten_outline(
                front,
                resolution=extrusion.curve_res,
                close_epsilon=extrusion.close_epsilon,
            )
            face_set = self.builder.build_faces(contours, offset, glyph_index=placement.index)
            front_box = bounds_of_points(p for contour in contours for p in contour.points)
            center = front_box.center if front_box is not None else origin
            glyph_box = bounds_of_rotated_geometry(contours, center, rotation, offset)
            total = merge_boxes(total, glyph_box)

            geometries.append(
                ExtrusionGeometry(
                    placement=placement,
                    front=front,
                    back=self.builder.back_path(front, offset),
                    contours=tuple(contours),
                    faces=face_set.faces,
                    dropped_edges=face_set.dropped_edges,
                    center=center,
                    bounds=glyph_box,
                )
            )
            if self.render_logger is not None:
                self.render_logger.log_glyph(
                    cluster,
                    x=cursor,
                    rotation=rotation,
                    faces=len(face_set.faces),
                    dropped_edges=face_set.dropped_edges,
                )
            cursor += advance

        return _Line(geometries=tuple(geometries), bounds=total)

    def _cluster_outline(self, cluster: str) -> GlyphOutline:
        """Outline of a grapheme cluster.

        Combining marks are overlaid on the base glyph at the same origin;
        the cluster advances by the base glyph's advance.
        """
        base = self.provider.char_to_outline(cluster[0])
        if len(cluster) == 1:
            return base
        commands = list(base.commands)
        for mark in cluster[1:]:
            commands.extend(self.provider.char_to_outline(mark).commands)
        return GlyphOutline(commands=tuple(commands), advance_width=base.advance_width)
