"""SVG rendering and writing of layout results.

This module turns a LayoutResult into an svgwrite Drawing and persists it.

Key classes:
- SvgRenderer: Build the SVG document for a layout
- SvgWriter: Save a document to a destination path
"""

from pathlib import Path

import svgwrite
from svgwrite.container import Group

from extrudemark.config import BrandSettings
from extrudemark.domain import (
    Close,
    CubicTo,
    ExtrusionGeometry,
    LayoutMode,
    LayoutResult,
    LineTo,
    MoveTo,
    PathCommand,
    QuadTo,
)
from extrudemark.exceptions import OutputError

FACE_STROKE_WIDTH = 0.6
BACK_STROKE_WIDTH = 1.0
WORDMARK_CORNER_RADIUS = 16.0
ICON_CORNER_RATIO = 0.12


def fmt(value: float) -> str:
    """Format a coordinate with at most two decimals."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def path_data(commands: tuple[PathCommand, ...]) -> str:
    """Serialize path commands to an SVG ``d`` attribute.

    Args:
        commands: Path commands in canvas coordinates

    Returns:
        Path data string, empty if there are no commands
    """
    parts: list[str] = []
    for command in commands:
        if isinstance(command, MoveTo):
            parts.append(f"M{fmt(command.point.x)} {fmt(command.point.y)}")
        elif isinstance(command, LineTo):
            parts.append(f"L{fmt(command.point.x)} {fmt(command.point.y)}")
        elif isinstance(command, QuadTo):
            c, p = command.control, command.point
            parts.append(f"Q{fmt(c.x)} {fmt(c.y)} {fmt(p.x)} {fmt(p.y)}")
        elif isinstance(command, CubicTo):
            c1, c2, p = command.control1, command.control2, command.point
            parts.append(
                f"C{fmt(c1.x)} {fmt(c1.y)} {fmt(c2.x)} {fmt(c2.y)} {fmt(p.x)} {fmt(p.y)}"
            )
        elif isinstance(command, Close):
            parts.append("Z")
    return "".join(parts)


class SvgRenderer:
    """Builds SVG documents for layout results.

    Per glyph, a group rotated about the glyph's bounding-box center holds
    the side faces, the optional stroke-only back outline and, last, the
    front path so its fill and stroke cover the face seams.

    Example:
        renderer = SvgRenderer(settings)
        drawing = renderer.render(layout)
        SvgWriter(Path("logo.svg")).save(drawing)
    """

    def __init__(self, settings: BrandSettings) -> None:
        """Initialize the renderer.

        Args:
            settings: Application settings (palette and output options)
        """
        self.settings = settings

    def canvas_size(self, layout: LayoutResult) -> tuple[float, float]:
        """Final document size.

        Auto-sized layouts get the configured padding on every side; fixed
        layouts use the canvas as given.
        """
        if layout.mode == LayoutMode.AUTO:
            padding = self.settings.layout.padding
            return (layout.width + 2 * padding, layout.height + 2 * padding)
        return (layout.width, layout.height)

    def render(self, layout: LayoutResult, corner_radius: float = WORDMARK_CORNER_RADIUS) -> svgwrite.Drawing:
        """Render a layout to an SVG drawing.

        Args:
            layout: Result of a layout pass
            corner_radius: Background rectangle corner radius

        Returns:
            svgwrite Drawing (not yet saved)
        """
        palette = self.settings.palette
        width, height = self.canvas_size(layout)

        drawing = svgwrite.Drawing(
            size=(fmt(width), fmt(height)),
            viewBox=f"0 0 {fmt(width)} {fmt(height)}",
            fill="none",
            debug=False,
        )

        if not self.settings.output.transparent:
            drawing.add(
                drawing.rect(
                    insert=(0, 0),
                    size=(fmt(width), fmt(height)),
                    rx=fmt(corner_radius),
                    fill=palette.background,
                )
            )

        content = drawing.g(id="glyphs")
        if layout.mode == LayoutMode.AUTO:
            padding = self.settings.layout.padding
            dx = layout.translate_x + padding
            dy = layout.translate_y + padding
            content["transform"] = f"translate({fmt(dx)} {fmt(dy)})"

        for geometry in layout.geometries:
            content.add(self._glyph_group(drawing, geometry))

        drawing.add(content)
        return drawing

    def render_icon(self, layout: LayoutResult) -> svgwrite.Drawing:
        """Render an icon layout with the icon corner radius."""
        return self.render(layout, corner_radius=layout.width * ICON_CORNER_RATIO)

    def _glyph_group(self, drawing: svgwrite.Drawing, geometry: ExtrusionGeometry) -> Group:
        palette = self.settings.palette
        output = self.settings.output
        placement = geometry.placement

        group = drawing.g(
            id=f"glyph-{placement.index}",
            transform=(
                f"rotate({fmt(placement.rotation)} "
                f"{fmt(geometry.center.x)} {fmt(geometry.center.y)})"
            ),
        )

        for face in geometry.faces:
            group.add(
                drawing.polygon(
                    points=[(fmt(p.x), fmt(p.y)) for p in face.polygon],
                    fill=face.color,
                    stroke=face.color,
                    stroke_width=FACE_STROKE_WIDTH,
                    stroke_linejoin="round",
                )
            )

        front_d = path_data(geometry.front)
        if not front_d:
            return group

        if output.back_outline:
            group.add(
                drawing.path(
                    d=path_data(geometry.back),
                    fill="none",
                    stroke=palette.stroke,
                    stroke_width=BACK_STROKE_WIDTH,
                    stroke_linejoin="round",
                )
            )

        group.add(
            drawing.path(
                d=front_d,
                fill=palette.top_fill,
                stroke=palette.stroke,
                stroke_width=output.stroke_width,
                stroke_linejoin="round",
                paint_order="stroke",
            )
        )
        return group


class SvgWriter:
    """Writes SVG documents to disk.

    Example:
        writer = SvgWriter(Path("assets/logo.svg"))
        writer.save(drawing)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the writer.

        Args:
            output_path: Destination file
        """
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        return self._output_path

    def save(self, drawing: svgwrite.Drawing) -> None:
        """Save the drawing as UTF-8, creating the parent directory.

        Raises:
            OutputError: If the file cannot be written
        """
        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            drawing.saveas(str(self._output_path), pretty=True)
        except OSError as e:
            raise OutputError(str(self._output_path), str(e)) from e

    @staticmethod
    def asset_path(out_dir: Path, text: str, suffix: str, file_name: str | None = None) -> Path:
        """Destination for an asset.

        Converts: ("assets", "Pluribus", "logo") -> assets/pluribus-logo.svg

        Args:
            out_dir: Output directory
            text: Text the asset is named after
            suffix: Asset kind ("logo" or "favicon")
            file_name: Explicit file name overriding the derived one

        Returns:
            Path of the SVG file
        """
        if file_name:
            return out_dir / file_name
        slug = "".join(c if c.isalnum() else "-" for c in text.lower()).strip("-")
        while "--" in slug:
            slug = slug.replace("--", "-")
        return out_dir / f"{slug or 'mark'}-{suffix}.svg"
