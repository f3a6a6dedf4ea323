"""Curve flattening: path commands to polyline contours.

Curves are sampled parametrically at a fixed number of evenly spaced steps
rather than adaptively, so the number of samples per segment is predictable
and identical across runs.
"""

from extrudemark.core._bezier import sample_cubic, sample_quadratic
from extrudemark.domain import Close, Contour, CubicTo, LineTo, MoveTo, PathCommand, Point, QuadTo
from extrudemark.exceptions import MalformedOutlineError

DEFAULT_RESOLUTION = 12
DEFAULT_CLOSE_EPSILON = 0.25


def flatten_outline(
    commands: tuple[PathCommand, ...] | list[PathCommand],
    resolution: int = DEFAULT_RESOLUTION,
    close_epsilon: float = DEFAULT_CLOSE_EPSILON,
) -> list[Contour]:
    """Convert path commands into polyline contours.

    Each MoveTo starts a new contour. A subpath that is not closed before the
    next MoveTo (or the end of the commands) is kept as an open contour.
    On Close, the start point is appended unless the last point already lies
    within ``close_epsilon`` of it.

    Args:
        commands: Path commands of one glyph
        resolution: Samples per curve segment
        close_epsilon: Distance under which the closing point is coincident

    Returns:
        Non-degenerate contours (two or more points), in command order

    Raises:
        ValueError: If resolution is less than 1
        MalformedOutlineError: If a drawing command has no current point

    Examples:
        >>> from extrudemark.domain import MoveTo, QuadTo, Point
        >>> cmds = [MoveTo(Point(0, 0)), QuadTo(Point(5, 10), Point(10, 0))]
        >>> flatten_outline(cmds, resolution=2)[0].points
        (Point(x=0, y=0), Point(x=5.0, y=5.0), Point(x=10, y=0))
    """
    if resolution < 1:
        raise ValueError(f"resolution must be >= 1, got {resolution}")

    contours: list[Contour] = []
    current: list[Point] | None = None

    def finish(closed: bool) -> None:
        if current is not None and len(current) >= 2:
            contours.append(Contour(points=tuple(current), closed=closed))

    for index, command in enumerate(commands):
        if isinstance(command, MoveTo):
            finish(closed=False)
            current = [command.point]
            continue

        if current is None:
            raise MalformedOutlineError(
                f"{type(command).__name__} at command {index} has no current point "
                "(missing MoveTo)"
            )

        if isinstance(command, LineTo):
            current.append(command.point)

        elif isinstance(command, QuadTo):
            current.extend(sample_quadratic(current[-1], command.control, command.point, resolution))

        elif isinstance(command, CubicTo):
            current.extend(
                sample_cubic(
                    current[-1], command.control1, command.control2, command.point, resolution
                )
            )

        elif isinstance(command, Close):
            start = current[0]
            if current[-1].distance_to(start) > close_epsilon:
                current.append(start)
            finish(closed=True)
            current = None

        else:
            raise MalformedOutlineError(f"Unsupported path command at {index}: {command!r}")

    finish(closed=False)
    return contours
