"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted messages and summaries.
"""


from rich.console import Console
from rich.markup import escape
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Extrudemark[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_source_info(source: str, text: str, icon_text: str, seed: int) -> None:
    """Print outline source and text information.

    Args:
        source: Font path or built-in source name
        text: Wordmark text
        icon_text: Icon text
        seed: PRNG seed
    """
    # Use Text to safely handle paths and user text with markup characters
    line1 = Text("  ")
    line1.append(source)
    console.print(line1)
    line2 = Text(f"  text {SYM_DOT} ")
    line2.append(repr(text))
    line2.append(f" {SYM_DOT} icon ")
    line2.append(repr(icon_text))
    line2.append(f" {SYM_DOT} seed {seed}")
    console.print(line2)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    files: list[tuple[str, float, float]],
    total_time_s: float,
    glyphs: int,
    faces: int,
    dropped_edges: int,
) -> None:
    """Print success message with summary.

    Args:
        files: Written files as (path, width, height)
        total_time_s: Total time in seconds
        glyphs: Number of glyphs drawn
        faces: Number of side faces
        dropped_edges: Number of edges too short for a face
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    for path, width, height in files:
        line = Text("  ")
        line.append(path, style="bold")
        line.append(f" ({width:.0f}×{height:.0f})")
        console.print(line)

    console.print(
        f"  {glyphs} glyphs {SYM_DOT} {faces} faces {SYM_DOT} {dropped_edges} short edges skipped"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
