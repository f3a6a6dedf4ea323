"""CLI application entry point for extrudemark.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated, Any

import typer

from extrudemark import __version__
from extrudemark.cli.output import (
    SYM_DOT,
    SYM_OK,
    console,
    print_error,
    print_header,
    print_source_info,
    print_step,
    print_success,
)
from extrudemark.config import BrandSettings, LoggingConfig
from extrudemark.core import BrandAssetGenerator
from extrudemark.exceptions import (
    ConfigurationError,
    ExtrudeMarkError,
    FontLoadError,
    GlyphNotFoundError,
    MalformedOutlineError,
    OutputError,
)

# Create the Typer app
app = typer.Typer(
    name="extrudemark",
    help="Render extruded, pseudo-3D wordmarks and icons as SVG.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Extrudemark[/bold blue] v{__version__}")
        raise typer.Exit()


def parse_option_pairs(pairs: list[str]) -> dict[str, str]:
    """Parse KEY=VALUE strings into a flat option mapping.

    A bare KEY means "true", as in ``--option transparent``.

    Args:
        pairs: Strings such as ["c1=#ff0000", "seed=3"]

    Returns:
        Flat option mapping

    Raises:
        ConfigurationError: If a key is empty
    """
    options: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip().lstrip("-")
        if not key:
            raise ConfigurationError(f"Invalid option '{pair}': expected KEY=VALUE")
        options[key] = value if sep else "true"
    return options


@app.command()
def render(
    text: Annotated[
        str | None,
        typer.Option("--text", "-t", help="Wordmark text (default: Pluribus)", show_default=False),
    ] = None,
    icon_text: Annotated[
        str | None,
        typer.Option("--icon-text", "-i", help="Icon glyph (default: P)", show_default=False),
    ] = None,
    font: Annotated[
        Path | None,
        typer.Option("--font", "-f", help="TTF/OTF font (default: built-in block letters)"),
    ] = None,
    out_dir: Annotated[
        Path | None,
        typer.Option("--out-dir", "-o", help="Output directory (default: assets)"),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", "-s", help="Random seed (default: 7)"),
    ] = None,
    depth: Annotated[
        float | None,
        typer.Option("--depth", help="Extrusion depth", min=0.0),
    ] = None,
    depth_angle: Annotated[
        float | None,
        typer.Option("--depth-angle", help="Extrusion direction in degrees"),
    ] = None,
    depth_jitter: Annotated[
        float | None,
        typer.Option("--depth-jitter", help="Random spread of the extrusion direction", min=0.0),
    ] = None,
    tilt: Annotated[
        float | None,
        typer.Option("--tilt", help="Maximum per-glyph rotation range in degrees", min=0.0),
    ] = None,
    tracking: Annotated[
        float | None,
        typer.Option("--tracking", help="Extra spacing after each glyph"),
    ] = None,
    curve_res: Annotated[
        int | None,
        typer.Option("--curve-res", help="Samples per curve segment", min=1),
    ] = None,
    font_size: Annotated[
        float | None,
        typer.Option("--font-size", help="Wordmark font size"),
    ] = None,
    width: Annotated[
        float | None,
        typer.Option("--width", help="Fixed canvas width (requires --height)"),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", help="Fixed canvas height (requires --width)"),
    ] = None,
    opaque: Annotated[
        bool,
        typer.Option("--opaque", help="Draw the background rectangle"),
    ] = False,
    option: Annotated[
        list[str] | None,
        typer.Option(
            "--option",
            "-O",
            help="Raw option as KEY=VALUE (e.g. c1=#78b3d6, topFill=#fff); repeatable",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Lay out and report sizes without writing files",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Render an extruded wordmark and icon as SVG.

    Each glyph gets a seeded random tilt and extrusion direction, so the same
    seed always produces the same files.

    Example:
        extrudemark --text Pluribus --font Inter-Black.ttf --seed 7

    This will write assets/pluribus-logo.svg and assets/pluribus-favicon.svg.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    try:
        options: dict[str, Any] = parse_option_pairs(option or [])
        explicit = {
            "text": text,
            "iconText": icon_text,
            "font": font,
            "outDir": out_dir,
            "seed": seed,
            "depth": depth,
            "depthAngle": depth_angle,
            "depthJitter": depth_jitter,
            "tilt": tilt,
            "tracking": tracking,
            "curveRes": curve_res,
            "fontSize": font_size,
            "width": width,
            "height": height,
        }
        options.update({k: v for k, v in explicit.items() if v is not None})
        if opaque:
            options["transparent"] = False

        settings = BrandSettings.from_options(options)
        settings = settings.model_copy(
            update={
                "logging": LoggingConfig(
                    log_file=log_file,
                    log_level="ERROR" if quiet else ("INFO" if verbose else log_level),
                )
            }
        )

        if not quiet:
            print_header(__version__)
            print_step("Loading outlines")
            print_source_info(
                source=str(settings.output.font_path or "built-in block letters"),
                text=settings.layout.text,
                icon_text=settings.layout.icon_text,
                seed=settings.seed,
            )

        generator = BrandAssetGenerator(settings)

        if dry_run:
            _handle_dry_run(generator, quiet)
            raise typer.Exit(code=0)

        if not quiet:
            print_step("Rendering")

        stats = generator.generate()

        if not quiet:
            print_success(
                files=stats.files_written,
                total_time_s=stats.duration_seconds,
                glyphs=stats.glyph_count,
                faces=stats.face_count,
                dropped_edges=stats.dropped_edges,
            )

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except GlyphNotFoundError as e:
        print_error(str(e), details="Use a font that covers this character, or change the text.")
        raise typer.Exit(code=1)
    except MalformedOutlineError as e:
        print_error(f"Corrupt outline: {e}")
        raise typer.Exit(code=1)
    except OutputError as e:
        print_error(f"Could not write output: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except ExtrudeMarkError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _handle_dry_run(generator: BrandAssetGenerator, quiet: bool) -> None:
    """Handle --dry-run mode.

    Args:
        generator: Configured generator
        quiet: Suppress output
    """
    if not quiet:
        print_step("Laying out (dry run)")

    wordmark, icon = generator.build()

    if not quiet:
        console.print("\n[bold]Layout[/bold]\n")
        for name, path, layout in (
            ("Wordmark", generator.logo_path, wordmark),
            ("Icon", generator.icon_path, icon),
        ):
            width, height = generator.renderer.canvas_size(layout)
            console.print(
                f"  {name:<9} {len(layout.geometries)} glyphs {SYM_DOT} "
                f"{layout.face_count} faces {SYM_DOT} {width:.0f}×{height:.0f}"
            )
            console.print(f"            would write {path}", markup=False, highlight=False)
        console.print(f"\n[bold green]{SYM_OK} Dry run complete[/bold green] – no files written")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
