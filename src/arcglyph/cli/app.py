"""CLI application entry point for arcglyph.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from arcglyph import __version__
from arcglyph.cli.output import (
    console,
    create_progress,
    print_cancellation_notice,
    print_commands,
    print_endpoints_table,
    print_error,
    print_font_info,
    print_header,
    print_probe_result,
    print_step,
    print_success,
)
from arcglyph.config import (
    ArcGlyphSettings,
    LoggingConfig,
    ProcessingConfig,
    RenderConfig,
)
from arcglyph.core import sdf_from_endpoints, to_arc_cmds, wedge_contains_point
from arcglyph.core.processor import GlyphProcessor, outline_to_endpoints
from arcglyph.domain import INFINITY, Arc, Endpoint, GlyphOutline, Point
from arcglyph.exceptions import ArcGlyphError, FontLoadError
from arcglyph.io import FontReader

# Create the Typer app
app = typer.Typer(
    name="arcglyph",
    help="Convert glyph outlines to circular-arc paths and inspect them.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Arcglyph[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
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
    """Convert glyph outlines to circular-arc paths and inspect them."""


def _check_font_path(font: Path) -> None:
    if not font.exists():
        print_error(
            f"Input file not found: {font}",
            details=f"The file '{font}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not font.is_file():
        print_error(
            f"Input path is not a file: {font}",
            details="Please provide a path to a TTF or OTF font file.",
        )
        raise typer.Exit(code=1)


def _check_char(char: str) -> None:
    if len(char) != 1:
        print_error(f"Expected a single character, got {char!r}")
        raise typer.Exit(code=1)


def _load_glyph(
    font: Path, char: str, settings: ArcGlyphSettings
) -> tuple[GlyphOutline, list[Endpoint]]:
    with FontReader(font) as reader:
        outline = reader.get_outline(char)
    endpoints, _ = outline_to_endpoints(outline, settings.approximation)
    return outline, endpoints


@app.command()
def render(
    font: Annotated[
        Path,
        typer.Argument(
            help="Path to input TTF/OTF font file",
            show_default=False,
        ),
    ],
    text: Annotated[
        str,
        typer.Argument(
            help="Characters to render",
            show_default=False,
        ),
    ],
    output_dir: Annotated[
        Path,
        typer.Option(
            "--output-dir",
            "-o",
            help="Directory for SVG files",
        ),
    ] = Path("arcglyph-out"),
    size: Annotated[
        float,
        typer.Option(
            "--size",
            "-s",
            help="Rendered em size in output units",
            min=1.0,
        ),
    ] = 256.0,
    offset_x: Annotated[
        float,
        typer.Option(
            "--offset-x",
            help="Horizontal offset applied after scaling",
        ),
    ] = 0.0,
    offset_y: Annotated[
        float,
        typer.Option(
            "--offset-y",
            help="Vertical offset applied after scaling",
        ),
    ] = 0.0,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: auto)",
            min=1,
        ),
    ] = None,
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
) -> None:
    """Render each character of TEXT as a debug SVG of its arc path.

    Example:
        arcglyph render Roboto-Regular.ttf abc -o out

    This writes out/U+0061_a.svg, out/U+0062_b.svg and out/U+0063_c.svg.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    _check_font_path(font)

    if not text:
        print_error("Nothing to render", details="TEXT must contain at least one character.")
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = ArcGlyphSettings(
        render=RenderConfig(
            size=size,
            offset_x=offset_x,
            offset_y=offset_y,
        ),
        processing=ProcessingConfig(
            max_workers=workers,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )

    try:
        if not quiet:
            print_step("Loading font")
            with FontReader(font) as reader:
                print_font_info(
                    font_path=str(font),
                    font_type=reader.format,
                    glyph_count=reader.glyph_count,
                    upm=reader.units_per_em,
                )
            print_step("Rendering")

        processor = GlyphProcessor(settings)
        distinct = len(dict.fromkeys(text))

        try:
            if not quiet:
                with create_progress() as progress:
                    task_id = progress.add_task(f"Rendering {distinct} glyphs", total=distinct)

                    def update_progress(completed: int, *_: object) -> None:
                        progress.update(task_id, completed=completed)

                    stats = processor.process(
                        font_path=font,
                        text=text,
                        output_dir=output_dir,
                        max_workers=workers,
                        progress_callback=update_progress,
                    )
            else:
                stats = processor.process(
                    font_path=font,
                    text=text,
                    output_dir=output_dir,
                    max_workers=workers,
                )
        except KeyboardInterrupt:
            if not quiet:
                print_cancellation_notice()
            raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code

        if not quiet:
            print_success(
                output_dir=str(output_dir),
                total_time_s=stats.duration_seconds,
                rendered=stats.rendered_count,
                arcs=stats.arc_count,
                errors=stats.error_count,
                max_error=stats.max_error,
                outputs=stats.outputs if verbose else (),
            )
            for glyph_name, error in stats.errors:
                print_error(f"{glyph_name}: {error}")

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except ArcGlyphError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def endpoints(
    font: Annotated[
        Path,
        typer.Argument(help="Path to input TTF/OTF font file", show_default=False),
    ],
    char: Annotated[
        str,
        typer.Argument(help="Character to convert", show_default=False),
    ],
) -> None:
    """Print the arc endpoint sequence and path commands of a glyph (font units)."""
    _check_font_path(font)
    _check_char(char)

    settings = ArcGlyphSettings()
    try:
        outline, glyph_endpoints = _load_glyph(font, char, settings)
        commands = to_arc_cmds(glyph_endpoints)
    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except ArcGlyphError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_endpoints_table(outline.name, glyph_endpoints)
    print_commands(commands)


@app.command()
def probe(
    font: Annotated[
        Path,
        typer.Argument(help="Path to input TTF/OTF font file", show_default=False),
    ],
    char: Annotated[
        str,
        typer.Argument(help="Character to probe", show_default=False),
    ],
    x: Annotated[
        float,
        typer.Option("--x", help="Query x in font units", show_default=False),
    ],
    y: Annotated[
        float,
        typer.Option("--y", help="Query y in font units", show_default=False),
    ],
) -> None:
    """Report the signed distance from a point to a glyph's arc outline."""
    _check_font_path(font)
    _check_char(char)

    settings = ArcGlyphSettings()
    try:
        _, glyph_endpoints = _load_glyph(font, char, settings)
        p = Point(x, y)
        distance, index = sdf_from_endpoints(glyph_endpoints, p)
    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except ArcGlyphError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    in_wedge: bool | None = None
    if distance != INFINITY:
        start = glyph_endpoints[index]
        end = glyph_endpoints[index + 1]
        in_wedge = wedge_contains_point(Arc(start.point, end.point, end.d), p)

    print_probe_result(x, y, distance, index, glyph_endpoints, in_wedge)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
