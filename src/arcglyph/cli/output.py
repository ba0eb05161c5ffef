"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""

from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from arcglyph.core.path import ArcCommands, format_number
from arcglyph.domain import Endpoint

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for glyph rendering.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Arcglyph[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, font_type: str, glyph_count: int, upm: int) -> None:
    """Print font information.

    Args:
        font_path: Path to the font file
        font_type: Font format type (e.g., "TrueType", "OpenType")
        glyph_count: Total number of glyphs in font
        upm: Units per em value
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(font_path)
    line1.append(f" ({font_type})")
    console.print(line1)
    console.print(f"  {glyph_count:,} glyphs {SYM_DOT} {upm:,} UPM")


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
    output_dir: str,
    total_time_s: float,
    rendered: int,
    arcs: int,
    errors: int,
    max_error: float,
    outputs: Sequence[Path] = (),
) -> None:
    """Print success message with summary.

    Args:
        output_dir: Directory holding the SVG files
        total_time_s: Total processing time in seconds
        rendered: Number of glyphs rendered
        arcs: Total number of arcs emitted
        errors: Number of errors encountered
        max_error: Largest approximation error, in font units
        outputs: SVG files to list (empty to skip the listing)
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_dir, style="bold")
    console.print(line)

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {rendered} glyphs {SYM_DOT} {arcs} arcs {SYM_DOT} "
        f"[{error_style}]{errors} errors[/{error_style}]"
    )
    console.print(f"  max error {max_error:.3f} units")

    for output in outputs:
        console.print(Text(f"  {output.name}"))


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancellation_notice() -> None:
    """Print cancellation acknowledgment."""
    console.print(f"\n{SYM_DOT} Cancelling... waiting for in-progress glyphs")


def _format_d(d: float) -> str:
    if d == float("inf"):
        return "inf"
    return format_number(d)


def print_endpoints_table(glyph_name: str, endpoints: Sequence[Endpoint]) -> None:
    """Print an endpoint sequence as a table.

    Args:
        glyph_name: Glyph name for the table title
        endpoints: Endpoint sequence
    """
    table = Table(title=f"{glyph_name} {SYM_DOT} {len(endpoints)} endpoints")
    table.add_column("#", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("d", justify="right")
    table.add_column("kind")

    for i, endpoint in enumerate(endpoints):
        if endpoint.is_move():
            kind = "move"
        elif endpoint.is_line():
            kind = "line"
        else:
            kind = "arc"
        table.add_row(
            str(i),
            format_number(endpoint.x),
            format_number(endpoint.y),
            _format_d(endpoint.d),
            kind,
        )

    console.print(table)


def print_commands(commands: ArcCommands) -> None:
    """Print reconstructed path commands, one group per block.

    Args:
        commands: Path commands from to_arc_cmds
    """
    for i, group in enumerate(commands.groups):
        console.print(f"\n[bold]group {i}[/bold] {SYM_DOT} {len(group)} commands")
        for command in group:
            console.print(Text(f"  {command}"))


def print_probe_result(
    x: float,
    y: float,
    distance: float,
    index: int,
    endpoints: Sequence[Endpoint],
    in_wedge: bool | None,
) -> None:
    """Print the outcome of a signed distance probe.

    Args:
        x: Query x in font units
        y: Query y in font units
        distance: Signed distance, sign set by contour orientation
        index: Index of the start endpoint of the closest arc
        endpoints: Endpoint sequence probed
        in_wedge: Whether the point lies in the closest arc's wedge (None if
            there are no arcs)
    """
    console.print(f"\n[bold]Probe[/bold] ({format_number(x)}, {format_number(y)})\n")

    if in_wedge is None:
        console.print("  No arcs in outline")
        return

    start = endpoints[index]
    end = endpoints[index + 1]
    console.print(f"  Signed distance   {format_number(distance)}")
    console.print(
        f"  Closest arc       #{index} ({format_number(start.x)}, {format_number(start.y)})"
        f" -> ({format_number(end.x)}, {format_number(end.y)}) d={_format_d(end.d)}"
    )
    console.print(f"  In wedge          {'yes' if in_wedge else 'no'}")
