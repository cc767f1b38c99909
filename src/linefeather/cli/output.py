"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from linefeather.config import StrokeStyle
from linefeather.domain import DashTable, OpacityData
from linefeather.utils import RenderStats

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
    console.print(f"\n[bold]linefeather[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_style_info(style: StrokeStyle) -> None:
    """Print stroke style summary.

    Args:
        style: Stroke style in use
    """
    cap = style.line_cap.value if style.line_cap else "butt"
    dashes = ", ".join(f"{d:g}" for d in style.dashes) if style.dashes else "solid"
    console.print(f"  width {style.line_width:g} {SYM_DOT} cap {cap} {SYM_DOT} dashes {dashes}")


def _fmt(value: float) -> str:
    return f"{value:.3f}"


def print_dash_table(table: DashTable) -> None:
    """Print the dash interval table.

    Args:
        table: Dash table to display
    """
    if table.is_solid:
        console.print("  Solid line (no dash intervals)")
        return

    grid = Table(show_header=True, header_style="bold")
    grid.add_column("#", justify="right")
    grid.add_column("start_from", justify="right")
    grid.add_column("start_to", justify="right")
    grid.add_column("end_from", justify="right")
    grid.add_column("end_to", justify="right")
    grid.add_column("opacity_mul", justify="right")
    grid.add_column("original", justify="right")

    for idx, interval in enumerate(table.intervals):
        original = "-"
        if interval.original_endpoints is not None:
            a, b = interval.original_endpoints
            original = f"{_fmt(a)}–{_fmt(b)}"
        grid.add_row(
            str(idx),
            _fmt(interval.start_from),
            _fmt(interval.start_to),
            _fmt(interval.end_from),
            _fmt(interval.end_to),
            _fmt(interval.opacity_mul),
            original,
        )

    console.print(grid)
    console.print(f"  Period {_fmt(table.total_length)} {SYM_DOT} {len(table)} intervals")


def print_sample(center_distance: float, start_distance: float, data: OpacityData) -> None:
    """Print the result of a single sample evaluation.

    Args:
        center_distance: Distance from the centerline
        start_distance: Distance along the path
        data: Evaluation result
    """
    style = "green" if data.is_in_line else "dim"
    console.print(
        f"  center {center_distance:g} {SYM_DOT} along {start_distance:g}"
    )
    console.print(
        f"  opacity [bold]{data.opacity:.4f}[/bold] {SYM_DOT} "
        f"[{style}]in line: {'yes' if data.is_in_line else 'no'}[/{style}]"
    )


def print_preview(text: str) -> None:
    """Print a character-ramp preview inside a frame.

    Args:
        text: Rendered preview lines
    """
    lines = text.split("\n")
    width = max((len(line) for line in lines), default=0)
    console.print("┌" + "─" * width + "┐")
    for line in lines:
        row = Text("│")
        row.append(line.ljust(width))
        row.append("│")
        console.print(row)
    console.print("└" + "─" * width + "┘")


def format_duration(seconds: float) -> str:
    """Format a render duration, e.g. "850us", "12.4ms", "1.25s" or "2m 03.0s"."""
    if seconds >= 60:
        minutes, rest = divmod(seconds, 60)
        return f"{int(minutes)}m {rest:04.1f}s"
    if seconds >= 1:
        return f"{seconds:.2f}s"
    if seconds >= 0.001:
        return f"{seconds * 1e3:.1f}ms"
    return f"{seconds * 1e6:.0f}us"


def print_render_summary(stats: RenderStats) -> None:
    """Print rendering statistics.

    Args:
        stats: Statistics from the render
    """
    console.print(
        f"\n[bold green]{SYM_OK} Rendered[/bold green] in {format_duration(stats.duration_seconds)}"
    )
    console.print(
        f"  {stats.segment_count} segments {SYM_DOT} length {stats.path_length:.1f} "
        f"{SYM_DOT} {stats.samples_evaluated} samples {SYM_DOT} {stats.pixels_covered} pixels"
    )
    if stats.skipped_segments:
        console.print(f"  [yellow]{stats.skipped_segments} zero-length segments skipped[/yellow]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
