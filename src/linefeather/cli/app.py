"""CLI application entry point for linefeather.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from linefeather import __version__
from linefeather.cli.output import (
    console,
    print_dash_table,
    print_error,
    print_header,
    print_preview,
    print_render_summary,
    print_sample,
    print_step,
    print_style_info,
)
from linefeather.config import (
    LineCap,
    LineFeatherSettings,
    LoggingConfig,
    RenderConfig,
    StrokeStyle,
)
from linefeather.core import OpacityCalculator, render_polyline
from linefeather.exceptions import LineFeatherError, PolylineError
from linefeather.utils import RenderLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="linefeather",
    help="Inspect anti-aliased coverage of stroked, dashed and capped polylines.",
    add_completion=False,
    no_args_is_help=True,
)

WidthOption = Annotated[
    float,
    typer.Option(
        "--width",
        "-w",
        help="Stroke width in pixels",
        min=0.0,
    ),
]
DashOption = Annotated[
    list[float] | None,
    typer.Option(
        "--dash",
        "-d",
        help="Dash length, repeat for a pattern (on, off, on, ...)",
    ),
]
CapOption = Annotated[
    str,
    typer.Option(
        "--cap",
        "-c",
        help="Line cap (butt|square|round)",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]linefeather[/bold blue] v{__version__}")
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
    """Inspect anti-aliased coverage of stroked, dashed and capped polylines."""


def _build_style(width: float, dashes: list[float] | None, cap: str) -> StrokeStyle:
    """Create a stroke style from CLI arguments, exiting on invalid input."""
    try:
        line_cap = LineCap(cap.lower())
    except ValueError:
        print_error(
            f"Invalid cap: {cap}",
            details="Valid values: butt, square, round",
        )
        raise typer.Exit(code=1)

    try:
        return StrokeStyle(line_width=width, dashes=dashes or None, line_cap=line_cap)
    except ValidationError as e:
        reasons = "; ".join(err["msg"] for err in e.errors())
        print_error("Invalid stroke style", details=reasons)
        raise typer.Exit(code=1)


def _parse_point(text: str) -> tuple[float, float]:
    """Parse an ``X,Y`` vertex argument.

    Args:
        text: Vertex as two comma separated numbers

    Returns:
        Tuple of (x, y)

    Raises:
        PolylineError: If the text is not two numbers
    """
    parts = text.split(",")
    if len(parts) != 2:
        raise PolylineError(f"expected X,Y but got '{text}'")
    try:
        return (float(parts[0]), float(parts[1]))
    except ValueError:
        raise PolylineError(f"expected X,Y but got '{text}'") from None


@app.command()
def intervals(
    width: WidthOption = 1.0,
    dash: DashOption = None,
    cap: CapOption = "butt",
) -> None:
    """Show the feathered dash intervals for a stroke style.

    Example:
        linefeather intervals -w 2 -d 4 -d 2 --cap round
    """
    style = _build_style(width, dash, cap)
    calculator = OpacityCalculator.from_style(style)

    print_header(__version__)
    print_style_info(style)
    print_step("Dash intervals")
    print_dash_table(calculator.dash_table)


@app.command()
def sample(
    center_distance: Annotated[
        float,
        typer.Argument(help="Distance from the path centerline", min=0.0),
    ],
    start_distance: Annotated[
        float,
        typer.Argument(help="Distance along the current segment", min=0.0),
    ],
    width: WidthOption = 1.0,
    dash: DashOption = None,
    cap: CapOption = "butt",
    traveled: Annotated[
        float,
        typer.Option(
            "--traveled",
            "-t",
            help="Length of the segments before the current one",
            min=0.0,
        ),
    ] = 0.0,
) -> None:
    """Evaluate the coverage of a single sample.

    Example:
        linefeather sample 0.5 3 -w 2 -d 4 -d 2
    """
    style = _build_style(width, dash, cap)
    calculator = OpacityCalculator.from_style(style)
    calculator.advance(traveled)

    data = calculator.evaluate(center_distance, start_distance)

    print_header(__version__)
    print_style_info(style)
    print_step("Sample")
    print_sample(center_distance, start_distance, data)


@app.command()
def render(
    points: Annotated[
        list[str],
        typer.Argument(help="Polyline vertices as X,Y pairs", show_default=False),
    ],
    width: WidthOption = 1.0,
    dash: DashOption = None,
    cap: CapOption = "butt",
    canvas_width: Annotated[
        int,
        typer.Option("--canvas-width", help="Preview width in pixels", min=1, max=400),
    ] = 60,
    canvas_height: Annotated[
        int,
        typer.Option("--canvas-height", help="Preview height in pixels", min=1, max=400),
    ] = 20,
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
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Print only the preview",
        ),
    ] = False,
) -> None:
    """Render a stroked polyline as a text preview.

    Example:
        linefeather render 2,10 30,3 58,16 -w 3 -d 6 -d 3 --cap round
    """
    style = _build_style(width, dash, cap)

    try:
        settings = LineFeatherSettings(
            stroke=style,
            render=RenderConfig(width=canvas_width, height=canvas_height),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
    except ValidationError as e:
        reasons = "; ".join(err["msg"] for err in e.errors())
        print_error("Invalid settings", details=reasons)
        raise typer.Exit(code=1)

    try:
        vertices = [_parse_point(p) for p in points]

        logger = configure_logging(
            log_file=str(settings.logging.log_file) if settings.logging.log_file else None,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
        render_logger = RenderLogger(logger)

        if not quiet:
            print_header(__version__)
            print_style_info(settings.stroke)
            print_step(f"Rendering {len(vertices)} points")

        grid = render_polyline(
            vertices,
            settings.stroke,
            settings.render.width,
            settings.render.height,
            render_logger=render_logger,
        )

        print_preview(grid.to_text(settings.render.shades))

        if not quiet:
            print_render_summary(render_logger.stats)

    except PolylineError as e:
        print_error(f"Invalid polyline: {e.reason}")
        raise typer.Exit(code=1)
    except LineFeatherError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except OSError as e:
        print_error(f"Could not open log file: {e}")
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
