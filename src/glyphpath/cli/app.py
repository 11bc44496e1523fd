"""CLI application entry point for glyphpath.

This module provides the main CLI interface using Typer.
"""

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from glyphpath import __version__
from glyphpath.cli.output import (
    console,
    print_error,
    print_font_info,
    print_header,
    print_ops_table,
    print_summary,
    print_written,
)
from glyphpath.config import DEFAULT_DPI, GlyphPathSettings, LayoutConfig, LoggingConfig
from glyphpath.core import FIXED_ONE, Font
from glyphpath.exceptions import ConstructionError
from glyphpath.io import to_svg_document, to_svg_path_data, write_svg
from glyphpath.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="glyphpath",
    help="Lay out text with a TrueType font and print the resulting vector path.",
    add_completion=False,
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    """What to print for the laid out text."""

    OPS = "ops"
    PATH = "path"
    SVG = "svg"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Glyphpath[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def layout(
    text: Annotated[
        str,
        typer.Argument(
            help="Text to lay out",
            show_default=False,
        ),
    ],
    font_file: Annotated[
        Path,
        typer.Argument(
            help="Path to a TrueType font file",
            show_default=False,
        ),
    ],
    size: Annotated[
        float,
        typer.Option(
            "--size",
            "-s",
            help="Font size in points",
            min=0.1,
        ),
    ] = 12.0,
    dpi: Annotated[
        float,
        typer.Option(
            "--dpi",
            help="Device resolution in dots per inch",
            min=1.0,
        ),
    ] = DEFAULT_DPI,
    x: Annotated[
        float,
        typer.Option(
            "--x",
            help="Pen start x in pixels",
        ),
    ] = 0.0,
    y: Annotated[
        float | None,
        typer.Option(
            "--y",
            help="Baseline y in pixels (default: one em below the top)",
            show_default=False,
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output: ops table, SVG path data, or SVG document",
            case_sensitive=False,
        ),
    ] = OutputFormat.OPS,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the SVG document to this file",
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
    """Lay out TEXT with FONT_FILE and print the path.

    Example:
        glyphpath "Hello" DejaVuSans.ttf --size 24 --format svg -o hello.svg
    """
    settings = GlyphPathSettings(
        layout=LayoutConfig(point_size=size, dpi=dpi),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    show_info = output_format is OutputFormat.OPS and not quiet

    try:
        font = Font.from_config(font_file, settings.layout)
    except ConstructionError as e:
        print_error(f"Could not load font: {e.reason}", details=e.source)
        raise typer.Exit(code=1) from e

    if show_info:
        print_header(__version__)
        print_font_info(
            font_path=str(font_file),
            glyph_count=font.source.glyph_count,
            upm=font.source.units_per_em,
            point_size=size,
            dpi=dpi,
        )

    em_pixels = font.scale / FIXED_ONE
    baseline = em_pixels if y is None else y

    path = font.create_text_path(text, x, baseline)

    if output_format is OutputFormat.OPS:
        print_ops_table(path)
        if not quiet:
            print_summary(len(path), path.width)
    elif output_format is OutputFormat.PATH:
        typer.echo(to_svg_path_data(path))
    else:
        height = baseline + em_pixels * 0.25
        if output is None:
            typer.echo(to_svg_document(path, height))
        else:
            write_svg(path, output, height)
            if not quiet:
                print_written(str(output))


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
