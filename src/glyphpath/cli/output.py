"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from glyphpath.domain.path import QuadCurveTo, TextPath

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
    console.print(f"\n[bold]Glyphpath[/bold] v{version}")
    console.print("─" * 44)


def print_font_info(font_path: str, glyph_count: int, upm: int, point_size: float, dpi: float) -> None:
    """Print font information.

    Args:
        font_path: Path to the font file
        glyph_count: Total number of glyphs in font
        upm: Units per em value
        point_size: Requested point size
        dpi: Device resolution
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(font_path)
    console.print(line)
    console.print(
        f"  {glyph_count:,} glyphs {SYM_DOT} {upm:,} UPM {SYM_DOT} {point_size:g}pt @ {dpi:g} dpi"
    )


def print_ops_table(path: TextPath) -> None:
    """Print the path operations as a table.

    Args:
        path: Laid out path
    """
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("op")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("cx", justify="right")
    table.add_column("cy", justify="right")

    for i, op in enumerate(path):
        control = (
            (f"{op.control_x:.2f}", f"{op.control_y:.2f}")
            if isinstance(op, QuadCurveTo)
            else ("", "")
        )
        table.add_row(str(i), op.kind.name, f"{op.x:.2f}", f"{op.y:.2f}", *control)

    console.print(table)


def print_summary(ops: int, width: float) -> None:
    """Print layout summary.

    Args:
        ops: Number of path operations
        width: Total advance width in pixels
    """
    console.print(f"\n[bold green]{SYM_OK}[/bold green] {ops} ops {SYM_DOT} width {width:.2f}px")


def print_written(output_path: str) -> None:
    """Print the path of a written file."""
    line = Text(f"\n{SYM_OK} Wrote ")
    line.append(output_path, style="bold")
    console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
