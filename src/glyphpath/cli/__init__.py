"""Command-line interface for glyphpath.

This module provides the CLI using Typer with rich output. It lays out a
string with a font and prints the path operations, SVG path data, or writes
an SVG file.
"""

from glyphpath.cli.app import cli, main

__all__ = ["cli", "main"]
