"""Command-line interface for linefeather.

This module provides the CLI using Typer with rich output.

Commands:
- intervals: Show the dash interval table of a stroke style
- sample: Evaluate the coverage of a single sample
- render: Render a polyline as a text preview
"""

from linefeather.cli.app import cli, main

__all__ = ["cli", "main"]
