"""Command-line interface for glif2svg.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Single glif to file or stdout
- Whole UFO / glyphs directory in parallel with a progress bar
- Verbose/quiet output modes
- Detailed error reporting
"""

from glif2svg.cli.app import cli, main

__all__ = ["cli", "main"]
