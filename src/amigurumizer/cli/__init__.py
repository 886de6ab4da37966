"""Command-line interface for amigurumizer.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Progress bar for row generation
- Verbose/quiet output modes
- Text or JSON output, to a file or the console
- Detailed error reporting with the offending row and height
"""

from amigurumizer.cli.app import cli, main

__all__ = ["cli", "main"]
