"""Command-line interface for bmfontloader.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Font summary with pages, glyph and kerning tables
- Encoding detection for any number of files
- Forced-encoding loads for mislabelled files
- Detailed error reporting
"""

from bmfontloader.cli.app import cli, main

__all__ = ["cli", "main"]
