"""Command-line interface for arcglyph.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Progress bars for glyph rendering
- Endpoint and path command tables
- Signed distance probing
- Verbose/quiet output modes
"""

from arcglyph.cli.app import cli, main

__all__ = ["cli", "main"]
