"""Command-line interface for icondiff.

This module provides the CLI using Typer. The diff report is written to
stdout as plain lines; headers and errors go to stderr with rich output.

Key features:
- Outline or raster comparison modes
- Icon name filtering
- Strict axis and location policies
- Parallel comparison across worker processes
"""

from icondiff.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
