"""Command-line interface for extrudemark.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Flat KEY=VALUE options mirroring the configuration surface
- Verbose/quiet output modes
- Dry-run mode that reports layout sizes without writing
- Detailed error reporting
"""

from extrudemark.cli.app import cli, main

__all__ = ["cli", "main"]
