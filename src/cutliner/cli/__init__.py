"""Command-line interface for cutliner.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Progress bars for multi-image sheets
- Verbose/quiet output modes
- Dry-run mode for inspecting cut lines
- Detailed error reporting
"""

from cutliner.cli.app import cli

__all__ = ["cli"]
