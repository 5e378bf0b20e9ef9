"""CLI package for pathctl.

This package contains the Typer application and all subcommands.
"""

from pathctl.cli.main import app

__all__ = ["app"]
