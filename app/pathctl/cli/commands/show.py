"""Print the current path one directory per line."""

import typer

from pathctl.cli.types import current_segments, emit_path, get_filesystem, get_options


def print_path(ctx: typer.Context) -> None:
    """Print the current path one directory per line."""
    options = get_options(ctx)
    emit_path(current_segments(options), options, get_filesystem(ctx), pretty=True)
