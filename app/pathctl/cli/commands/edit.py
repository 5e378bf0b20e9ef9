"""Commands that build a new path string.

The result is written to stdout as a single delimited line, meant to
be captured by the shell:

    export PATH="$(pathctl add ~/.local/bin)"
"""

import logging
from typing import Annotated

import typer

from pathctl.cli.types import current_segments, emit_path, get_filesystem, get_options
from pathctl.core.pathlist import add_path, append_path, new_path

logger = logging.getLogger(__name__)

DirectoriesArg = Annotated[
    list[str] | None,
    typer.Argument(help="Directories (or delimited lists of directories)."),
]


def new(ctx: typer.Context, directories: DirectoriesArg = None) -> None:
    """Build a new path from directories."""
    options = get_options(ctx)
    path = new_path(directories or [], options.delimiter)
    emit_path(path, options, get_filesystem(ctx))


def add(ctx: typer.Context, directories: DirectoriesArg = None) -> None:
    """Add directories to the front of the path."""
    options = get_options(ctx)
    current = current_segments(options)
    path = add_path(current, directories or [], options.delimiter)
    logger.debug("Prepended %d of %d directories", len(path) - len(current), len(directories or []))
    emit_path(path, options, get_filesystem(ctx))


def append(ctx: typer.Context, directories: DirectoriesArg = None) -> None:
    """Add directories to the back of the path."""
    options = get_options(ctx)
    current = current_segments(options)
    path = append_path(current, directories or [], options.delimiter)
    logger.debug("Appended %d of %d directories", len(path) - len(current), len(directories or []))
    emit_path(path, options, get_filesystem(ctx))
