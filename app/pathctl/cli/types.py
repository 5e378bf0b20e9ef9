"""Shared types and utilities for CLI commands.

The global options given before the subcommand are merged with the
configuration file once, in the main callback, and stored on the Typer
context as a PathOptions instance for the subcommands to pick up.
"""

from dataclasses import dataclass

import typer

from pathctl.core.classify import FilterMode, apply_filter
from pathctl.core.environment import PathVariableNotSetError, read_path_variable
from pathctl.core.pathlist import join, split, to_segments
from pathctl.filesystem.base import FileSystem
from pathctl.filesystem.local import LocalFileSystem
from pathctl.utils.formatting import print_error


@dataclass(frozen=True, slots=True)
class PathOptions:
    """Effective options for one invocation.

    Attributes:
        env: Environment variable holding the path.
        delimiter: Path separator.
        mode: Filtering applied to the resulting path.
        pretty: Print one directory per line instead of a joined path.
        require_env: Fail if the environment variable is unset.
    """

    env: str
    delimiter: str
    mode: FilterMode
    pretty: bool
    require_env: bool


def get_options(ctx: typer.Context) -> PathOptions:
    """Get the options stored by the main callback."""
    obj = ctx.ensure_object(dict)
    options = obj.get("options")
    if options is None:
        msg = "CLI options were not initialized"
        raise RuntimeError(msg)
    return options


def get_filesystem(ctx: typer.Context) -> FileSystem:
    """Get the filesystem backend for this invocation."""
    obj = ctx.ensure_object(dict)
    fs = obj.get("filesystem")
    if fs is None:
        fs = LocalFileSystem()
        obj["filesystem"] = fs
    return fs


def read_current_path(options: PathOptions) -> str:
    """Read the raw path string, exiting with code 1 if it is required but unset."""
    try:
        return read_path_variable(options.env, required=options.require_env)
    except PathVariableNotSetError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def emit_path(
    directories: list[str],
    options: PathOptions,
    fs: FileSystem,
    *,
    pretty: bool = False,
) -> None:
    """Filter a path and write it to stdout.

    Args:
        directories: Ordered path segments.
        options: Effective CLI options.
        fs: Filesystem backend used for filtering.
        pretty: Force one directory per line.
    """
    segments = apply_filter(to_segments(directories), options.mode, fs)
    texts = [segment.text for segment in segments]
    if pretty or options.pretty:
        for text in texts:
            typer.echo(text)
    else:
        typer.echo(join(texts, options.delimiter))


def current_segments(options: PathOptions) -> list[str]:
    """Read and split the current path."""
    return split(read_current_path(options), options.delimiter)
