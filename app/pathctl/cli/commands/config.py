"""Configuration file commands.

Provides commands to show the effective configuration and to write a
default configuration file.
"""

from typing import Annotated

import typer
from rich.markup import escape

from pathctl.cli.types import get_options
from pathctl.core.config import ConfigError, PathctlConfig, save_config
from pathctl.core.paths import get_config_path
from pathctl.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or create the configuration file.",
    no_args_is_help=True,
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective settings (config file merged with options)."""
    options = get_options(ctx)
    config_path = ctx.ensure_object(dict).get("config_path") or get_config_path()
    console.print(f"[header]Config file:[/] {escape(str(config_path))}")
    console.print(f"env = {escape(repr(options.env))}")
    console.print(f"delimiter = {escape(repr(options.delimiter))}")
    console.print(f"mode = {options.mode.value!r}")
    console.print(f"pretty = {str(options.pretty).lower()}")
    console.print(f"require_env = {str(options.require_env).lower()}")


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with the default settings."""
    path = ctx.ensure_object(dict).get("config_path") or get_config_path()

    if path.exists() and not force:
        print_info(f"Config file already exists: {path} (use --force to overwrite)")
        return

    try:
        saved = save_config(PathctlConfig(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Wrote default config to {saved}")
