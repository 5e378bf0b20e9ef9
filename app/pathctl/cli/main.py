"""Main CLI application entry point.

Defines the Typer application and global options. Global options go
before the subcommand:

    pathctl --env CLASSPATH --filter print
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from pathctl import __version__
from pathctl.cli.commands import analyze, config, edit, show
from pathctl.cli.types import PathOptions
from pathctl.core.classify import FilterMode
from pathctl.core.config import ConfigError, PathctlConfig, load_config
from pathctl.core.paths import get_config_path
from pathctl.utils.formatting import err_console, print_error, print_warning

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="pathctl",
    help="Inspect and edit PATH-like environment variables.",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pathctl version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr through Rich; stdout is reserved for paths."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _flag(value: bool | None, configured: bool) -> bool:
    """Use the command-line flag if it was given, else the configured value."""
    return value if value is not None else configured


def _load_config(ctx: typer.Context, config_file: Path | None) -> PathctlConfig:
    """Load the config file, exiting on errors.

    The ``config`` subcommands still run with defaults when the file is
    broken, so that ``config init --force`` can repair it.
    """
    try:
        return load_config(config_file)
    except ConfigError as e:
        if ctx.invoked_subcommand == "config":
            print_warning(str(e))
            return PathctlConfig()
        print_error(str(e))
        raise typer.Exit(code=1) from e


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    env: Annotated[
        str | None,
        typer.Option("--env", "-e", help="Name of the path environment variable [default: PATH]."),
    ] = None,
    filter_: Annotated[
        bool | None,
        typer.Option("--filter/--no-filter", "-f/-F", help="Drop non-directories from the path."),
    ] = None,
    normalize: Annotated[
        bool | None,
        typer.Option(
            "--normalize/--no-normalize",
            "-n/-N",
            help="Filter and resolve symbolic links in the path.",
        ),
    ] = None,
    pretty: Annotated[
        bool | None,
        typer.Option("--pretty/--no-pretty", "-p/-P", help="Print one directory per line."),
    ] = None,
    delimiter: Annotated[
        str | None,
        typer.Option("--delimiter", "-d", help="Path separator [default: platform separator]."),
    ] = None,
    require_env: Annotated[
        bool | None,
        typer.Option(
            "--require-env/--allow-unset",
            help="Fail if the environment variable is not set.",
        ),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Config file to read instead of the default."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging on stderr.",
        ),
    ] = False,
) -> None:
    """pathctl - inspect and edit PATH-like environment variables.

    Prints the path one directory per line when no command is given.
    Commands that build a path print it on a single line for the shell
    to capture.
    """
    _configure_logging(verbose)
    ctx.ensure_object(dict)

    settings = _load_config(ctx, config_file)

    effective_delimiter = delimiter if delimiter is not None else settings.delimiter
    if len(effective_delimiter) != 1:
        raise typer.BadParameter(
            f"must be a single character, got {effective_delimiter!r}",
            param_hint="--delimiter",
        )

    mode = FilterMode.from_flags(
        _flag(filter_, settings.filter),
        _flag(normalize, settings.normalize),
    )

    # Store options in context for subcommands
    ctx.obj["config_path"] = config_file or get_config_path()
    ctx.obj["options"] = PathOptions(
        env=env or settings.env,
        delimiter=effective_delimiter,
        mode=mode,
        pretty=_flag(pretty, settings.pretty),
        require_env=_flag(require_env, settings.require_env),
    )
    logger.debug("Options: %s", ctx.obj["options"])

    if ctx.invoked_subcommand is None:
        show.print_path(ctx)


# Register commands
app.command("print")(show.print_path)
app.command("new")(edit.new)
app.command("add")(edit.add)
app.command("append")(edit.append)
app.command("analyze")(analyze.analyze)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
