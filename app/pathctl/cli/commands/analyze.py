"""Analyze the current path for problems."""

from typing import Annotated

import typer

from pathctl.cli.display import print_report, print_report_json
from pathctl.cli.types import get_filesystem, get_options, read_current_path
from pathctl.core.analyzer import analyze_path


def analyze(
    ctx: typer.Context,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the report as JSON."),
    ] = False,
) -> None:
    """Report invalid directories, duplicate directories and shadowed files."""
    options = get_options(ctx)
    report = analyze_path(
        read_current_path(options),
        get_filesystem(ctx),
        mode=options.mode,
        delimiter=options.delimiter,
    )

    if as_json:
        print_report_json(report)
        return

    print_report(report)
