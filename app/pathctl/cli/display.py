"""Rendering of path analysis reports.

The text report has three sections, Invalid Directories, Duplicate
Directories and Shadowed Files, each printing "None" when empty.
"""

import json

from rich.markup import escape

from pathctl.models.report import PathReport
from pathctl.models.segment import SegmentStatus
from pathctl.utils.formatting import console

INDENT = "    "

_STATUS_LABELS: dict[SegmentStatus, str] = {
    SegmentStatus.MISSING: "missing",
    SegmentStatus.NOT_A_DIRECTORY: "not a directory",
}


def _display_name(text: str) -> str:
    """Return a printable, markup-safe directory name.

    An empty entry stands for the current directory.
    """
    return escape(text or ".")


def _print_section(title: str, lines: list[str]) -> None:
    """Print a section header and its indented lines, or "None"."""
    console.print(f"[header]{title}:[/]")
    if not lines:
        console.print(f"{INDENT}[muted]None[/]")
        return
    for line in lines:
        console.print(f"{INDENT}{line}")


def print_report(report: PathReport) -> None:
    """Print a human-readable analysis report."""
    invalid_lines = [
        f"[path]{_display_name(entry.segment.text)}[/] [muted]({_STATUS_LABELS[entry.status]})[/]"
        for entry in report.invalid
    ]
    _print_section("Invalid Directories", invalid_lines)
    console.print()

    duplicate_lines = [f"[path]{_display_name(d)}[/]" for d in report.duplicate_dirs]
    _print_section("Duplicate Directories", duplicate_lines)
    console.print()

    shadow_lines: list[str] = []
    for group in report.shadowed:
        shadow_lines.append(f"[path]{_display_name(group.directory.text)}[/]")
        for item in group.files:
            shadow_lines.append(
                f"{INDENT}[shadowed]{escape(item.name)}[/] -> "
                f"[path]{_display_name(item.winner.text)}[/]"
            )
    _print_section("Shadowed Files", shadow_lines)


def print_report_json(report: PathReport) -> None:
    """Print the analysis report as JSON."""
    console.print_json(json.dumps(report.to_dict()))
