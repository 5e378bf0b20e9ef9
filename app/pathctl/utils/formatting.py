"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich. Paths meant
for shell capture are written with typer.echo; everything decorative
goes through these consoles.
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

THEME = Theme(
    {
        "header": "bold #69B9A1",
        "muted": "#b2bec3",
        "path": "#0ec1c8",
        "success": "#03b971",
        "warning": "#f5b332",
        "error": "bold #f53263",
        "info": "#0ec1c8",
        "shadowed": "#f5b332",
    }
)


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Long paths must never be wrapped or highlighted
console = Console(
    theme=THEME,
    color_system=_detect_color_system(),
    soft_wrap=True,
    highlight=False,
    emoji=False,
)
err_console = Console(
    theme=THEME,
    stderr=True,
    color_system=_detect_color_system(),
    soft_wrap=True,
    highlight=False,
    emoji=False,
)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")
