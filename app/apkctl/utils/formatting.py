"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from apkctl.core.theme import get_theme

if TYPE_CHECKING:
    from apkctl.models.application import Application


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def create_app_table(title: str = "Installed Apps") -> Table:
    """Create a pre-configured table for displaying applications.

    Args:
        title: Table title.

    Returns:
        Rich Table configured for application display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("", width=2, justify="center")
    table.add_column("App", no_wrap=True)
    table.add_column("Package", style="muted", no_wrap=True)
    table.add_column("Version", style="info", justify="right")
    return table


def format_app_row(app: Application) -> tuple[str, str, str, str]:
    """Format an application as a table row with proper styling.

    User apps get a filled circle, system apps an empty one.

    Args:
        app: The application to format.

    Returns:
        Tuple of (icon, name, package, version) with Rich markup.
    """
    style = "app_system" if app.system_app else "app_user"
    icon = f"[{style}]○[/]" if app.system_app else f"[{style}]●[/]"

    name = f"[{style}]{app.app_name}[/]"
    package = f"[muted]{app.package_name}[/]"
    version = f"[info]{app.version_label}[/]"

    return (icon, name, package, version)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
