"""Config command implementation.

Shows and edits the persisted settings, most importantly the export
folder that extracted APKs are written into.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from apkctl.core.paths import get_settings_path
from apkctl.core.settings import SettingsError, load_settings
from apkctl.storage.location import ExportLocation
from apkctl.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and edit apkctl settings.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the current settings."""
    try:
        settings = load_settings()
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    table = Table(
        title="Settings",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", no_wrap=True)
    table.add_column("Value")

    table.add_row("export_location", str(settings.export_location or "[muted]not set[/muted]"))
    table.add_row("include_system_apps", str(settings.include_system_apps).lower())
    table.add_row("adb_path", settings.adb_path)
    table.add_row("serial", settings.serial or "[muted]only attached device[/muted]")

    console.print(table)
    console.print(f"\n[dim]{get_settings_path()}[/]")


@app.command("set-location")
def set_location(
    folder: Annotated[
        Path,
        typer.Argument(help="Folder to export APKs into."),
    ],
    create: Annotated[
        bool,
        typer.Option("--create", help="Create the folder if it doesn't exist."),
    ] = False,
) -> None:
    """Set the folder extracted APKs are written into."""
    folder = folder.expanduser()

    if not folder.is_dir():
        if not create:
            print_error(f"Not a folder: {folder} (use --create to create it)")
            raise typer.Exit(code=1)
        try:
            folder.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            print_error(f"Cannot create {folder}: {e}")
            raise typer.Exit(code=1) from e

    try:
        stored = ExportLocation().set_location(folder)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Export location set to {stored}")


@app.command("reset-location")
def reset_location() -> None:
    """Forget the export folder; the next extraction asks again."""
    try:
        ExportLocation().clear_location()
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_info("Export location cleared.")
