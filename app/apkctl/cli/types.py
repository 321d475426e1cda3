"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

import logging
from enum import Enum
from pathlib import Path

import typer
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn

from apkctl.core.settings import SettingsError, load_settings
from apkctl.core.store import DeviceAppsStore
from apkctl.models.application import Application
from apkctl.scanners.adb import AdbScanner
from apkctl.storage.location import ExportLocation
from apkctl.utils.formatting import err_console, print_error

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def prompt_export_location() -> Path | None:
    """Ask the user for an export folder.

    An empty answer declines. A missing folder is created after confirmation.

    Returns:
        Chosen folder, or None if the user declined.
    """
    answer: str = typer.prompt(
        "Export folder (leave empty to cancel)",
        default="",
        show_default=False,
        err=True,
    )
    if not answer.strip():
        return None

    folder = Path(answer.strip()).expanduser()
    if folder.is_dir():
        return folder

    if not typer.confirm(f"Folder {folder} does not exist. Create it?", default=True, err=True):
        return None

    try:
        folder.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        print_error(f"Cannot create {folder}: {e}")
        return None
    return folder


def build_store(ctx: typer.Context, include_system_apps: bool | None = None) -> DeviceAppsStore:
    """Create a store wired to the configured device and export location.

    Args:
        ctx: Typer context holding the global options.
        include_system_apps: Override for the include_system_apps setting.

    Returns:
        DeviceAppsStore ready to load.

    Raises:
        typer.Exit: If the settings cannot be loaded or no device is available.
    """
    try:
        settings = load_settings()
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    options = ctx.obj or {}
    scanner = AdbScanner(
        adb_path=settings.adb_path,
        serial=options.get("serial") or settings.serial,
    )

    if not scanner.is_available():
        print_error("No Android device available. Check 'adb devices' and USB debugging.")
        raise typer.Exit(code=1)

    return DeviceAppsStore(
        scanner,
        ExportLocation(prompt=prompt_export_location),
        include_icons=False,
        include_system_apps=(
            settings.include_system_apps if include_system_apps is None else include_system_apps
        ),
    )


def load_with_progress(store: DeviceAppsStore, quiet: bool = False) -> None:
    """Load the store's applications, rendering "N of M" progress.

    Args:
        store: Store to load.
        quiet: Skip the progress bar.

    Raises:
        typer.Exit: If loading fails.
    """
    try:
        if quiet:
            store.load_packages()
            return

        with Progress(
            SpinnerColumn(),
            TextColumn("[info]Loading apps"),
            BarColumn(),
            MofNCompleteColumn(),
            console=err_console,
            transient=True,
        ) as progress:
            task = progress.add_task("load", total=None)

            def on_change(changed: DeviceAppsStore) -> None:
                progress.update(
                    task,
                    total=changed.total_packages_count,
                    completed=changed.loaded_packages_count,
                )

            unsubscribe = store.subscribe(on_change)
            try:
                store.load_packages()
            finally:
                unsubscribe()
    except RuntimeError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def find_app(store: DeviceAppsStore, package_name: str) -> Application | None:
    """Find a loaded application by package name."""
    for app in store.apps:
        if app.package_name == package_name:
            return app
    return None
