"""Extract command implementation.

Exports the APK files of installed apps into the export folder.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from apkctl.cli.display import (
    create_extractions_table,
    extractions_to_dict,
    print_batch_summary,
    print_extraction_summary,
)
from apkctl.cli.types import OutputFormat, build_store, find_app, load_with_progress
from apkctl.core.settings import SettingsError
from apkctl.core.store import DeviceAppsStore
from apkctl.utils.formatting import console, print_error, print_warning


def extract_apks(
    ctx: typer.Context,
    packages: Annotated[
        list[str] | None,
        typer.Argument(
            help="Package names to extract.",
            show_default=False,
        ),
    ] = None,
    select_all: Annotated[
        bool,
        typer.Option(
            "--all",
            "-a",
            help="Extract every listed app (narrowed by --search).",
        ),
    ] = False,
    query: Annotated[
        str | None,
        typer.Option(
            "--search",
            "-s",
            help="Fuzzy filter applied before --all.",
        ),
    ] = None,
    folder: Annotated[
        Path | None,
        typer.Option(
            "--to",
            "-t",
            help="Destination folder (default: the saved export folder).",
        ),
    ] = None,
    include_system: Annotated[
        bool | None,
        typer.Option(
            "--system/--no-system",
            help="Include system apps (default from settings).",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Extract the APK files of installed apps.

    Without --to, APKs go to the saved export folder; you are asked for
    one the first time and the answer is remembered.

    Examples:
        apkctl extract org.mozilla.firefox             # One app
        apkctl extract org.fdroid.fdroid org.videolan.vlc
        apkctl extract --all --no-system               # Every user app
        apkctl extract --all --search signal --to ./apks
    """
    if not packages and not select_all:
        print_error("Specify package names or --all.")
        raise typer.Exit(code=1)

    if folder is not None and not folder.is_dir():
        print_error(f"Destination is not a folder: {folder}")
        raise typer.Exit(code=1)

    options = ctx.obj or {}
    store = build_store(ctx, include_system_apps=include_system)
    quiet = options.get("quiet", False) or output_format == OutputFormat.JSON
    load_with_progress(store, quiet=quiet)

    if query:
        store.search(query)

    if packages and len(packages) == 1 and not select_all:
        _extract_single(store, packages[0], folder, output_format)
    else:
        _extract_batch(store, packages or [], select_all, folder, output_format)


def _extract_single(
    store: DeviceAppsStore,
    package_name: str,
    folder: Path | None,
    output_format: OutputFormat,
) -> None:
    """Extract one app and exit with its outcome."""
    app = find_app(store, package_name)
    if app is None:
        print_error(f"Package not installed: {package_name}")
        raise typer.Exit(code=1)

    try:
        extraction = store.extract_apk(app, folder=folder)
    except (RuntimeError, SettingsError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(extractions_to_dict([(app, extraction)], extraction.result)))
    else:
        print_extraction_summary(app, extraction)

    if not extraction.success:
        raise typer.Exit(code=1)


def _extract_batch(
    store: DeviceAppsStore,
    package_names: list[str],
    select_all: bool,
    folder: Path | None,
    output_format: OutputFormat,
) -> None:
    """Select the requested apps, extract them and exit with the batch outcome."""
    if select_all and not store.is_all_selected:
        store.toggle_select_all()

    missing: list[str] = []
    for package_name in package_names:
        app = find_app(store, package_name)
        if app is None:
            missing.append(package_name)
        elif not store.is_selected(app):
            store.toggle_select(app)

    if missing:
        print_error(f"Package(s) not installed: {', '.join(missing)}")
        raise typer.Exit(code=1)

    selected = store.selected
    if not selected:
        print_warning("No apps selected.")
        raise typer.Exit(code=1)

    try:
        batch = store.extract_selected_apks(folder=folder)
    except (RuntimeError, SettingsError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    rows = list(zip(selected, batch.extractions, strict=False))

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(extractions_to_dict(rows, batch.result)))
    else:
        if rows:
            console.print(create_extractions_table(rows))
        print_batch_summary(batch)

    if not batch.result.success:
        raise typer.Exit(code=1)
