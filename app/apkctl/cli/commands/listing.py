"""List command implementation.

Lists the applications installed on the attached device.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from apkctl.cli.types import OutputFormat, build_store, load_with_progress
from apkctl.models.inventory import InventorySnapshot
from apkctl.utils.formatting import (
    console,
    create_app_table,
    format_app_row,
    print_error,
    print_info,
    print_warning,
)

app = typer.Typer(
    help="List apps installed on the device.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def list_apps(
    ctx: typer.Context,
    query: Annotated[
        str | None,
        typer.Option(
            "--search",
            "-s",
            help="Fuzzy filter on app name and package name.",
        ),
    ] = None,
    include_system: Annotated[
        bool | None,
        typer.Option(
            "--system/--no-system",
            help="Include system apps (default from settings).",
        ),
    ] = None,
    count_only: Annotated[
        bool,
        typer.Option(
            "--count",
            "-c",
            help="Only show app counts.",
        ),
    ] = False,
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-n",
            help="Limit number of apps to display.",
        ),
    ] = None,
    export_path: Annotated[
        Path | None,
        typer.Option(
            "--export",
            "-e",
            help="Export the listing to a JSON file.",
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
    """Load and display installed apps.

    Examples:
        apkctl list                         # All apps, as a table
        apkctl list --no-system             # User apps only
        apkctl list --search ffx            # Fuzzy search, e.g. matches firefox
        apkctl list --format json           # Output as JSON
        apkctl list --export apps.json      # Export to JSON file
    """
    if ctx.invoked_subcommand is not None:
        return

    options = ctx.obj or {}
    store = build_store(ctx, include_system_apps=include_system)
    quiet = options.get("quiet", False) or output_format == OutputFormat.JSON
    load_with_progress(store, quiet=quiet)

    if query:
        store.search(query)

    apps = store.displayable_apps

    if export_path is not None:
        export_path = export_path.resolve()
        if export_path.is_dir():
            print_error(f"Export path is a directory: {export_path}")
            raise typer.Exit(code=1)

        snapshot = InventorySnapshot.create(
            apps=apps,
            serial=_cli_serial(ctx),
            include_system_apps=store.include_system_apps,
            query=query,
        )
        try:
            export_path.parent.mkdir(parents=True, exist_ok=True)
            export_path.write_text(json.dumps(snapshot.to_dict(), indent=2))
            print_info(f"App list exported to {export_path}")
        except OSError as e:
            print_error(f"Failed to export: {e}")
            raise typer.Exit(code=1) from e

    if not store.fully_loaded:
        print_warning(
            f"Loaded {store.loaded_packages_count} of "
            f"{store.total_packages_count} expected apps."
        )

    system_count = sum(1 for a in apps if a.system_app)
    user_count = len(apps) - system_count

    if count_only:
        print_info(f"Total apps: {len(apps)}")
        console.print(f"  [app_user]User:[/] {user_count}")
        console.print(f"  [app_system]System:[/] {system_count}")
        return

    display_apps = apps[:limit] if limit else apps

    if output_format == OutputFormat.JSON:
        snapshot = InventorySnapshot.create(
            apps=display_apps,
            serial=_cli_serial(ctx),
            include_system_apps=store.include_system_apps,
            query=query,
        )
        console.print_json(json.dumps(snapshot.to_dict()))
        return

    title = f"Apps matching '{query}'" if query else "Installed Apps"
    table = create_app_table(title)
    for application in display_apps:
        table.add_row(*format_app_row(application))
    console.print(table)

    summary_parts = [
        f"Showing {len(display_apps)} of {len(apps)} apps",
        f"({user_count} user, {system_count} system)",
    ]
    if limit and len(display_apps) < len(apps):
        summary_parts.append(f"(limited to {limit})")
    if query:
        summary_parts.append(f"({store.loaded_packages_count} on device)")

    console.print(f"\n[dim]{' '.join(summary_parts)}[/]")


def _cli_serial(ctx: typer.Context) -> str | None:
    """Return the serial given on the command line, if any."""
    options = ctx.obj or {}
    return options.get("serial")
