"""Main CLI application entry point.

Defines the Typer application, global options and logging setup.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from apkctl import __version__
from apkctl.cli.commands import config, extract, listing
from apkctl.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="apkctl",
    help="List installed Android apps and export their APK files.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"apkctl version {__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool, quiet: bool) -> None:
    """Configure logging based on verbosity flags."""
    if verbose:
        level = logging.INFO
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True, show_path=False)],
    )


@app.callback()
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
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
    serial: Annotated[
        str | None,
        typer.Option(
            "--serial",
            help="Serial of the device to use (see 'adb devices').",
        ),
    ] = None,
) -> None:
    """apkctl - List installed Android apps and export their APK files.

    Apps are read from a device attached through adb. Exported APKs are
    written into a folder chosen once and remembered for later exports.
    """
    setup_logging(verbose, quiet)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["serial"] = serial


# Register commands
app.add_typer(listing.app, name="list")
app.command(name="extract")(extract.extract_apks)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
