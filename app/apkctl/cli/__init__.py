"""CLI package for apkctl.

This package contains the Typer application and all subcommands.
"""

from apkctl.cli.main import app

__all__ = ["app"]
