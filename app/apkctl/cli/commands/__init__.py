"""CLI commands for apkctl.

This package contains all subcommand implementations.
"""

from apkctl.cli.commands import config, extract, listing

__all__ = ["config", "extract", "listing"]
