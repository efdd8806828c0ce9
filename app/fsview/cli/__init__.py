"""CLI package for fsview.

This package contains the Typer application and all subcommands.
"""

from fsview.cli.main import app

__all__ = ["app"]
