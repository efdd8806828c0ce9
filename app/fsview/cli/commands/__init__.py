"""CLI commands for fsview.

This package contains all subcommand implementations.
"""

from fsview.cli.commands import config, cp, ls, rm

__all__ = ["config", "cp", "ls", "rm"]
