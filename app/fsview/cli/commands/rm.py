"""Delete command implementation."""

from pathlib import Path
from typing import Annotated

import typer

from fsview.filesystem.operations import delete_recursive
from fsview.utils.formatting import print_error, print_info, print_success


def delete(
    path: Annotated[
        Path,
        typer.Argument(help="File or directory to delete."),
    ],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Delete a file or directory tree."""
    if not path.exists() and not path.is_symlink():
        print_error(f"Path does not exist: {path}")
        raise typer.Exit(code=1)

    if not yes:
        confirmed = typer.confirm(f"Delete {path}?", default=False)
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    result = delete_recursive(path)
    if not result.success:
        print_error(f"Delete stopped at {result.failed_path}: {result.error}")
        raise typer.Exit(code=1)

    print_success(f"Deleted {path}")
