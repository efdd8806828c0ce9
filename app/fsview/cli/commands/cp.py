"""Copy command implementation.

Copies a file or directory tree with the recursive I/O engine. Copying
into an existing directory picks a name that does not clash with the
entries already there.
"""

import os
from pathlib import Path
from typing import Annotated

import typer

from fsview.core.errors import NameGenerationError
from fsview.filesystem.operations import DEFAULT_BUFFER_SIZE, copy_recursive
from fsview.utils.formatting import print_error, print_info, print_success
from fsview.utils.naming import (
    DEFAULT_RENAME_TEMPLATE,
    RenameTemplate,
    create_non_existing_name,
    template_from_format,
)


def _destination_for(src: Path, dst: Path, template: RenameTemplate) -> Path:
    """Return the path to copy ``src`` to when ``dst`` may be a directory."""
    if not dst.is_dir():
        return dst
    name = create_non_existing_name(os.listdir(dst), src.name, template)
    return dst / name


def copy(
    src: Annotated[
        Path,
        typer.Argument(help="File or directory to copy.", exists=True),
    ],
    dst: Annotated[
        Path,
        typer.Argument(help="Destination path or existing directory."),
    ],
    buffer_size: Annotated[
        int,
        typer.Option("--buffer-size", "-b", help="Copy buffer size in bytes.", min=1),
    ] = DEFAULT_BUFFER_SIZE,
    rename_template: Annotated[
        str,
        typer.Option(
            "--rename-template",
            help="Template for clashing names, with {name} and {ext} placeholders.",
        ),
    ] = DEFAULT_RENAME_TEMPLATE,
) -> None:
    """Copy a file or directory tree."""
    try:
        template = template_from_format(rename_template)
        target = _destination_for(src, dst, template)
    except (NameGenerationError, OSError) as e:
        print_error(f"Cannot choose a destination name: {e}")
        raise typer.Exit(code=1) from e

    if target != dst:
        print_info(f"Copying to {target}")

    result = copy_recursive(src, target, buffer_size)
    if not result.success:
        kind = "Destination conflict" if result.is_conflict else "Copy failed"
        print_error(f"{kind} at {result.failed_path}: {result.error}")
        raise typer.Exit(code=1)

    print_success(f"Copied {src} to {target}")
