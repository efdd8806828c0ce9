"""List command implementation.

Lists a directory through the listing pipeline: the local lister
produces raw entries, symlinks are resolved, and the user's preferences
filter and sort the result.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table
from rich.text import Text

from fsview.core.config import PreferencesError, load_preferences
from fsview.core.errors import StructuralFailureError
from fsview.filesystem.lister import LocalDirectoryLister
from fsview.listing.mime import ALL_MIME_TYPES
from fsview.listing.pipeline import apply_user_preferences
from fsview.listing.symlinks import (
    CommandSymlinkResolver,
    LocalSymlinkResolver,
    SymlinkResolver,
    resolve_symlinks,
)
from fsview.models.entry import EntryKind, FileSystemObject
from fsview.models.preferences import SortMode
from fsview.utils.formatting import (
    console,
    entry_style,
    human_readable_size,
    print_error,
    print_warning,
)
from fsview.utils.shell import command_exists


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


class SortChoice(str, Enum):
    """Sort modes selectable on the command line."""

    NAME_ASC = "name"
    NAME_DESC = "name-desc"
    DATE_ASC = "date"
    DATE_DESC = "date-desc"
    SIZE_ASC = "size"
    SIZE_DESC = "size-desc"

    @property
    def mode(self) -> SortMode:
        """Sort mode for this choice."""
        return SortMode[self.name]


class ResolverChoice(str, Enum):
    """Symlink resolution strategies."""

    LOCAL = "local"
    READLINK = "readlink"


def list_directory(
    path: Annotated[
        Path,
        typer.Argument(help="Directory to list."),
    ] = Path("."),
    mime_type: Annotated[
        str,
        typer.Option("--mime", "-m", help="Mime type to keep in restricted mode (e.g. image/*)."),
    ] = ALL_MIME_TYPES,
    restricted: Annotated[
        bool,
        typer.Option("--restricted", help="Restricted mode: hide dotfiles, system files, links."),
    ] = False,
    show_all: Annotated[
        bool,
        typer.Option("--all", "-a", help="Show hidden, system and symlink entries."),
    ] = False,
    sort: Annotated[
        SortChoice | None,
        typer.Option("--sort", "-s", help="Override the configured sort mode.", case_sensitive=False),
    ] = None,
    no_sort: Annotated[
        bool,
        typer.Option("--no-sort", help="Keep directory order."),
    ] = False,
    resolve: Annotated[
        bool,
        typer.Option("--resolve/--no-resolve", help="Resolve symlink targets."),
    ] = True,
    resolver: Annotated[
        ResolverChoice,
        typer.Option("--resolver", help="Symlink resolution strategy.", case_sensitive=False),
    ] = ResolverChoice.LOCAL,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
    ] = OutputFormat.TABLE,
) -> None:
    """List a directory using your listing preferences."""
    try:
        prefs = load_preferences()
    except PreferencesError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    updates: dict[str, object] = {}
    if show_all:
        updates.update(show_hidden=True, show_system=True, show_symlinks=True)
    if sort is not None:
        updates["sort_mode"] = sort.mode
    if updates:
        prefs = prefs.model_copy(update=updates)

    try:
        entries = LocalDirectoryLister().list(path)
    except StructuralFailureError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if resolve and resolver == ResolverChoice.READLINK and not command_exists("readlink"):
        print_error("readlink is not available, use --resolver local")
        raise typer.Exit(code=1)

    # Resolve before sorting so links to directories group with directories
    if resolve:
        link_resolver: SymlinkResolver = (
            CommandSymlinkResolver()
            if resolver == ResolverChoice.READLINK
            else LocalSymlinkResolver()
        )
        for failure in (r for r in resolve_symlinks(entries, link_resolver) if not r.success):
            print_warning(f"Unresolved symlink: {failure.path}")

    apply_user_preferences(
        entries,
        prefs,
        mime_type=mime_type,
        restricted=restricted,
        no_sort=no_sort,
    )

    if output_format == OutputFormat.JSON:
        _print_json(entries)
        return

    _print_table(entries, path)


# === Private helper functions ===


def _display_name(entry: FileSystemObject) -> Text:
    """Render an entry name, with the target for resolved symlinks."""
    text = Text(entry.name or "/", style=entry_style(entry))
    if entry.kind == EntryKind.SYMLINK and entry.has_link_target():
        text.append(f" -> {entry.effective_object().full_path}", style="muted")
    if entry.is_directory() and entry.kind != EntryKind.PARENT_DIRECTORY:
        text.append("/")
    return text


def _print_table(entries: list[FileSystemObject], path: Path) -> None:
    """Display entries as a Rich table."""
    table = Table(
        title=str(path.resolve()),
        show_header=True,
        header_style="table.header",
        border_style="table.border",
    )
    table.add_column("Name", no_wrap=True)
    table.add_column("Size", style="info", justify="right")
    table.add_column("Modified", style="muted")
    table.add_column("Mode", style="muted")
    table.add_column("Owner", style="muted")

    for entry in entries:
        table.add_row(
            _display_name(entry),
            human_readable_size(entry),
            entry.last_modified.strftime("%Y-%m-%d %H:%M"),
            entry.permissions.to_raw_string(),
            f"{entry.user.name}:{entry.group.name}",
        )

    console.print(table)
    console.print(f"\n[dim]{len(entries)} entries[/dim]")


def _print_json(entries: list[FileSystemObject]) -> None:
    """Display entries as JSON."""
    data = [
        {
            "name": e.name,
            "path": e.full_path,
            "kind": e.kind.value,
            "size": e.effective_size(),
            "last_modified": e.last_modified.isoformat(),
            "permissions": e.permissions.to_raw_string(),
            "user": e.user.name,
            "group": e.group.name,
            "link_target": e.effective_object().full_path if e.has_link_target() else None,
        }
        for e in entries
    ]
    console.print_json(json.dumps(data))
