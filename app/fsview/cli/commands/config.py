"""Preference management commands.

Show, read and change the listing preferences stored in
~/.config/fsview/preferences.toml.
"""

from typing import Annotated

import typer
from rich.table import Table

from fsview.core.config import (
    PreferencesError,
    get_preference,
    load_preferences,
    preference_keys,
    save_preferences,
    with_preference,
)
from fsview.core.paths import get_preferences_path
from fsview.models.preferences import ListingPreferences, SortMode
from fsview.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and change listing preferences.",
    no_args_is_help=True,
)


def _format_value(value: object) -> str:
    if isinstance(value, SortMode):
        return value.name.lower()
    return str(value).lower()


def _load() -> ListingPreferences:
    try:
        return load_preferences()
    except PreferencesError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


@app.command()
def show() -> None:
    """Show all listing preferences."""
    prefs = _load()
    defaults = ListingPreferences()

    table = Table(
        title="Listing Preferences",
        show_header=True,
        header_style="table.header",
        border_style="table.border",
    )
    table.add_column("Key", no_wrap=True)
    table.add_column("Value", style="info")
    table.add_column("Default", style="muted")

    for key in preference_keys():
        table.add_row(key, _format_value(getattr(prefs, key)), _format_value(getattr(defaults, key)))

    console.print(table)
    console.print(f"\n[dim]Stored in {get_preferences_path()}[/dim]")


@app.command()
def get(
    key: Annotated[str, typer.Argument(help="Preference key.")],
) -> None:
    """Print a single preference value."""
    prefs = _load()
    try:
        value = get_preference(prefs, key)
    except PreferencesError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    console.print(_format_value(value))


@app.command("set")
def set_value(
    key: Annotated[str, typer.Argument(help="Preference key.")],
    value: Annotated[str, typer.Argument(help="New value.")],
) -> None:
    """Change a preference value."""
    prefs = _load()
    try:
        updated = with_preference(prefs, key, value)
        save_preferences(updated)
    except PreferencesError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    print_success(f"{key} = {_format_value(get_preference(updated, key))}")


@app.command()
def reset() -> None:
    """Restore all preferences to their defaults."""
    try:
        save_preferences(ListingPreferences())
    except PreferencesError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    print_info("Preferences reset to defaults.")
