"""Preference store backed by a TOML file.

Listing preferences are stored in ~/.config/fsview/preferences.toml.
A missing file means "all defaults"; only values that differ from the
defaults are written back.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile

import tomli_w
from pydantic import ValidationError

from fsview.core.errors import FsviewError
from fsview.core.paths import get_preferences_path
from fsview.models.preferences import ListingPreferences, SortMode

logger = logging.getLogger(__name__)

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class PreferencesError(FsviewError):
    """Raised when preferences cannot be read, validated or written."""


class PreferencesParseError(PreferencesError):
    """Raised when the preferences file is not valid TOML."""


def preference_keys() -> list[str]:
    """Return the names of all known preference keys."""
    return list(ListingPreferences.model_fields)


def load_preferences(path: Path | None = None) -> ListingPreferences:
    """Load listing preferences from a TOML file.

    Args:
        path: Path to the preferences file. If None, uses the default path.

    Returns:
        Validated ListingPreferences. Defaults if the file does not exist.

    Raises:
        PreferencesParseError: If the TOML syntax is invalid.
        PreferencesError: If the file cannot be read or fails validation.
    """
    prefs_path = path or get_preferences_path()

    if not prefs_path.exists():
        logger.debug("No preferences file at %s, using defaults", prefs_path)
        return ListingPreferences()

    try:
        with open(prefs_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise PreferencesParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise PreferencesError(f"Failed to read preferences: {e}") from e

    # Sort modes are stored by name for readability
    sort_mode = data.get("sort_mode")
    if isinstance(sort_mode, str):
        try:
            data["sort_mode"] = SortMode[sort_mode.upper()]
        except KeyError as e:
            raise PreferencesError(f"Unknown sort mode: {sort_mode}") from e
    elif isinstance(sort_mode, int):
        data["sort_mode"] = SortMode.from_id(sort_mode)

    try:
        return ListingPreferences.model_validate(data)
    except ValidationError as e:
        raise PreferencesError(f"Invalid preferences content: {e}") from e


def save_preferences(prefs: ListingPreferences, path: Path | None = None) -> Path:
    """Save listing preferences to a TOML file.

    The file is written atomically through a temporary file in the same
    directory and os.replace().

    Args:
        prefs: Preferences to save.
        path: Destination. If None, uses the default path.

    Returns:
        Path where the preferences were saved.

    Raises:
        PreferencesError: If the file cannot be written.
    """
    prefs_path = path or get_preferences_path()

    data = _preferences_to_dict(prefs)

    tmp_path: Path | None = None
    try:
        prefs_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=prefs_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(prefs_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise PreferencesError(f"Failed to write preferences: {e}") from e

    return prefs_path


def _preferences_to_dict(prefs: ListingPreferences) -> dict[str, object]:
    """Convert preferences to a TOML-ready dict of non-default values."""
    defaults = ListingPreferences()
    result: dict[str, object] = {}
    for key in preference_keys():
        value = getattr(prefs, key)
        if value == getattr(defaults, key):
            continue
        result[key] = value.name if isinstance(value, SortMode) else value
    return result


def get_preference(prefs: ListingPreferences, key: str) -> bool | SortMode:
    """Read a single preference value by key.

    Raises:
        PreferencesError: If the key is unknown.
    """
    if key not in ListingPreferences.model_fields:
        raise PreferencesError(f"Unknown preference: {key}")
    return getattr(prefs, key)


def with_preference(prefs: ListingPreferences, key: str, raw_value: str) -> ListingPreferences:
    """Return a copy of ``prefs`` with one value replaced.

    Boolean values accept true/false, yes/no, on/off and 1/0. The sort
    mode accepts a mode name (``name_desc``) or its numeric identifier.

    Args:
        prefs: Current preferences.
        key: Preference key.
        raw_value: Value as typed by the user.

    Returns:
        Updated preferences.

    Raises:
        PreferencesError: If the key is unknown or the value is invalid.
    """
    if key not in ListingPreferences.model_fields:
        raise PreferencesError(f"Unknown preference: {key}")

    value: bool | SortMode
    text = raw_value.strip().lower()
    if key == "sort_mode":
        if text.isdigit():
            try:
                value = SortMode(int(text))
            except ValueError as e:
                raise PreferencesError(f"Unknown sort mode: {raw_value}") from e
        else:
            try:
                value = SortMode[text.upper()]
            except KeyError as e:
                raise PreferencesError(f"Unknown sort mode: {raw_value}") from e
    elif text in _TRUE_VALUES:
        value = True
    elif text in _FALSE_VALUES:
        value = False
    else:
        raise PreferencesError(f"Invalid boolean for {key}: {raw_value}")

    return prefs.model_copy(update={key: value})
