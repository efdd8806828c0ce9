"""Colors for listings and status messages.

The bundled ``data/theme.toml`` holds every color. A user ``theme.toml``
in the config directory may override any subset of its ``[colors]`` table.
Bad user files are logged and ignored; the listing never fails over colors.
"""

import logging
import re
import tomllib
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from fsview.core.paths import get_config_dir

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")


class ThemeColors(BaseModel):
    """Hex colors (#RGB or #RRGGBB) keyed by what they paint."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    # Tables and status lines
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    # Entry kinds
    file: str = "#ffffff"
    directory: str = "#0e8ac8"
    symlink: str = "#0ec1c8"
    broken_symlink: str = "#f53263"
    device: str = "#faf870"
    special: str = "#d44ebc"
    privileged: str = "#f5b332"

    @field_validator("*", mode="before")
    @classmethod
    def _check_hex(cls, v: object) -> str:
        color = v.strip() if isinstance(v, str) else ""
        if not _HEX_COLOR.fullmatch(color):
            msg = f"{v!r} is not a #RGB or #RRGGBB hex color"
            raise ValueError(msg)
        return color


def get_user_theme_path() -> Path:
    """Return the user override file, ``~/.config/fsview/theme.toml``."""
    return get_config_dir() / "theme.toml"


def get_bundled_theme_path() -> Path:
    """Return the theme file shipped inside the package."""
    return Path(str(resources.files("fsview.data").joinpath("theme.toml")))


def _load_toml_colors(path: Path) -> dict[str, object]:
    """Read the ``[colors]`` table of a theme file.

    A missing, unreadable or malformed file yields an empty table.
    """
    try:
        with open(path, "rb") as f:
            colors = tomllib.load(f).get("colors", {})
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", path)
        return {}
    return colors


def load_theme() -> ThemeColors:
    """Merge the user theme over the bundled one.

    Falls back to the built-in defaults if the merged colors do not validate.
    """
    colors = _load_toml_colors(get_bundled_theme_path())
    user_path = get_user_theme_path()
    overrides = _load_toml_colors(user_path)
    if overrides:
        logger.debug("Applying theme overrides from %s", user_path)
        colors = {**colors, **overrides}

    try:
        return ThemeColors.model_validate(colors)
    except ValidationError as e:
        logger.warning("Invalid theme colors, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme used by the shared consoles."""
    if colors is None:
        colors = load_theme()

    return Theme(
        {
            "muted": colors.muted,
            "success": colors.success,
            "warning": colors.warning,
            "error": f"bold {colors.error}",
            "info": colors.info,
            "table.header": f"bold {colors.header}",
            "table.border": colors.border,
            "entry.file": colors.file,
            "entry.directory": f"bold {colors.directory}",
            "entry.symlink": colors.symlink,
            "entry.broken_symlink": f"italic {colors.broken_symlink}",
            "entry.device": colors.device,
            "entry.special": colors.special,
            "entry.privileged": colors.privileged,
        }
    )


_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Return the Rich theme, loading it on first use."""
    global _cached_theme
    if _cached_theme is None:
        _cached_theme = get_rich_theme()
    return _cached_theme
