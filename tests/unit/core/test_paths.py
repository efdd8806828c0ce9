"""Unit tests for XDG path management."""

import os
from pathlib import Path
from unittest.mock import patch

from fsview.core.paths import APP_NAME, get_config_dir, get_preferences_path


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_default_config_dir(self) -> None:
        """get_config_dir returns default path when XDG_CONFIG_HOME not set."""
        home = Path.home()
        with patch.dict(os.environ, {"HOME": str(home)}, clear=True):
            result = get_config_dir()

        assert result == home / ".config" / APP_NAME

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        """get_config_dir respects XDG_CONFIG_HOME environment variable."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = get_config_dir()

        assert result == tmp_path / APP_NAME

    def test_empty_xdg_config_home(self) -> None:
        """An empty XDG_CONFIG_HOME is ignored."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": ""}):
            result = get_config_dir()

        assert result == Path.home() / ".config" / APP_NAME


def test_preferences_path(tmp_path: Path) -> None:
    """Preferences live in the config directory."""
    with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
        assert get_preferences_path() == tmp_path / "fsview" / "preferences.toml"
