"""Unit tests for the listing pipeline."""

from fsview.listing.pipeline import apply_user_preferences
from fsview.models.preferences import ListingPreferences, SortMode


class TestApplyUserPreferences:
    """Tests for apply_user_preferences."""

    def test_filters_then_sorts(self, scenario_entries) -> None:
        """The scenario listing ends up filtered and ordered."""
        prefs = ListingPreferences(show_hidden=False)
        result = apply_user_preferences(scenario_entries, prefs)
        assert result is scenario_entries
        assert [e.name for e in result] == ["..", "zeta", "Alpha"]

    def test_defaults_keep_hidden(self, scenario_entries) -> None:
        """Default preferences keep dotfiles."""
        result = apply_user_preferences(scenario_entries, ListingPreferences())
        assert [e.name for e in result] == ["..", "zeta", ".hidden", "Alpha"]

    def test_no_sort_keeps_lister_order(self, scenario_entries) -> None:
        """With no_sort the filtered entries keep their input order."""
        prefs = ListingPreferences(show_hidden=False)
        result = apply_user_preferences(scenario_entries, prefs, no_sort=True)
        assert [e.name for e in result] == ["zeta", "Alpha", ".."]

    def test_restricted_mime(self, make_entry) -> None:
        """Restricted listings keep directories and matching files."""
        entries = [
            make_entry("file", "photo.png"),
            make_entry("file", "notes.txt"),
            make_entry("dir", "album"),
            make_entry("link", "shortcut"),
            make_entry("parent", ".."),
        ]
        result = apply_user_preferences(
            entries, ListingPreferences(), mime_type="image/*", restricted=True
        )
        assert [e.name for e in result] == ["..", "album", "photo.png"]

    def test_descending(self, make_entry) -> None:
        """Descending name order keeps '..' and directories first."""
        entries = [
            make_entry("file", "a"),
            make_entry("file", "b"),
            make_entry("dir", "c"),
            make_entry("parent", ".."),
        ]
        prefs = ListingPreferences(sort_mode=SortMode.NAME_DESC)
        assert [e.name for e in apply_user_preferences(entries, prefs)] == ["..", "c", "b", "a"]
