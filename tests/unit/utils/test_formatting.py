"""Unit tests for size formatting and entry styling."""

import pytest
from fsview.utils.formatting import SizeUnits, entry_style, format_size, human_readable_size


class TestFormatSize:
    """Tests for format_size."""

    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (0, "0 B"),
            (1023, "1023 B"),
            (1024, "1 KB"),
            (1536, "1 KB"),
            (5 * 1024 * 1024, "5 MB"),
            (3 * 1024**3, "3 GB"),
        ],
    )
    def test_units(self, size: int, expected: str) -> None:
        """Sizes are divided by 1024 until below 1024."""
        assert format_size(size) == expected

    def test_largest_unit_absorbs(self) -> None:
        """Sizes beyond the largest unit stay in that unit."""
        assert format_size(2 * 1024**4) == "2048 GB"

    def test_localized_units(self) -> None:
        """Labels and template come from the unit collaborator."""
        units = SizeUnits(labels=("o", "Ko", "Mo", "Go"), template="{count}{unit}")
        assert format_size(2048, units) == "2Ko"

    def test_empty_labels_rejected(self) -> None:
        """At least one unit label is required."""
        with pytest.raises(ValueError, match="At least one"):
            SizeUnits(labels=())


class TestHumanReadableSize:
    """Tests for human_readable_size."""

    def test_regular_file(self, make_entry) -> None:
        """Files show their size."""
        assert human_readable_size(make_entry("file", "f", size=2048)) == "2 KB"

    def test_directory_is_empty(self, make_entry) -> None:
        """Directories have no size."""
        assert human_readable_size(make_entry("dir", "d")) == ""
        assert human_readable_size(make_entry("parent", "..")) == ""

    def test_unresolved_symlink_is_empty(self, make_entry) -> None:
        """Unresolved links have no size."""
        assert human_readable_size(make_entry("link", "l")) == ""

    def test_symlink_to_file(self, make_entry) -> None:
        """Links to files show the target size."""
        link = make_entry("link", "l")
        link.set_link_target(make_entry("file", "f", size=100))
        assert human_readable_size(link) == "100 B"

    def test_symlink_to_directory_is_empty(self, make_entry) -> None:
        """Links to directories have no size."""
        link = make_entry("link", "l")
        link.set_link_target(make_entry("dir", "d"))
        assert human_readable_size(link) == ""

    def test_system_file_is_empty(self, make_entry) -> None:
        """Kinds without a size render empty."""
        assert human_readable_size(make_entry("system", "s")) == ""


class TestEntryStyle:
    """Tests for entry_style."""

    def test_styles(self, make_entry) -> None:
        """Each kind maps to a theme style."""
        assert entry_style(make_entry("dir", "d")) == "entry.directory"
        assert entry_style(make_entry("file", "f")) == "entry.file"
        assert entry_style(make_entry("system", "s")) == "entry.special"
        assert entry_style(make_entry("link", "l")) == "entry.broken_symlink"

    def test_privileged_wins(self, make_entry) -> None:
        """Root-owned entries use the privileged style."""
        assert entry_style(make_entry("file", "f", owner="root")) == "entry.privileged"
