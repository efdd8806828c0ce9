"""Tests for filesystem entry models."""

import dataclasses
from datetime import UTC, datetime

import pytest
from fsview.models.entry import (
    BlockDevice,
    Directory,
    EntryKind,
    ParentDirectory,
    RegularFile,
    Symlink,
    is_parent_root_directory,
    is_privileged,
    is_root_directory,
    is_symlink_to,
    link_target_kind,
)
from fsview.models.identity import Group, Permissions, User

_USER = User(id=0, name="root")
_GROUP = Group(id=0, name="root")
_PERMS = Permissions(0o755)
_WHEN = datetime(2024, 1, 15, 10, 0, tzinfo=UTC)


class TestEntryKind:
    """Tests for EntryKind enum."""

    def test_entry_kind_values(self) -> None:
        """Every entry variant has a kind tag."""
        assert EntryKind.REGULAR_FILE == "file"
        assert EntryKind.DIRECTORY == "directory"
        assert EntryKind.SYMLINK == "symlink"
        assert len(EntryKind) == 9

    def test_variants_carry_their_kind(self, make_entry) -> None:
        """Concrete variants report their own kind."""
        assert make_entry("file", "a").kind == EntryKind.REGULAR_FILE
        assert make_entry("dir", "a").kind == EntryKind.DIRECTORY
        assert make_entry("parent", "..").kind == EntryKind.PARENT_DIRECTORY
        assert make_entry("link", "a").kind == EntryKind.SYMLINK
        assert make_entry("system", "a").kind == EntryKind.SYSTEM_FILE


class TestFileSystemObject:
    """Tests for common entry behaviour."""

    def test_full_path(self, make_entry) -> None:
        """Full path joins parent and name."""
        assert make_entry("file", "a.txt").full_path == "/data/a.txt"
        assert make_entry("file", "etc", parent="/").full_path == "/etc"

    def test_root_directory(self) -> None:
        """The root directory has an empty name and no parent."""
        root = Directory(
            name="", parent=None, user=_USER, group=_GROUP, permissions=_PERMS, last_modified=_WHEN
        )
        assert root.full_path == "/"
        assert is_root_directory(root)
        assert is_parent_root_directory(root)

    def test_empty_name_rejected(self) -> None:
        """Non-root entries must have a name."""
        with pytest.raises(ValueError, match="cannot be empty"):
            Directory(
                name="",
                parent="/data",
                user=_USER,
                group=_GROUP,
                permissions=_PERMS,
                last_modified=_WHEN,
            )

    def test_negative_size_rejected(self, make_entry) -> None:
        """Regular files cannot have a negative size."""
        with pytest.raises(ValueError, match="negative"):
            make_entry("file", "a", size=-1)

    def test_entries_are_frozen(self, make_entry) -> None:
        """Entries cannot be mutated."""
        entry = make_entry("file", "a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.name = "b"  # type: ignore[misc]

    def test_hidden(self, make_entry) -> None:
        """Dotfiles are hidden; the '..' entry is not."""
        assert make_entry("file", ".bashrc").is_hidden
        assert not make_entry("file", "bashrc").is_hidden
        assert not make_entry("parent", "..").is_hidden

    def test_parent_directory_requires_dotdot(self) -> None:
        """The parent entry must be named '..'."""
        with pytest.raises(ValueError, match="'..'"):
            ParentDirectory(
                name="up",
                parent="/data",
                user=_USER,
                group=_GROUP,
                permissions=_PERMS,
                last_modified=_WHEN,
            )

    def test_directory_checks(self, make_entry) -> None:
        """Directories and the parent entry count as directories."""
        assert make_entry("dir", "d").is_directory()
        assert make_entry("parent", "..").is_directory()
        assert not make_entry("file", "f").is_directory()
        assert make_entry("system", "s").is_system_file()

    def test_effective_object_of_plain_entry(self, make_entry) -> None:
        """Non-symlinks dereference to themselves."""
        entry = make_entry("file", "f")
        assert entry.effective_object() is entry
        assert not entry.has_link_target()


class TestSymlink:
    """Tests for the write-once symlink target."""

    def test_unresolved_symlink(self, make_entry) -> None:
        """A fresh symlink has no target and dereferences to itself."""
        link = make_entry("link", "l")
        assert not link.has_link_target()
        assert link.effective_object() is link
        assert not link.is_directory()
        assert link.effective_size() is None

    def test_set_target_once(self, make_entry) -> None:
        """The first target sticks; later assignments are ignored."""
        link = make_entry("link", "l")
        first = make_entry("file", "real", size=10)
        second = make_entry("file", "other", size=20)

        assert link.set_link_target(first) is True
        assert link.set_link_target(second) is False
        assert link.link_target is first
        assert link.effective_object() is first

    def test_clear_allows_new_target(self, make_entry) -> None:
        """Clearing the target allows another resolution."""
        link = make_entry("link", "l")
        link.set_link_target(make_entry("file", "a"))
        link.clear_link_target()
        target = make_entry("dir", "b")

        assert link.set_link_target(target) is True
        assert link.link_target is target

    def test_cannot_target_itself(self, make_entry) -> None:
        """A symlink cannot point at itself."""
        link = make_entry("link", "l")
        with pytest.raises(ValueError, match="itself"):
            link.set_link_target(link)

    def test_symlink_to_directory(self, make_entry) -> None:
        """A link to a directory counts as a directory and has no size."""
        link = make_entry("link", "l")
        link.set_link_target(make_entry("dir", "d"))
        assert link.is_directory()
        assert link.effective_size() is None
        assert link_target_kind(link) == EntryKind.DIRECTORY

    def test_symlink_to_file_size(self, make_entry) -> None:
        """A link to a file reports the file size."""
        link = make_entry("link", "l")
        link.set_link_target(make_entry("file", "f", size=2048))
        assert link.effective_size() == 2048
        assert not link.is_directory()

    def test_symlink_to_system_file(self, make_entry) -> None:
        """A link to a system file counts as a system file."""
        link = make_entry("link", "l")
        link.set_link_target(make_entry("system", "s"))
        assert link.is_system_file()
        assert is_symlink_to(link, EntryKind.SYSTEM_FILE)

    def test_target_ignored_in_equality(self, make_entry) -> None:
        """Resolving a link does not change its equality or hash."""
        link = make_entry("link", "l")
        twin = make_entry("link", "l")
        before = hash(link)
        link.set_link_target(make_entry("file", "f"))
        assert link == twin
        assert hash(link) == before


class TestHelpers:
    """Tests for module-level entry helpers."""

    def test_link_target_kind_of_non_link(self, make_entry) -> None:
        """Non-links have no target kind."""
        assert link_target_kind(make_entry("file", "f")) is None

    def test_is_symlink_to_device(self, make_entry) -> None:
        """Target kinds cover device files."""
        link = make_entry("link", "l")
        device = BlockDevice(
            name="sda", parent="/dev", user=_USER, group=_GROUP, permissions=_PERMS, last_modified=_WHEN
        )
        link.set_link_target(device)
        assert is_symlink_to(link, EntryKind.BLOCK_DEVICE)
        assert not is_symlink_to(link, EntryKind.CHARACTER_DEVICE)

    def test_is_privileged(self, make_entry) -> None:
        """Root-owned entries are privileged, except '..'."""
        assert is_privileged(make_entry("file", "f", owner="root"))
        assert not is_privileged(make_entry("file", "f", owner="user"))
        assert not is_privileged(make_entry("parent", "..", owner="root"))

    def test_is_parent_root_directory(self, make_entry) -> None:
        """Entries directly under / have the root as parent."""
        assert is_parent_root_directory(make_entry("dir", "etc", parent="/"))
        assert not is_parent_root_directory(make_entry("dir", "x"))

    def test_regular_file_size(self) -> None:
        """Regular files expose their size."""
        entry = RegularFile(
            name="f",
            parent="/",
            user=_USER,
            group=_GROUP,
            permissions=_PERMS,
            last_modified=_WHEN,
            size=42,
        )
        assert entry.effective_size() == 42

    def test_symlink_defaults_unresolved(self) -> None:
        """Symlinks built without a target are unresolved."""
        link = Symlink(
            name="l", parent="/", user=_USER, group=_GROUP, permissions=_PERMS, last_modified=_WHEN
        )
        assert link.link_target is None
