"""Filesystem entry models.

This module defines the typed representation of the entries that make
up a directory listing. Each kind of filesystem object is its own
frozen dataclass carrying a class-level ``kind`` tag, and the closed
union ``FileSystemEntry`` names every variant so consumers can match
on ``entry.kind`` exhaustively.

Entries are immutable, with one exception: a Symlink's target is a
write-once cell that is filled in by the symlink resolver.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import ClassVar

from fsview.models.identity import Group, Permissions, User

ROOT_DIRECTORY = "/"
PARENT_DIRECTORY = ".."
CURRENT_DIRECTORY = "."


class EntryKind(str, Enum):
    """Kind tag of a filesystem entry.

    Attributes:
        REGULAR_FILE: Regular file with a size.
        DIRECTORY: Directory.
        PARENT_DIRECTORY: Synthetic ".." entry.
        SYMLINK: Symbolic link (target resolved lazily).
        SYSTEM_FILE: File the listing could not classify further.
        BLOCK_DEVICE: Block special file.
        CHARACTER_DEVICE: Character special file.
        NAMED_PIPE: FIFO.
        DOMAIN_SOCKET: Unix domain socket.
    """

    REGULAR_FILE = "file"
    DIRECTORY = "directory"
    PARENT_DIRECTORY = "parent_directory"
    SYMLINK = "symlink"
    SYSTEM_FILE = "system_file"
    BLOCK_DEVICE = "block_device"
    CHARACTER_DEVICE = "character_device"
    NAMED_PIPE = "named_pipe"
    DOMAIN_SOCKET = "domain_socket"


_DIRECTORY_KINDS = frozenset({EntryKind.DIRECTORY, EntryKind.PARENT_DIRECTORY})


@dataclass(frozen=True, slots=True)
class FileSystemObject:
    """Common attributes of every filesystem entry.

    Not instantiated directly; use one of the concrete variants.

    Attributes:
        name: Entry name. Empty only for the root directory.
        parent: Absolute path of the containing directory (None for root).
        user: Owner of the entry.
        group: Group of the entry.
        permissions: Raw permission bits.
        last_modified: Last modification time.
    """

    kind: ClassVar[EntryKind]

    name: str
    parent: str | None
    user: User
    group: Group
    permissions: Permissions
    last_modified: datetime

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.name and self.parent is not None:
            msg = "Entry name cannot be empty"
            raise ValueError(msg)

    @property
    def full_path(self) -> str:
        """Absolute path of the entry."""
        if self.parent is None:
            return ROOT_DIRECTORY if not self.name else self.name
        if self.parent.endswith("/"):
            return f"{self.parent}{self.name}"
        return f"{self.parent}/{self.name}"

    @property
    def is_hidden(self) -> bool:
        """Check if the entry is a dotfile."""
        return self.name.startswith(".")

    def is_directory(self) -> bool:
        """Check if the entry is a directory or a symlink to one."""
        return self.kind in _DIRECTORY_KINDS

    def is_system_file(self) -> bool:
        """Check if the entry is a system file or a symlink to one."""
        return self.kind == EntryKind.SYSTEM_FILE

    def has_link_target(self) -> bool:
        """Check if the entry is a resolved symlink."""
        return False

    def effective_object(self) -> "FileSystemObject":
        """Return the resolved target for symlinks, the entry itself otherwise."""
        return self

    def effective_size(self) -> int | None:
        """Return the size in bytes, or None when the entry has no size."""
        return None


@dataclass(frozen=True, slots=True)
class RegularFile(FileSystemObject):
    """A regular file.

    Attributes:
        size: Size in bytes.
    """

    kind: ClassVar[EntryKind] = EntryKind.REGULAR_FILE

    size: int

    def __post_init__(self) -> None:
        """Validate file data after initialization."""
        FileSystemObject.__post_init__(self)
        if self.size < 0:
            msg = f"File size cannot be negative, got {self.size}"
            raise ValueError(msg)

    def effective_size(self) -> int | None:
        """Return the file size."""
        return self.size


@dataclass(frozen=True, slots=True)
class Directory(FileSystemObject):
    """A directory."""

    kind: ClassVar[EntryKind] = EntryKind.DIRECTORY


@dataclass(frozen=True, slots=True)
class ParentDirectory(Directory):
    """Synthetic ".." entry pointing at the parent of ``parent``."""

    kind: ClassVar[EntryKind] = EntryKind.PARENT_DIRECTORY

    def __post_init__(self) -> None:
        """Validate that the entry is named ".."."""
        if self.name != PARENT_DIRECTORY:
            msg = f"Parent directory entry must be named '..', got {self.name!r}"
            raise ValueError(msg)

    @property
    def is_hidden(self) -> bool:
        """The ".." entry is never treated as hidden."""
        return False


@dataclass(frozen=True, slots=True)
class Symlink(FileSystemObject):
    """A symbolic link.

    The target is unknown until resolved. It can be assigned exactly
    once via :meth:`set_link_target`; later assignments are ignored
    until the target is explicitly cleared.

    Attributes:
        link_target: Resolved target entry, or None while unresolved.
    """

    kind: ClassVar[EntryKind] = EntryKind.SYMLINK

    link_target: FileSystemObject | None = field(default=None, compare=False, repr=False)

    def set_link_target(self, target: FileSystemObject) -> bool:
        """Assign the resolved target if none is set yet.

        Args:
            target: Entry the link points to.

        Returns:
            True if the target was assigned, False if one was already set.

        Raises:
            ValueError: If the target is the symlink itself.
        """
        if target is self:
            msg = f"Symlink cannot target itself: {self.full_path}"
            raise ValueError(msg)
        if self.link_target is not None:
            return False
        object.__setattr__(self, "link_target", target)
        return True

    def clear_link_target(self) -> None:
        """Forget the resolved target so the link can be resolved again."""
        object.__setattr__(self, "link_target", None)

    def is_directory(self) -> bool:
        """Check if the link resolves to a directory."""
        return self.link_target is not None and self.link_target.kind == EntryKind.DIRECTORY

    def is_system_file(self) -> bool:
        """Check if the link resolves to a system file."""
        return self.link_target is not None and self.link_target.kind == EntryKind.SYSTEM_FILE

    def has_link_target(self) -> bool:
        """Check if the link has been resolved."""
        return self.link_target is not None

    def effective_object(self) -> FileSystemObject:
        """Return the resolved target, or the link itself while unresolved."""
        if self.link_target is not None:
            return self.link_target
        return self

    def effective_size(self) -> int | None:
        """Return the target size, or None for directories and unresolved links."""
        if self.link_target is None or self.link_target.is_directory():
            return None
        return self.link_target.effective_size()


@dataclass(frozen=True, slots=True)
class SystemFile(FileSystemObject):
    """A file of a type the listing could not classify further."""

    kind: ClassVar[EntryKind] = EntryKind.SYSTEM_FILE


@dataclass(frozen=True, slots=True)
class BlockDevice(FileSystemObject):
    """A block special file."""

    kind: ClassVar[EntryKind] = EntryKind.BLOCK_DEVICE


@dataclass(frozen=True, slots=True)
class CharacterDevice(FileSystemObject):
    """A character special file."""

    kind: ClassVar[EntryKind] = EntryKind.CHARACTER_DEVICE


@dataclass(frozen=True, slots=True)
class NamedPipe(FileSystemObject):
    """A named pipe (FIFO)."""

    kind: ClassVar[EntryKind] = EntryKind.NAMED_PIPE


@dataclass(frozen=True, slots=True)
class DomainSocket(FileSystemObject):
    """A Unix domain socket."""

    kind: ClassVar[EntryKind] = EntryKind.DOMAIN_SOCKET


# Closed union of every concrete entry variant
FileSystemEntry = (
    RegularFile
    | Directory
    | ParentDirectory
    | Symlink
    | SystemFile
    | BlockDevice
    | CharacterDevice
    | NamedPipe
    | DomainSocket
)


def link_target_kind(entry: FileSystemObject) -> EntryKind | None:
    """Return the kind of a resolved symlink's target.

    Args:
        entry: Entry to inspect.

    Returns:
        Target kind, or None for non-symlinks and unresolved symlinks.
    """
    if not entry.has_link_target():
        return None
    return entry.effective_object().kind


def is_symlink_to(entry: FileSystemObject, kind: EntryKind) -> bool:
    """Check if the entry is a symlink resolved to a target of ``kind``."""
    return link_target_kind(entry) == kind


def is_privileged(entry: FileSystemObject) -> bool:
    """Check if the entry belongs to the administrator user.

    The synthetic ".." entry never requires privileges.
    """
    if entry.kind == EntryKind.PARENT_DIRECTORY:
        return False
    return entry.user.name == "root"


def is_root_directory(entry: FileSystemObject) -> bool:
    """Check if the entry is the filesystem root."""
    return not entry.name or entry.name == ROOT_DIRECTORY


def is_parent_root_directory(entry: FileSystemObject) -> bool:
    """Check if the entry lives directly under the filesystem root."""
    return entry.parent is None or entry.parent == ROOT_DIRECTORY
