"""Data models for fsview.

This module exports the filesystem entry variants, ownership types and
the listing preference snapshot.
"""

from fsview.models.entry import (
    BlockDevice,
    CharacterDevice,
    Directory,
    DomainSocket,
    EntryKind,
    FileSystemEntry,
    FileSystemObject,
    NamedPipe,
    ParentDirectory,
    RegularFile,
    Symlink,
    SystemFile,
    is_parent_root_directory,
    is_privileged,
    is_root_directory,
    is_symlink_to,
    link_target_kind,
)
from fsview.models.identity import Group, Permissions, User, restricted_ownership
from fsview.models.preferences import ListingPreferences, SortMode

__all__ = [
    "BlockDevice",
    "CharacterDevice",
    "Directory",
    "DomainSocket",
    "EntryKind",
    "FileSystemEntry",
    "FileSystemObject",
    "Group",
    "ListingPreferences",
    "NamedPipe",
    "ParentDirectory",
    "Permissions",
    "RegularFile",
    "SortMode",
    "Symlink",
    "SystemFile",
    "User",
    "is_parent_root_directory",
    "is_privileged",
    "is_root_directory",
    "is_symlink_to",
    "link_target_kind",
    "restricted_ownership",
]
