"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from collections.abc import Callable, Iterator
from datetime import UTC, datetime
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest
from fsview.models.entry import (
    Directory,
    FileSystemObject,
    ParentDirectory,
    RegularFile,
    Symlink,
    SystemFile,
)
from fsview.models.identity import Group, Permissions, User

EntryFactory = Callable[..., FileSystemObject]

_KINDS: dict[str, type[FileSystemObject]] = {
    "file": RegularFile,
    "dir": Directory,
    "parent": ParentDirectory,
    "link": Symlink,
    "system": SystemFile,
}


@pytest.fixture
def make_entry() -> EntryFactory:
    """Factory for test entries living under /data.

    Usage: ``make_entry("file", "a.txt", size=10, day=3)``.
    """

    def _make(
        kind: str,
        name: str,
        *,
        parent: str = "/data",
        day: int = 1,
        owner: str = "user",
        **extra: Any,
    ) -> FileSystemObject:
        cls = _KINDS[kind]
        if cls is RegularFile:
            extra.setdefault("size", 0)
        return cls(
            name=name,
            parent=parent,
            user=User(id=1000, name=owner),
            group=Group(id=1000, name=owner),
            permissions=Permissions(0o644),
            last_modified=datetime(2024, 1, day, 12, 0, tzinfo=UTC),
            **extra,
        )

    return _make


@pytest.fixture
def scenario_entries(make_entry: EntryFactory) -> list[FileSystemObject]:
    """Raw listing with a dotfile, a directory, a file and the '..' entry."""
    return [
        make_entry("file", ".hidden"),
        make_entry("dir", "zeta"),
        make_entry("file", "Alpha"),
        make_entry("parent", ".."),
    ]


@pytest.fixture
def config_home(tmp_path_factory: pytest.TempPathFactory) -> Iterator[Path]:
    """Point XDG_CONFIG_HOME at an empty directory for the test."""
    home = tmp_path_factory.mktemp("config")
    with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(home)}):
        yield home
