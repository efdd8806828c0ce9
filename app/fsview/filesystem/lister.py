"""Local directory lister.

Builds typed entries from the local filesystem. This is the directory
lister collaborator used by the CLI; the listing pipeline itself never
enumerates directories and accepts entries from any lister.
"""

import grp
import logging
import os
import pwd
import stat
from datetime import UTC, datetime
from pathlib import Path

from fsview.core.errors import StructuralFailureError
from fsview.models.entry import (
    PARENT_DIRECTORY,
    ROOT_DIRECTORY,
    BlockDevice,
    CharacterDevice,
    Directory,
    DomainSocket,
    FileSystemObject,
    NamedPipe,
    ParentDirectory,
    RegularFile,
    Symlink,
    SystemFile,
)
from fsview.models.identity import Group, Permissions, User, restricted_ownership

logger = logging.getLogger(__name__)


def _split(path: Path) -> tuple[str, str | None]:
    """Split an absolute path into (name, parent)."""
    if str(path) == ROOT_DIRECTORY:
        return "", None
    return path.name, str(path.parent)


def _lookup_user(uid: int) -> User:
    try:
        return User(id=uid, name=pwd.getpwuid(uid).pw_name)
    except KeyError:
        return User(id=uid, name=str(uid))


def _lookup_group(gid: int) -> Group:
    try:
        return Group(id=gid, name=grp.getgrgid(gid).gr_name)
    except KeyError:
        return Group(id=gid, name=str(gid))


def _mtime(st: os.stat_result) -> datetime:
    return datetime.fromtimestamp(st.st_mtime, tz=UTC)


def entry_from_stat(path: Path, st: os.stat_result) -> FileSystemObject:
    """Build the entry variant matching an ``lstat`` result.

    Args:
        path: Absolute path of the entry.
        st: Result of ``os.lstat`` on ``path``.

    Returns:
        Typed entry. Modes that are none of the known kinds become
        SystemFile.
    """
    name, parent = _split(path)
    common = {
        "name": name,
        "parent": parent,
        "user": _lookup_user(st.st_uid),
        "group": _lookup_group(st.st_gid),
        "permissions": Permissions.from_mode(st.st_mode),
        "last_modified": _mtime(st),
    }
    mode = st.st_mode

    if stat.S_ISLNK(mode):
        return Symlink(**common)
    if stat.S_ISDIR(mode):
        return Directory(**common)
    if stat.S_ISREG(mode):
        return RegularFile(**common, size=st.st_size)
    if stat.S_ISBLK(mode):
        return BlockDevice(**common)
    if stat.S_ISCHR(mode):
        return CharacterDevice(**common)
    if stat.S_ISFIFO(mode):
        return NamedPipe(**common)
    if stat.S_ISSOCK(mode):
        return DomainSocket(**common)
    return SystemFile(**common)


def stat_entry(path: str | Path) -> FileSystemObject:
    """Build an entry for a single path without following symlinks.

    Args:
        path: Path to inspect. Made absolute against the current directory.

    Returns:
        Typed entry.

    Raises:
        StructuralFailureError: If the path cannot be inspected.
    """
    target = Path(os.path.abspath(path))
    try:
        st = target.lstat()
    except OSError as e:
        raise StructuralFailureError(f"Cannot inspect {target}: {e}") from e
    return entry_from_stat(target, st)


def create_entry(path: str | Path) -> FileSystemObject | None:
    """Wrap a single path as a directory or regular file entry.

    Ownership and permissions are the synthetic restricted-mode triple,
    since real metadata may not be inspectable in that context.

    Args:
        path: Path to wrap.

    Returns:
        Directory or RegularFile entry, or None if the path could not be
        read.
    """
    target = Path(os.path.abspath(path))
    try:
        user, group, permissions = restricted_ownership()
        st = target.stat()
        name, parent = _split(target)
        if stat.S_ISDIR(st.st_mode):
            return Directory(
                name=name,
                parent=parent,
                user=user,
                group=group,
                permissions=permissions,
                last_modified=_mtime(st),
            )
        return RegularFile(
            name=name,
            parent=parent,
            user=user,
            group=group,
            permissions=permissions,
            last_modified=_mtime(st),
            size=st.st_size,
        )
    except (OSError, ValueError) as e:
        logger.error("Cannot build entry for %s: %s", target, e)
        return None


def is_symlink(path: str | Path) -> bool:
    """Check if a local path is a symbolic link."""
    return Path(path).is_symlink()


def resolve_symlink(path: str | Path) -> Path:
    """Resolve a local path to the real file or directory it names.

    Raises:
        OSError: If the path cannot be resolved (e.g. a link loop).
    """
    return Path(path).resolve(strict=True)


class LocalDirectoryLister:
    """Lists a local directory as typed entries.

    Entries come back in directory order; filtering and sorting are left
    to the listing pipeline. A synthetic ".." entry is prepended unless
    the directory is the filesystem root.

    Args:
        include_parent: Prepend the ".." entry.
    """

    def __init__(self, *, include_parent: bool = True) -> None:
        self._include_parent = include_parent

    def list(self, directory: str | Path) -> list[FileSystemObject]:
        """List the entries of ``directory``.

        Entries that vanish or cannot be inspected while listing are
        skipped with a warning.

        Args:
            directory: Directory to list.

        Returns:
            Typed entries.

        Raises:
            StructuralFailureError: If the directory cannot be read.
        """
        base = Path(os.path.abspath(directory))
        try:
            children = list(os.scandir(base))
        except OSError as e:
            raise StructuralFailureError(f"Cannot list directory {base}: {e}") from e

        entries: list[FileSystemObject] = []
        if self._include_parent and str(base) != ROOT_DIRECTORY:
            entries.append(self._parent_entry(base))

        for child in children:
            try:
                st = child.stat(follow_symlinks=False)
            except OSError:
                logger.warning("Cannot determine type of: %s", child.path)
                continue
            entries.append(entry_from_stat(base / child.name, st))

        return entries

    @staticmethod
    def _parent_entry(base: Path) -> ParentDirectory:
        """Build the ".." entry for ``base``."""
        try:
            st = base.parent.stat()
            return ParentDirectory(
                name=PARENT_DIRECTORY,
                parent=str(base),
                user=_lookup_user(st.st_uid),
                group=_lookup_group(st.st_gid),
                permissions=Permissions.from_mode(st.st_mode),
                last_modified=_mtime(st),
            )
        except OSError:
            logger.warning("Cannot inspect parent of: %s", base)
            user, group, permissions = restricted_ownership()
            return ParentDirectory(
                name=PARENT_DIRECTORY,
                parent=str(base),
                user=user,
                group=group,
                permissions=permissions,
                last_modified=datetime.fromtimestamp(0, tz=UTC),
            )
