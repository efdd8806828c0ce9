"""Symlink resolution for directory listings.

Fills in the target of every unresolved symlink in a listing. A failure
to resolve one link never aborts the batch: the link simply stays
unresolved and the failure is reported in its SymlinkResolution.
"""

import logging
import os
import subprocess
from dataclasses import dataclass
from typing import Protocol

from fsview.core.errors import FsviewError, ResolutionFailureError
from fsview.filesystem.lister import resolve_symlink, stat_entry
from fsview.models.entry import FileSystemObject, Symlink
from fsview.utils.shell import run_command

logger = logging.getLogger(__name__)


class SymlinkResolver(Protocol):
    """Resolves the absolute path of a symlink to its target entry."""

    def resolve(self, path: str) -> FileSystemObject:
        """Return the entry the link at ``path`` points to.

        Raises:
            ResolutionFailureError: If the target cannot be determined.
        """
        ...


class CommandSymlinkResolver:
    """Resolves symlinks with ``readlink -f`` through the shell.

    Args:
        timeout: Maximum seconds to wait for the command.
    """

    def __init__(self, *, timeout: float = 10.0) -> None:
        self._timeout = timeout

    def resolve(self, path: str) -> FileSystemObject:
        """Resolve ``path`` by running ``readlink -f``.

        Raises:
            ResolutionFailureError: If the command fails or its output
                does not name an existing entry.
        """
        try:
            result = run_command(
                ["readlink", "-f", path], timeout=self._timeout, errors="surrogateescape"
            )
        except (OSError, UnicodeDecodeError, subprocess.TimeoutExpired) as e:
            raise ResolutionFailureError(f"Cannot run readlink for {path}: {e}") from e

        target = result.stdout.strip()
        if not result.success or not target:
            msg = result.stderr.strip() or "readlink returned no target"
            raise ResolutionFailureError(f"Cannot resolve {path}: {msg}")

        try:
            return stat_entry(target)
        except FsviewError as e:
            raise ResolutionFailureError(f"Dangling symlink {path} -> {target}") from e


class LocalSymlinkResolver:
    """Resolves symlinks in-process with the local filesystem."""

    def resolve(self, path: str) -> FileSystemObject:
        """Resolve ``path`` to its final target.

        Raises:
            ResolutionFailureError: If the link is dangling or loops.
        """
        try:
            target = resolve_symlink(path)
        except (OSError, RuntimeError) as e:
            raise ResolutionFailureError(f"Cannot resolve {path}: {e}") from e

        try:
            return stat_entry(os.fspath(target))
        except FsviewError as e:
            raise ResolutionFailureError(f"Cannot inspect target of {path}: {e}") from e


@dataclass(frozen=True, slots=True)
class SymlinkResolution:
    """Outcome of resolving a single symlink.

    Attributes:
        path: Absolute path of the symlink.
        success: Whether the link has a target after the attempt.
        target: Resolved target entry, None on failure.
        error: Failure description, None on success.
        skipped: True if the link was already resolved and left alone.
    """

    path: str
    success: bool
    target: FileSystemObject | None = None
    error: str | None = None
    skipped: bool = False


def resolve_link(link: Symlink, resolver: SymlinkResolver) -> SymlinkResolution:
    """Resolve a single symlink once.

    Already-resolved links are not touched. Any error raised by the
    resolver leaves the link unresolved and is reported in the result.

    Args:
        link: Symlink entry.
        resolver: Resolution collaborator.

    Returns:
        SymlinkResolution describing the outcome.
    """
    path = link.full_path
    if link.link_target is not None:
        return SymlinkResolution(path=path, success=True, target=link.link_target, skipped=True)

    try:
        target = resolver.resolve(path)
    except Exception as e:
        logger.warning("Cannot resolve symlink %s: %s", path, e)
        return SymlinkResolution(path=path, success=False, error=str(e))

    link.set_link_target(target)
    logger.debug("Resolved symlink %s -> %s", path, target.full_path)
    return SymlinkResolution(path=path, success=True, target=target)


def resolve_symlinks(
    entries: list[FileSystemObject],
    resolver: SymlinkResolver,
) -> list[SymlinkResolution]:
    """Resolve every unresolved symlink in a listing.

    Args:
        entries: Listing to process. Symlink entries are updated in place.
        resolver: Resolution collaborator.

    Returns:
        One SymlinkResolution per symlink that was attempted. Links that
        were already resolved are not reported.
    """
    results: list[SymlinkResolution] = []
    for entry in entries:
        if isinstance(entry, Symlink) and entry.link_target is None:
            results.append(resolve_link(entry, resolver))
    return results
