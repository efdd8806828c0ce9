"""Recursive copy and delete over the local filesystem.

Both operations stop at the first failure and leave whatever was already
copied or not yet deleted in place; nothing is rolled back. The outcome
is reported as an OperationResult whose error tells a destination
conflict apart from an I/O failure.
"""

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path

from fsview.core.errors import DestinationConflictError, FsviewError, IOFailureError

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 64 * 1024


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Result of a recursive copy or delete.

    Attributes:
        path: Top-level path the operation was started on.
        success: Whether the whole tree was processed.
        error: Error that stopped the operation, None on success.
    """

    path: str
    success: bool
    error: FsviewError | None = None

    @property
    def failed_path(self) -> str | None:
        """Path at or below ``path`` where the operation stopped."""
        if self.error is None:
            return None
        return self.error.path

    @property
    def is_conflict(self) -> bool:
        """Check if the operation failed on a destination conflict."""
        return isinstance(self.error, DestinationConflictError)

    @property
    def is_io_failure(self) -> bool:
        """Check if the operation failed on an I/O error."""
        return isinstance(self.error, IOFailureError)


def buffered_copy(src: str | Path, dst: str | Path, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
    """Copy one file through a buffer of ``buffer_size`` bytes.

    A partially written destination is left in place on failure.

    Args:
        src: Source file.
        dst: Destination file (created or truncated).
        buffer_size: Chunk size in bytes.

    Raises:
        ValueError: If ``buffer_size`` is not positive.
        IOFailureError: If reading, writing or closing fails.
    """
    if buffer_size <= 0:
        msg = f"Buffer size must be positive, got {buffer_size}"
        raise ValueError(msg)

    try:
        with (
            open(src, "rb", buffering=buffer_size) as reader,
            open(dst, "wb", buffering=buffer_size) as writer,
        ):
            while True:
                chunk = reader.read(buffer_size)
                if not chunk:
                    break
                writer.write(chunk)
    except OSError as e:
        logger.error("Failed to copy from %s to %s: %s", src, dst, e)
        raise IOFailureError(f"Failed to copy {src} to {dst}: {e}", path=os.fspath(src)) from e


def _inspect(
    path: Path, *, follow_symlinks: bool = True, missing_ok: bool = False
) -> os.stat_result | None:
    """Stat ``path`` once.

    Returns:
        The stat result, or None if the path is missing and ``missing_ok``.

    Raises:
        IOFailureError: If the path cannot be inspected.
    """
    try:
        return path.stat(follow_symlinks=follow_symlinks)
    except OSError as e:
        if missing_ok and isinstance(e, FileNotFoundError):
            return None
        logger.error("Failed to inspect %s: %s", path, e)
        raise IOFailureError(f"Cannot inspect {path}: {e}", path=str(path)) from e


def _as_io_failure(e: OSError, fallback: Path) -> IOFailureError:
    """Wrap an unexpected OSError, naming the path it reports if any."""
    if isinstance(e.filename, (str, bytes)):
        failed = os.fsdecode(e.filename)
    else:
        failed = str(fallback)
    return IOFailureError(f"I/O failure at {failed}: {e}", path=failed)


def _copy_tree(src: Path, dst: Path, buffer_size: int) -> None:
    """Copy ``src`` to ``dst``, recursing into directories.

    Raises:
        DestinationConflictError: If a directory would overwrite a non-directory.
        IOFailureError: On any filesystem error.
    """
    if not stat.S_ISDIR(_inspect(src).st_mode):
        buffered_copy(src, dst, buffer_size)
        return

    dst_stat = _inspect(dst, missing_ok=True)
    if dst_stat is not None and not stat.S_ISDIR(dst_stat.st_mode):
        logger.error("Failed to check destination dir: %s", dst)
        raise DestinationConflictError(
            f"Destination exists but is not a directory: {dst}", path=str(dst)
        )
    if dst_stat is None:
        try:
            dst.mkdir()
        except OSError as e:
            logger.error("Failed to create directory: %s", dst)
            raise IOFailureError(f"Cannot create directory {dst}: {e}", path=str(dst)) from e

    try:
        children = sorted(src.iterdir())
    except OSError as e:
        raise IOFailureError(f"Cannot list directory {src}: {e}", path=str(src)) from e

    for child in children:
        _copy_tree(child, dst / child.name, buffer_size)


def _copies_into_itself(source: Path, destination: Path) -> bool:
    if not stat.S_ISDIR(_inspect(source).st_mode):
        return False
    return destination.resolve().is_relative_to(source.resolve())


def copy_recursive(
    src: str | Path,
    dst: str | Path,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
) -> OperationResult:
    """Copy a file or directory tree.

    Children are copied in name order and the copy stops at the first
    failing entry. Entries copied before the failure are kept.

    Args:
        src: Source file or directory.
        dst: Destination path.
        buffer_size: Chunk size for file copies.

    Returns:
        OperationResult for the whole tree.

    Raises:
        ValueError: If ``buffer_size`` is not positive.
    """
    if buffer_size <= 0:
        msg = f"Buffer size must be positive, got {buffer_size}"
        raise ValueError(msg)

    source = Path(src)
    destination = Path(dst)

    try:
        if _copies_into_itself(source, destination):
            error = DestinationConflictError(
                f"Cannot copy {source} into itself: {destination}", path=str(destination)
            )
            return OperationResult(path=str(source), success=False, error=error)
        _copy_tree(source, destination, buffer_size)
    except FsviewError as e:
        return OperationResult(path=str(source), success=False, error=e)
    except OSError as e:
        logger.error("Failed to copy %s to %s: %s", source, destination, e)
        return OperationResult(path=str(source), success=False, error=_as_io_failure(e, source))

    logger.debug("Copied %s to %s", source, destination)
    return OperationResult(path=str(source), success=True)


def _delete_tree(path: Path) -> None:
    """Delete ``path`` after all of its children (post-order).

    Symlinks to directories are unlinked, never followed.

    Raises:
        IOFailureError: At the first entry that cannot be inspected or deleted.
    """
    if stat.S_ISDIR(_inspect(path, follow_symlinks=False).st_mode):
        try:
            children = sorted(path.iterdir())
        except OSError as e:
            raise IOFailureError(f"Cannot list directory {path}: {e}", path=str(path)) from e
        for child in children:
            _delete_tree(child)
        try:
            path.rmdir()
        except OSError as e:
            raise IOFailureError(f"Cannot delete directory {path}: {e}", path=str(path)) from e
        return

    try:
        path.unlink()
    except OSError as e:
        raise IOFailureError(f"Cannot delete {path}: {e}", path=str(path)) from e


def delete_recursive(path: str | Path) -> OperationResult:
    """Delete a file or directory tree.

    Deletion stops at the first entry that cannot be removed; the rest of
    the tree is left intact.

    Args:
        path: File or directory to delete.

    Returns:
        OperationResult for the whole tree.
    """
    target = Path(path)
    try:
        _delete_tree(target)
    except FsviewError as e:
        logger.error("Failed to delete %s: %s", target, e)
        return OperationResult(path=str(target), success=False, error=e)
    except OSError as e:
        logger.error("Failed to delete %s: %s", target, e)
        return OperationResult(path=str(target), success=False, error=_as_io_failure(e, target))

    logger.debug("Deleted %s", target)
    return OperationResult(path=str(target), success=True)
