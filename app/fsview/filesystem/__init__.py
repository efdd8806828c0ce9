"""Local filesystem access.

This module provides the local directory lister, single-path entry
construction, and the recursive copy/delete engine.
"""

from fsview.filesystem.lister import (
    LocalDirectoryLister,
    create_entry,
    entry_from_stat,
    is_symlink,
    resolve_symlink,
    stat_entry,
)
from fsview.filesystem.operations import (
    DEFAULT_BUFFER_SIZE,
    OperationResult,
    buffered_copy,
    copy_recursive,
    delete_recursive,
)

__all__ = [
    "DEFAULT_BUFFER_SIZE",
    "LocalDirectoryLister",
    "OperationResult",
    "buffered_copy",
    "copy_recursive",
    "create_entry",
    "delete_recursive",
    "entry_from_stat",
    "is_symlink",
    "resolve_symlink",
    "stat_entry",
]
