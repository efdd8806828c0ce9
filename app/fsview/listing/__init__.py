"""Directory listing pipeline.

This module provides preference-driven filtering, sorting and symlink
resolution over lists of filesystem entries.
"""

from fsview.listing.filtering import apply_filters, is_visible
from fsview.listing.mime import ALL_MIME_TYPES, GuessingMimeTypeMatcher, MimeTypeMatcher
from fsview.listing.pipeline import apply_user_preferences
from fsview.listing.sorting import compare_by_mode, compare_entries, sort_entries
from fsview.listing.symlinks import (
    CommandSymlinkResolver,
    LocalSymlinkResolver,
    SymlinkResolution,
    SymlinkResolver,
    resolve_link,
    resolve_symlinks,
)

__all__ = [
    "ALL_MIME_TYPES",
    "CommandSymlinkResolver",
    "GuessingMimeTypeMatcher",
    "LocalSymlinkResolver",
    "MimeTypeMatcher",
    "SymlinkResolution",
    "SymlinkResolver",
    "apply_filters",
    "apply_user_preferences",
    "compare_by_mode",
    "compare_entries",
    "is_visible",
    "resolve_link",
    "resolve_symlinks",
    "sort_entries",
]
