"""Listing pipeline: filter, then sort.

Turns the raw entries produced by a directory lister into what the user
sees. Symlink resolution is a separate, on-demand step (see
:mod:`fsview.listing.symlinks`).
"""

from fsview.listing.filtering import apply_filters
from fsview.listing.mime import ALL_MIME_TYPES, MimeTypeMatcher
from fsview.listing.sorting import sort_entries
from fsview.models.entry import FileSystemObject
from fsview.models.preferences import ListingPreferences


def apply_user_preferences(
    entries: list[FileSystemObject],
    prefs: ListingPreferences,
    *,
    mime_type: str | None = ALL_MIME_TYPES,
    restricted: bool = False,
    no_sort: bool = False,
    matcher: MimeTypeMatcher | None = None,
) -> list[FileSystemObject]:
    """Filter and sort a listing in place.

    Args:
        entries: Raw entries from a directory lister.
        prefs: Preference snapshot.
        mime_type: Mime type requested in restricted mode.
        restricted: Whether the listing runs in restricted mode.
        no_sort: Skip sorting and keep the lister order.
        matcher: Mime-type matcher for the restricted-mode rule.

    Returns:
        The same list object, filtered and sorted.
    """
    apply_filters(entries, prefs, mime_type=mime_type, restricted=restricted, matcher=matcher)
    if not no_sort:
        sort_entries(entries, prefs)
    return entries
