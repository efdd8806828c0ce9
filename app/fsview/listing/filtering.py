"""Preference-driven filtering of directory listings.

Removes the entries the user (or a restricted execution context) should
not see. Each rule looks at an entry independently; the first rule that
rejects an entry removes it.
"""

from fsview.listing.mime import ALL_MIME_TYPES, GuessingMimeTypeMatcher, MimeTypeMatcher
from fsview.models.entry import EntryKind, FileSystemObject
from fsview.models.preferences import ListingPreferences

_default_matcher = GuessingMimeTypeMatcher()


def is_visible(
    entry: FileSystemObject,
    prefs: ListingPreferences,
    *,
    mime_type: str | None = ALL_MIME_TYPES,
    restricted: bool = False,
    matcher: MimeTypeMatcher | None = None,
) -> bool:
    """Check whether an entry survives the listing filter.

    Args:
        entry: Entry to check.
        prefs: Preference snapshot.
        mime_type: Requested mime type. None or ALL_MIME_TYPES disables
            the mime rule.
        restricted: Whether the listing runs in restricted mode. Hidden,
            system and symlink entries are always removed, and
            non-directories must match ``mime_type``.
        matcher: Mime-type matcher. Defaults to guessing from the name.

    Returns:
        True if the entry should be kept.
    """
    if (not prefs.show_hidden or restricted) and entry.is_hidden:
        return False

    if (not prefs.show_system or restricted) and entry.kind == EntryKind.SYSTEM_FILE:
        return False

    if (not prefs.show_symlinks or restricted) and entry.kind == EntryKind.SYMLINK:
        return False

    # Directories always stay so navigation remains possible
    if restricted and not entry.is_directory():
        if mime_type is not None and mime_type != ALL_MIME_TYPES:
            return (matcher or _default_matcher).matches(entry, mime_type)

    return True


def apply_filters(
    entries: list[FileSystemObject],
    prefs: ListingPreferences,
    *,
    mime_type: str | None = ALL_MIME_TYPES,
    restricted: bool = False,
    matcher: MimeTypeMatcher | None = None,
) -> list[FileSystemObject]:
    """Remove invisible entries from ``entries`` in place.

    See :func:`is_visible` for the rules.

    Returns:
        The same list object, filtered.
    """
    entries[:] = [
        entry
        for entry in entries
        if is_visible(entry, prefs, mime_type=mime_type, restricted=restricted, matcher=matcher)
    ]
    return entries
