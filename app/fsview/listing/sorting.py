"""Comparator and sort engine for directory listings.

The order is: the ".." entry first, then (optionally) directories
before everything else, then the configured sort mode. Sorting uses
``list.sort``, which is stable, so entries that compare equal keep the
order they had coming out of the filter.
"""

from functools import cmp_to_key

from fsview.models.entry import EntryKind, FileSystemObject
from fsview.models.preferences import ListingPreferences, SortMode


def _cmp(a: object, b: object) -> int:
    return (a > b) - (a < b)  # type: ignore[operator]


def compare_by_mode(
    lhs: FileSystemObject,
    rhs: FileSystemObject,
    mode: SortMode | None,
    *,
    case_sensitive: bool = False,
) -> int:
    """Compare two entries according to a sort mode.

    Args:
        lhs: First entry.
        rhs: Second entry.
        mode: Sort mode. None compares full paths (natural order).
        case_sensitive: Compare names without case folding.

    Returns:
        Negative, zero or positive, like a classic comparator.
    """
    match mode:
        case SortMode.NAME_ASC | SortMode.NAME_DESC:
            if case_sensitive:
                result = _cmp(lhs.name, rhs.name)
            else:
                result = _cmp(lhs.name.casefold(), rhs.name.casefold())
        case SortMode.DATE_ASC | SortMode.DATE_DESC:
            result = _cmp(lhs.last_modified, rhs.last_modified)
        case SortMode.SIZE_ASC | SortMode.SIZE_DESC:
            result = _cmp(lhs.effective_size() or 0, rhs.effective_size() or 0)
        case _:
            return _cmp(lhs.full_path, rhs.full_path)

    return -result if mode.is_descending else result


def compare_entries(
    lhs: FileSystemObject,
    rhs: FileSystemObject,
    mode: SortMode | None,
    *,
    dirs_first: bool = True,
    case_sensitive: bool = False,
) -> int:
    """Compare two entries for display order.

    Args:
        lhs: First entry.
        rhs: Second entry.
        mode: Sort mode applied after the ".." and directory rules.
        dirs_first: Sort directories (and symlinks to directories) first.
        case_sensitive: Compare names without case folding.

    Returns:
        Negative, zero or positive, like a classic comparator.
    """
    lhs_parent = lhs.kind == EntryKind.PARENT_DIRECTORY
    rhs_parent = rhs.kind == EntryKind.PARENT_DIRECTORY
    if lhs_parent or rhs_parent:
        if lhs_parent and rhs_parent:
            return 0
        return -1 if lhs_parent else 1

    if dirs_first:
        lhs_dir = lhs.is_directory()
        rhs_dir = rhs.is_directory()
        if lhs_dir != rhs_dir:
            return -1 if lhs_dir else 1

    return compare_by_mode(lhs, rhs, mode, case_sensitive=case_sensitive)


def sort_entries(
    entries: list[FileSystemObject],
    prefs: ListingPreferences,
) -> list[FileSystemObject]:
    """Sort ``entries`` in place using the preference snapshot.

    Returns:
        The same list object, sorted.
    """
    mode = prefs.sort_mode
    dirs_first = prefs.show_dirs_first
    case_sensitive = prefs.case_sensitive_sort

    def _compare(lhs: FileSystemObject, rhs: FileSystemObject) -> int:
        return compare_entries(
            lhs, rhs, mode, dirs_first=dirs_first, case_sensitive=case_sensitive
        )

    entries.sort(key=cmp_to_key(_compare))
    return entries
