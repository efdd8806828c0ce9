"""Listing preference models.

This module defines the Pydantic snapshot of user preferences that
drives filtering and sorting. Filter and sort functions receive an
explicit ListingPreferences instance rather than reading global state.
"""

from enum import IntEnum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class SortMode(IntEnum):
    """Sort mode of a directory listing.

    Values are stable identifiers persisted in the preference store.
    """

    NAME_ASC = 0
    NAME_DESC = 1
    DATE_ASC = 2
    DATE_DESC = 3
    SIZE_ASC = 4
    SIZE_DESC = 5

    @classmethod
    def from_id(cls, mode_id: int) -> "SortMode":
        """Look up a sort mode by identifier.

        Unknown identifiers fall back to the default mode (NAME_ASC).
        """
        try:
            return cls(mode_id)
        except ValueError:
            return DEFAULT_SORT_MODE

    @property
    def is_descending(self) -> bool:
        """Check if the mode sorts in descending order."""
        return self in (SortMode.NAME_DESC, SortMode.DATE_DESC, SortMode.SIZE_DESC)


DEFAULT_SORT_MODE = SortMode.NAME_ASC


class ListingPreferences(BaseModel):
    """Snapshot of the preferences that shape a directory listing.

    Attributes:
        show_hidden: Show dotfiles.
        show_system: Show system files.
        show_symlinks: Show symbolic links.
        show_dirs_first: Sort directories before other entries.
        case_sensitive_sort: Compare names case-sensitively.
        sort_mode: Sort mode of the listing.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    show_hidden: Annotated[bool, Field(description="Show hidden files")] = True
    show_system: Annotated[bool, Field(description="Show system files")] = True
    show_symlinks: Annotated[bool, Field(description="Show symbolic links")] = True
    show_dirs_first: Annotated[bool, Field(description="Show directories first")] = True
    case_sensitive_sort: Annotated[bool, Field(description="Case sensitive sort")] = False
    sort_mode: Annotated[SortMode, Field(description="Sort mode")] = DEFAULT_SORT_MODE
