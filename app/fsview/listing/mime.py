"""Mime-type matching for restricted listings.

The filter only needs to know whether an entry matches a requested
mime type; how the type is determined is up to the MimeTypeMatcher in
use. The default matcher guesses from the file name.
"""

import fnmatch
import mimetypes
from typing import Protocol

from fsview.models.entry import FileSystemObject

# Sentinel mime type that matches every entry
ALL_MIME_TYPES = "*/*"


class MimeTypeMatcher(Protocol):
    """Decides whether an entry matches a requested mime type."""

    def matches(self, entry: FileSystemObject, mime_type: str) -> bool:
        """Return True if ``entry`` has a type matching ``mime_type``."""
        ...


class GuessingMimeTypeMatcher:
    """Matches mime types guessed from the entry name.

    Requested types may use glob patterns (``image/*``). Entries whose
    type cannot be guessed only match the ALL_MIME_TYPES sentinel.
    """

    def matches(self, entry: FileSystemObject, mime_type: str) -> bool:
        """Return True if the guessed type of ``entry`` matches ``mime_type``."""
        if mime_type == ALL_MIME_TYPES:
            return True
        guessed, _ = mimetypes.guess_type(entry.name, strict=False)
        if guessed is None:
            return False
        return fnmatch.fnmatchcase(guessed.lower(), mime_type.lower())
