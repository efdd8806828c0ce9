"""Error hierarchy for fsview.

All library errors derive from FsviewError so callers can catch the
whole family at once, while the concrete subclasses let them tell a
structural conflict apart from a plain I/O failure.
"""


class FsviewError(Exception):
    """Base exception for fsview errors.

    Attributes:
        path: Filesystem path the error relates to, if any.
    """

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class DestinationConflictError(FsviewError):
    """Raised when a copy destination exists with the wrong type."""


class IOFailureError(FsviewError):
    """Raised when a stream read, write or close fails."""


class ResolutionFailureError(FsviewError):
    """Raised when a symbolic link target cannot be determined."""


class StructuralFailureError(FsviewError):
    """Raised when an entry cannot be built from a raw path."""


class NameGenerationError(FsviewError):
    """Raised when no free name could be generated."""
