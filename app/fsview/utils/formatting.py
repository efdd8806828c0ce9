"""Rich console and size formatting utilities.

Provides consistent formatting for CLI output using Rich, and the
human-readable size rendering used by listings.
"""

import sys
from dataclasses import dataclass

from rich.console import Console

from fsview.core.theme import get_theme
from fsview.models.entry import EntryKind, FileSystemObject, is_privileged


@dataclass(frozen=True, slots=True)
class SizeUnits:
    """Localizable size unit labels.

    Attributes:
        labels: Unit labels from bytes upward, one per power of 1024.
        template: Format string with ``{count}`` and ``{unit}`` placeholders.
    """

    labels: tuple[str, ...] = ("B", "KB", "MB", "GB")
    template: str = "{count} {unit}"

    def __post_init__(self) -> None:
        """Validate unit labels."""
        if not self.labels:
            msg = "At least one size unit label is required"
            raise ValueError(msg)


DEFAULT_SIZE_UNITS = SizeUnits()


def format_size(size: int, units: SizeUnits = DEFAULT_SIZE_UNITS) -> str:
    """Format a byte count as a human-readable string.

    The count is divided by 1024 (integer division) until it drops below
    1024 or the largest unit is reached.

    Args:
        size: Size in bytes.
        units: Unit labels and template.

    Returns:
        Formatted size, e.g. "3 KB".
    """
    count = size
    for label in units.labels[:-1]:
        if count < 1024:
            return units.template.format(count=count, unit=label)
        count //= 1024
    return units.template.format(count=count, unit=units.labels[-1])


def human_readable_size(entry: FileSystemObject, units: SizeUnits = DEFAULT_SIZE_UNITS) -> str:
    """Format the effective size of an entry.

    Directories, symlinks to directories, unresolved symlinks and entries
    without a size render as an empty string.
    """
    if entry.is_directory():
        return ""
    size = entry.effective_size()
    if size is None:
        return ""
    return format_size(size, units)


def entry_style(entry: FileSystemObject) -> str:
    """Return the theme style name used to render an entry."""
    if is_privileged(entry):
        return "entry.privileged"
    match entry.kind:
        case EntryKind.DIRECTORY | EntryKind.PARENT_DIRECTORY:
            return "entry.directory"
        case EntryKind.SYMLINK:
            return "entry.symlink" if entry.has_link_target() else "entry.broken_symlink"
        case EntryKind.BLOCK_DEVICE | EntryKind.CHARACTER_DEVICE:
            return "entry.device"
        case EntryKind.NAMED_PIPE | EntryKind.DOMAIN_SOCKET | EntryKind.SYSTEM_FILE:
            return "entry.special"
        case EntryKind.REGULAR_FILE:
            return "entry.file"


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
