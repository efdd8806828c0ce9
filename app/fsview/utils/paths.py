"""Path and name utilities.

Pure string functions over entry names and POSIX paths: extension
extraction, relative path detection and conversion, and trailing slash
normalization. None of these touch the filesystem.
"""

import posixpath

from fsview.models.entry import (
    CURRENT_DIRECTORY,
    PARENT_DIRECTORY,
    ROOT_DIRECTORY,
    EntryKind,
    FileSystemObject,
)

SEPARATOR = "/"

# Compound extensions matched before the plain last-dot rule
COMPRESSED_TAR_EXTENSIONS: tuple[str, ...] = ("tar.gz", "tar.bz2", "tar.lzma")

# Extensions of archives that can be uncompressed
UNCOMPRESSABLE_EXTENSIONS: frozenset[str] = frozenset(
    {"tar", "tgz", "tar.gz", "tar.bz2", "tar.lzma", "zip", "gz", "bz2", "lzma", "xz", "Z"}
)


def extension_of(name: str) -> str | None:
    """Return the extension of a file name.

    Dotfiles have no extension. Compressed tarball suffixes such as
    ``tar.gz`` are returned whole.

    Args:
        name: File name (not a path).

    Returns:
        Extension without the leading dot, or None.
    """
    pos = name.rfind(".")
    if pos <= 0:
        return None

    for compound in COMPRESSED_TAR_EXTENSIONS:
        if name.endswith("." + compound):
            return compound

    return name[pos + 1 :]


def base_name_of(name: str) -> str:
    """Return the file name without its extension."""
    ext = extension_of(name)
    if ext is None:
        return name
    return name[: len(name) - len(ext) - 1]


def is_relative_path(path: str) -> bool:
    """Check if a path is relative.

    A path counts as relative when it starts with ``./`` or ``../``,
    contains a ``/./`` or ``/../`` segment anywhere, or does not start
    at the root.

    Args:
        path: Path to check.

    Returns:
        True if the path is relative.
    """
    if path.startswith(CURRENT_DIRECTORY + SEPARATOR):
        return True
    if path.startswith(PARENT_DIRECTORY + SEPARATOR):
        return True
    if SEPARATOR + CURRENT_DIRECTORY + SEPARATOR in path:
        return True
    if SEPARATOR + PARENT_DIRECTORY + SEPARATOR in path:
        return True
    return not path.startswith(ROOT_DIRECTORY)


def add_trailing_slash(path: str) -> str:
    """Ensure the path ends with a separator."""
    return path if path.endswith(SEPARATOR) else path + SEPARATOR


def remove_trailing_slash(path: str) -> str:
    """Strip one trailing separator. The root path is returned unchanged."""
    if path.strip() == ROOT_DIRECTORY:
        return path
    if path.endswith(SEPARATOR):
        return path[:-1]
    return path


def to_relative_path(path: str, base_dir: str) -> str:
    """Express ``path`` relative to ``base_dir``.

    Both arguments are made absolute against the current directory.
    When ``path`` lies under ``base_dir`` the remainder is returned;
    otherwise ``base_dir`` is walked upward, adding ``../`` per step,
    until a common ancestor is found. ``path`` equal to ``base_dir``
    yields ``"."``.

    Args:
        path: Path to convert.
        base_dir: Directory the result is relative to.

    Returns:
        Relative path.

    Raises:
        ValueError: If the paths share no common ancestor.
    """
    target = posixpath.abspath(path)
    base = add_trailing_slash(posixpath.abspath(base_dir))

    if target == remove_trailing_slash(base):
        return CURRENT_DIRECTORY
    if target.startswith(base):
        return target[len(base) :]

    relative: list[str] = []
    while True:
        parent = add_trailing_slash(posixpath.dirname(remove_trailing_slash(base)))
        if parent == base:
            msg = f"No common ancestor between {path!r} and {base_dir!r}"
            raise ValueError(msg)
        relative.append(PARENT_DIRECTORY + SEPARATOR)
        base = parent
        if target.startswith(base):
            return "".join(relative) + target[len(base) :]
        if target == remove_trailing_slash(base):
            return "".join(relative)


def is_name_exists(entries: list[FileSystemObject], name: str) -> bool:
    """Check if any entry in the listing has the given name."""
    return any(entry.name == name for entry in entries)


def is_supported_uncompressed_file(entry: FileSystemObject | None) -> bool:
    """Check if the entry is an archive that can be uncompressed.

    Only plain files qualify; directories and symlinks never do.
    """
    if entry is None:
        return False
    if entry.is_directory() or entry.kind == EntryKind.SYMLINK:
        return False
    ext = extension_of(entry.name)
    return ext is not None and ext in UNCOMPRESSABLE_EXTENSIONS
