"""Ownership and permission models for filesystem entries.

Provides the user, group and permission value types attached to every
entry, plus the synthetic ownership triple used when real metadata
cannot be inspected (restricted mode).
"""

import stat
from dataclasses import dataclass

# Synthetic ownership used in restricted mode, where the execution
# context exposes files through this user and group only.
RESTRICTED_USER_NAME = "system"
RESTRICTED_GROUP_NAME = "sdcard_r"
RESTRICTED_PERMISSIONS = "----rwxr-x"

# Well-known identifiers for the synthetic user and group
_WELL_KNOWN_IDS: dict[str, int] = {
    "root": 0,
    "system": 1000,
    "sdcard_r": 1028,
}


@dataclass(frozen=True, slots=True)
class User:
    """Owner of a filesystem entry.

    Attributes:
        id: Numeric user id.
        name: User name.
    """

    id: int
    name: str


@dataclass(frozen=True, slots=True)
class Group:
    """Group of a filesystem entry.

    Attributes:
        id: Numeric group id.
        name: Group name.
    """

    id: int
    name: str


@dataclass(frozen=True, slots=True)
class Permissions:
    """Raw permission bits of a filesystem entry.

    Only the permission and special bits are stored (``stat.S_IMODE``).
    The value is carried through listings and never mutated.

    Attributes:
        mode: Permission bits, including setuid/setgid/sticky.
    """

    mode: int

    def __post_init__(self) -> None:
        """Validate the permission bits."""
        if not (0 <= self.mode <= 0o7777):
            msg = f"Permission mode out of range: {oct(self.mode)}"
            raise ValueError(msg)

    @classmethod
    def from_mode(cls, st_mode: int) -> "Permissions":
        """Build permissions from a full ``st_mode`` value."""
        return cls(stat.S_IMODE(st_mode))

    @classmethod
    def from_raw_string(cls, raw: str) -> "Permissions":
        """Parse an ``ls``-style permission string.

        Accepts either the 9-character form (``rwxr-x---``) or the
        10-character form with a leading type character
        (``drwxr-x---``). Special bits are read from the execute
        positions (``s``/``S`` and ``t``/``T``).

        Args:
            raw: Permission string.

        Returns:
            Parsed Permissions.

        Raises:
            ValueError: If the string is malformed.
        """
        if len(raw) == 10:
            raw = raw[1:]
        if len(raw) != 9:
            msg = f"Invalid permission string: {raw!r}"
            raise ValueError(msg)

        mode = 0
        specials = (stat.S_ISUID, stat.S_ISGID, stat.S_ISVTX)
        for triad in range(3):
            chunk = raw[triad * 3 : triad * 3 + 3]
            shift = (2 - triad) * 3
            if chunk[0] == "r":
                mode |= 0o4 << shift
            elif chunk[0] != "-":
                msg = f"Invalid permission string: {raw!r}"
                raise ValueError(msg)
            if chunk[1] == "w":
                mode |= 0o2 << shift
            elif chunk[1] != "-":
                msg = f"Invalid permission string: {raw!r}"
                raise ValueError(msg)

            special_char = "t" if triad == 2 else "s"
            exec_char = chunk[2]
            if exec_char == "x":
                mode |= 0o1 << shift
            elif exec_char == special_char:
                mode |= (0o1 << shift) | specials[triad]
            elif exec_char == special_char.upper():
                mode |= specials[triad]
            elif exec_char != "-":
                msg = f"Invalid permission string: {raw!r}"
                raise ValueError(msg)

        return cls(mode)

    def to_raw_string(self) -> str:
        """Render the permissions in 9-character ``ls`` form."""
        specials = (stat.S_ISUID, stat.S_ISGID, stat.S_ISVTX)
        chars: list[str] = []
        for triad in range(3):
            shift = (2 - triad) * 3
            chars.append("r" if self.mode & (0o4 << shift) else "-")
            chars.append("w" if self.mode & (0o2 << shift) else "-")
            executable = bool(self.mode & (0o1 << shift))
            special_char = "t" if triad == 2 else "s"
            if self.mode & specials[triad]:
                chars.append(special_char if executable else special_char.upper())
            else:
                chars.append("x" if executable else "-")
        return "".join(chars)


def well_known_user(name: str) -> User:
    """Build a User for a well-known account name.

    Unknown names get id -1.
    """
    return User(id=_WELL_KNOWN_IDS.get(name, -1), name=name)


def well_known_group(name: str) -> Group:
    """Build a Group for a well-known group name.

    Unknown names get id -1.
    """
    return Group(id=_WELL_KNOWN_IDS.get(name, -1), name=name)


def restricted_ownership() -> tuple[User, Group, Permissions]:
    """Return the synthetic (user, group, permissions) triple for restricted mode."""
    return (
        well_known_user(RESTRICTED_USER_NAME),
        well_known_group(RESTRICTED_GROUP_NAME),
        Permissions.from_raw_string(RESTRICTED_PERMISSIONS),
    )
