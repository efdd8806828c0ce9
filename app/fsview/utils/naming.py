"""Unique name generation for copies and new entries.

Rename templates receive the base name and the extension (including its
leading dot, or an empty string) and return a new candidate name, e.g.
``"{name} (copy){ext}"`` turns ``report.txt`` into ``report (copy).txt``.
"""

import logging
from collections.abc import Callable, Iterable
from string import Formatter

from fsview.core.errors import NameGenerationError
from fsview.utils.paths import base_name_of, extension_of

logger = logging.getLogger(__name__)

RenameTemplate = Callable[[str, str], str]

DEFAULT_RENAME_TEMPLATE = "{name} (copy){ext}"
MAX_NAME_ATTEMPTS = 1000
TEMPLATE_FIELDS = frozenset({"name", "ext"})


def template_from_format(fmt: str) -> RenameTemplate:
    """Build a rename template from a format string.

    Args:
        fmt: Format string with ``{name}`` and ``{ext}`` placeholders.

    Returns:
        Callable producing names from (base_name, extension).

    Raises:
        NameGenerationError: If ``fmt`` is malformed or uses any other
            placeholder.
    """
    try:
        fields = [field for _, field, _, _ in Formatter().parse(fmt) if field is not None]
        unknown = sorted(set(fields) - TEMPLATE_FIELDS)
        if unknown:
            msg = f"Unknown placeholder {{{unknown[0]}}} in rename template {fmt!r}"
            raise NameGenerationError(msg)
        fmt.format(name="name", ext=".ext")
    except (AttributeError, IndexError, KeyError, ValueError) as e:
        msg = f"Invalid rename template {fmt!r}: {e}"
        raise NameGenerationError(msg) from e

    def _apply(name: str, ext: str) -> str:
        return fmt.format(name=name, ext=ext)

    return _apply


def create_non_existing_name(
    existing_names: Iterable[str],
    attempted_name: str,
    rename_template: RenameTemplate | str = DEFAULT_RENAME_TEMPLATE,
    *,
    max_attempts: int = MAX_NAME_ATTEMPTS,
) -> str:
    """Find a name not present in ``existing_names``.

    Returns ``attempted_name`` unchanged when it is free. Otherwise the
    template is applied to the previous candidate until a free name
    comes up.

    Args:
        existing_names: Names already taken.
        attempted_name: Preferred name.
        rename_template: Callable or ``{name}``/``{ext}`` format string.
        max_attempts: Maximum number of template applications.

    Returns:
        A name not in ``existing_names``.

    Raises:
        NameGenerationError: If the template stops producing new names
            or no free name is found within ``max_attempts``.
    """
    taken = set(existing_names)
    if attempted_name not in taken:
        return attempted_name

    template = (
        template_from_format(rename_template)
        if isinstance(rename_template, str)
        else rename_template
    )

    candidate = attempted_name
    seen = {candidate}
    for _ in range(max_attempts):
        ext = extension_of(candidate)
        candidate = template(base_name_of(candidate), f".{ext}" if ext is not None else "")
        if candidate not in taken:
            logger.debug("Generated name %s for %s", candidate, attempted_name)
            return candidate
        if candidate in seen:
            msg = f"Rename template repeats {candidate!r} for {attempted_name!r}"
            raise NameGenerationError(msg)
        seen.add(candidate)

    msg = f"No free name for {attempted_name!r} after {max_attempts} attempts"
    raise NameGenerationError(msg)
