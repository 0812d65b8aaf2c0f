"""Icon identifier helpers.

Icons are addressed by compound identifiers of the form
``collection:name``. The name part may itself contain the separator.
"""

import re

from .errors import InvalidIconIdError

SEPARATOR = ":"

_WHITESPACE_RUN = re.compile(r"\s+")


def join_icon_id(collection: str, name: str) -> str:
    """Build an icon identifier.

    Examples:
        >>> join_icon_id("lucide", "home")
        'lucide:home'
    """
    return f"{collection}{SEPARATOR}{name}"


def split_icon_id(icon_id: str) -> tuple[str, str]:
    """Split an icon identifier into collection and name.

    Only the first separator is significant; any further separators
    belong to the name.

    Args:
        icon_id: Identifier such as ``"lucide:home"``.

    Returns:
        Tuple of (collection, name).

    Raises:
        InvalidIconIdError: If the separator is missing or either part
            is empty.

    Examples:
        >>> split_icon_id("mdi:a:b")
        ('mdi', 'a:b')
    """
    collection, sep, name = icon_id.partition(SEPARATOR)
    if not sep:
        raise InvalidIconIdError(f"Icon id '{icon_id}' has no '{SEPARATOR}' separator")
    if not collection:
        raise InvalidIconIdError(f"Icon id '{icon_id}' has an empty collection")
    if not name:
        raise InvalidIconIdError(f"Icon id '{icon_id}' has an empty name")
    return collection, name


def normalize_icon_name(name: str) -> str:
    """Normalize a display name to a filesystem-safe token.

    Lower-cases the name and replaces each run of whitespace with a
    single hyphen.

    Examples:
        >>> normalize_icon_name("My  Icon")
        'my-icon'
    """
    return _WHITESPACE_RUN.sub("-", name.lower())


def icon_file_name(icon_id: str) -> str:
    """Archive file name for an icon, ``{collection}-{name}.png``."""
    collection, name = split_icon_id(icon_id)
    return f"{collection}-{normalize_icon_name(name)}.png"
