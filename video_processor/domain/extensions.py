"""
File-extension tokens and the suffix matcher built from them.

Extensions are handled without the leading dot ("mov", not ".mov"). A list of
extensions keeps its order and its duplicates; order only affects how the
matcher's alternation is written, never what it matches.
"""
import re

from ..config.video import EXTENSION_PATTERN
from .exceptions import InvalidExtensionException

_EXTENSION_RE = re.compile(EXTENSION_PATTERN)


def normalize(token: str) -> str:
    """
    Trims and lower-cases `token`, then validates it as an extension.

    Raises:
        InvalidExtensionException: if the result is empty or contains anything
            other than lowercase letters and digits.
    """
    normalized = token.strip().lower()
    if not _EXTENSION_RE.fullmatch(normalized):
        raise InvalidExtensionException(token)
    return normalized


def parse_list(raw: str) -> tuple[str, ...]:
    """
    Splits a comma-separated string into normalized extensions, in order.

    An empty string yields one empty token and therefore fails.

    >>> parse_list("MOV, Avi , mp4")
    ('mov', 'avi', 'mp4')
    """
    return tuple(normalize(part) for part in raw.split(","))


def suffix_matcher(extensions: tuple[str, ...]) -> re.Pattern:
    """Returns a pattern matching names that end in `.` plus any of `extensions`, ignoring case."""
    alternation = "|".join(re.escape(ext) for ext in extensions)
    return re.compile(rf"\.(?:{alternation})$", re.IGNORECASE)
