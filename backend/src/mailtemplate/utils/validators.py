"""Input validation utilities."""

from __future__ import annotations

from typing import Any
from typing import Optional
from typing import Union
from urllib.parse import urlparse

from mailtemplate.exceptions import InvalidArgumentError

UNSAFE_URL_SCHEMES = frozenset({"javascript", "vbscript", "data"})

# Browsers drop leading C0 controls and spaces, and tab/newline anywhere
_LEADING_IGNORED_CHARS = "".join(map(chr, range(0x21)))
_REMOVED_URL_CHARS = str.maketrans("", "", "\t\n\r")


def require_string(value: Any, field_name: str) -> str:
    """Validate that a builder argument is a string.

    Args:
        value: The value to validate.
        field_name: Name of the argument for error messages.

    Returns:
        The value unchanged.

    Raises:
        InvalidArgumentError: If the value is not a string.
    """
    if not isinstance(value, str):
        raise InvalidArgumentError(field_name, actual=value)
    return value


def require_plain_override(
    value: Any,
    field_name: str,
) -> Optional[Union[str, bool]]:
    """Validate a plain-text override argument.

    None keeps the HTML wording, False drops the block from the plain-text
    rendering and a string replaces the wording.

    Raises:
        InvalidArgumentError: If the value is True or not a string.
    """
    if value is None or value is False:
        return value
    if not isinstance(value, str):
        raise InvalidArgumentError(
            field_name,
            expected="str, None or False",
            actual=value,
        )
    return value


def is_safe_url(url: str) -> bool:
    """Return False for URLs whose scheme can execute script in a client."""
    cleaned = url.translate(_REMOVED_URL_CHARS).lstrip(_LEADING_IGNORED_CHARS)
    # Only the part before the first slash; netloc parsing raises on stray brackets
    scheme = urlparse(cleaned.split("/", 1)[0]).scheme
    return scheme not in UNSAFE_URL_SCHEMES

