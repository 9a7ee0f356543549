"""Utility modules for the email template library."""

from mailtemplate.utils.logging import (
    configure_logging,
    get_logger,
)
from mailtemplate.utils.validators import (
    is_safe_url,
    require_plain_override,
    require_string,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "is_safe_url",
    "require_plain_override",
    "require_string",
]
