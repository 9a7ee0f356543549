"""Build HTML emails with a plain-text alternative from semantic blocks."""

from mailtemplate.defaults import Defaults, load_defaults
from mailtemplate.exceptions import (
    AppError,
    ConfigurationError,
    InvalidArgumentError,
    ValidationError,
)
from mailtemplate.templates import EmailContent, EmailTemplate, EmailTemplateBase

__version__ = "1.0.0"

__all__ = [
    "AppError",
    "ConfigurationError",
    "Defaults",
    "EmailContent",
    "EmailTemplate",
    "EmailTemplateBase",
    "InvalidArgumentError",
    "ValidationError",
    "load_defaults",
]
