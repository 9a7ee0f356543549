"""Email templates built from semantic blocks."""

from mailtemplate.templates.base import EmailTemplateBase
from mailtemplate.templates.email_template import EmailTemplate
from mailtemplate.templates.types import (
    Block,
    BodyListItem,
    BodyText,
    Button,
    ButtonGroup,
    EmailContent,
    Footer,
    Header,
    Heading,
)

__all__ = [
    "Block",
    "BodyListItem",
    "BodyText",
    "Button",
    "ButtonGroup",
    "EmailContent",
    "EmailTemplate",
    "EmailTemplateBase",
    "Footer",
    "Header",
    "Heading",
]
