"""Template types for email rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from typing import Union

# None keeps the HTML wording, False omits the block from plain text
PlainOverride = Optional[Union[str, bool]]


@dataclass
class EmailContent:
    """Container for email content."""

    subject: str
    body_text: str
    body_html: str


@dataclass(frozen=True)
class Header:
    """Branding region at the top of the email."""


@dataclass(frozen=True)
class Heading:
    title: str
    plain_title: PlainOverride = None


@dataclass(frozen=True)
class BodyText:
    text: str
    plain_text: PlainOverride = None


@dataclass(frozen=True)
class BodyListItem:
    text: str
    metadata: str = ""
    icon: str = ""
    plain_text: PlainOverride = None
    plain_metadata: PlainOverride = None


@dataclass(frozen=True)
class ButtonGroup:
    left_text: str
    left_url: str
    right_text: str
    right_url: str
    plain_left_text: PlainOverride = None
    plain_right_text: PlainOverride = None


@dataclass(frozen=True)
class Button:
    text: str
    url: str
    plain_text: PlainOverride = None


@dataclass(frozen=True)
class Footer:
    """Footer text; empty means the branding default."""

    text: str = ""


Block = Union[Header, Heading, BodyText, BodyListItem, ButtonGroup, Button, Footer]


def plain_value(value: str, override: PlainOverride) -> Optional[str]:
    """Resolve the plain-text wording of a field.

    Returns None when the field is suppressed from the plain-text body.
    """
    if override is False:
        return None
    if override is None:
        return value
    return override
