"""Branding defaults used by email templates."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from mailtemplate.exceptions import ConfigurationError
from mailtemplate.exceptions import ValidationError

DEFAULT_NAME = "Mailtemplate"
DEFAULT_SLOGAN = "a safe home for all your data"
DEFAULT_COLOR = "#0082c9"
DEFAULT_TEXT_COLOR = "#ffffff"

AUTOMATED_NOTICE = (
    "This is an automatically generated email, please do not reply."
)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


@dataclass(frozen=True)
class Defaults:
    """Product branding shown in headers and default footers."""

    name: str = DEFAULT_NAME
    slogan: str = DEFAULT_SLOGAN
    color: str = DEFAULT_COLOR
    text_color: str = DEFAULT_TEXT_COLOR
    logo_url: str = ""

    def __post_init__(self) -> None:
        # Colors are written into inline style attributes
        for field_name in ("color", "text_color"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not _HEX_COLOR.fullmatch(value):
                raise ValidationError(
                    f"{field_name} must be a #rgb or #rrggbb color",
                    field=field_name,
                )

    def default_footer_text(self) -> str:
        """Return the footer used when a template asks for the default one.

        The result uses ``<br>`` as its line-break marker, like any caller
        supplied footer text.
        """
        title = f"{self.name} - {self.slogan}" if self.slogan else self.name
        return f"{title}<br>{AUTOMATED_NOTICE}"


def _color(env_name: str, default: str) -> str:
    value = os.getenv(env_name, "").strip() or default
    if not _HEX_COLOR.fullmatch(value):
        raise ConfigurationError(
            env_name,
            detail=f"Expected a #rgb or #rrggbb color, got {value!r}",
        )
    return value


def load_defaults() -> Defaults:
    """Load branding defaults from the environment.

    Raises:
        ConfigurationError: If a color variable is not a hex color.
    """
    return Defaults(
        name=os.getenv("MAIL_PRODUCT_NAME", "").strip() or DEFAULT_NAME,
        slogan=os.getenv("MAIL_SLOGAN", DEFAULT_SLOGAN).strip(),
        color=_color("MAIL_THEME_COLOR", DEFAULT_COLOR),
        text_color=_color("MAIL_TEXT_COLOR", DEFAULT_TEXT_COLOR),
        logo_url=os.getenv("MAIL_LOGO_URL", "").strip(),
    )
