"""Block-based email template rendered to HTML and plain text.

Blocks are appended by the add_* methods and kept in call order. Both
render methods walk the same block sequence without modifying it, so the
HTML and plain-text bodies always describe the same content.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any
from typing import Mapping
from typing import Optional

from markupsafe import Markup
from markupsafe import escape

from mailtemplate.defaults import Defaults
from mailtemplate.defaults import load_defaults
from mailtemplate.templates import fragments
from mailtemplate.templates.base import EmailTemplateBase
from mailtemplate.templates.types import Block
from mailtemplate.templates.types import BodyListItem
from mailtemplate.templates.types import BodyText
from mailtemplate.templates.types import Button
from mailtemplate.templates.types import ButtonGroup
from mailtemplate.templates.types import Footer
from mailtemplate.templates.types import Header
from mailtemplate.templates.types import Heading
from mailtemplate.templates.types import PlainOverride
from mailtemplate.templates.types import plain_value
from mailtemplate.utils.logging import get_logger
from mailtemplate.utils.validators import is_safe_url
from mailtemplate.utils.validators import require_plain_override
from mailtemplate.utils.validators import require_string

LINE_BREAK_MARKER = re.compile(r"<br\s*/?>", re.IGNORECASE)


class EmailTemplate(EmailTemplateBase):
    """Concrete email builder with inline-CSS HTML output.

    Args:
        defaults: Branding used for the header, buttons and default footer.
            Loaded from the environment when omitted.
        email_id: Identifier of the kind of email, e.g. "settings.Welcome".
        data: Caller context kept alongside the template.
    """

    def __init__(
        self,
        defaults: Optional[Defaults] = None,
        email_id: str = "",
        data: Optional[Mapping[str, Any]] = None,
    ):
        self._defaults = defaults if defaults is not None else load_defaults()
        self._email_id = require_string(email_id, "email_id")
        self._data = dict(data or {})
        self._subject = ""
        self._blocks: list[Block] = []
        self._logger = get_logger(__name__, email_id=self._email_id)

    @property
    def defaults(self) -> Defaults:
        return self._defaults

    @property
    def email_id(self) -> str:
        return self._email_id

    @property
    def data(self) -> Mapping[str, Any]:
        return MappingProxyType(self._data)

    @property
    def subject(self) -> str:
        return self._subject

    @property
    def blocks(self) -> tuple[Block, ...]:
        """Snapshot of the added blocks in call order."""
        return tuple(self._blocks)

    def set_subject(self, subject: str) -> None:
        self._subject = require_string(subject, "subject")

    # -------------------------------------------------------------------------
    # Building
    # -------------------------------------------------------------------------

    def _append(self, block: Block) -> None:
        self._blocks.append(block)
        self._logger.debug(
            "Email block added",
            extra={
                "context": {
                    "block": type(block).__name__,
                    "position": len(self._blocks),
                }
            },
        )

    def add_header(self) -> None:
        self._append(Header())

    def add_heading(self, title: str, plain_title: PlainOverride = None) -> None:
        self._append(
            Heading(
                title=require_string(title, "title"),
                plain_title=require_plain_override(plain_title, "plain_title"),
            )
        )

    def add_body_text(self, text: str, plain_text: PlainOverride = None) -> None:
        self._append(
            BodyText(
                text=require_string(text, "text"),
                plain_text=require_plain_override(plain_text, "plain_text"),
            )
        )

    def add_body_list_item(
        self,
        text: str,
        metadata: str = "",
        icon: str = "",
        plain_text: PlainOverride = None,
        plain_metadata: PlainOverride = None,
    ) -> None:
        self._append(
            BodyListItem(
                text=require_string(text, "text"),
                metadata=require_string(metadata, "metadata"),
                icon=require_string(icon, "icon"),
                plain_text=require_plain_override(plain_text, "plain_text"),
                plain_metadata=require_plain_override(
                    plain_metadata, "plain_metadata"
                ),
            )
        )

    def add_body_button_group(
        self,
        left_text: str,
        left_url: str,
        right_text: str,
        right_url: str,
        plain_left_text: PlainOverride = None,
        plain_right_text: PlainOverride = None,
    ) -> None:
        self._append(
            ButtonGroup(
                left_text=require_string(left_text, "left_text"),
                left_url=require_string(left_url, "left_url"),
                right_text=require_string(right_text, "right_text"),
                right_url=require_string(right_url, "right_url"),
                plain_left_text=require_plain_override(
                    plain_left_text, "plain_left_text"
                ),
                plain_right_text=require_plain_override(
                    plain_right_text, "plain_right_text"
                ),
            )
        )

    def add_body_button(
        self,
        text: str,
        url: str,
        plain_text: PlainOverride = None,
    ) -> None:
        self._append(
            Button(
                text=require_string(text, "text"),
                url=require_string(url, "url"),
                plain_text=require_plain_override(plain_text, "plain_text"),
            )
        )

    def add_footer(self, text: str = "") -> None:
        self._append(Footer(text=require_string(text, "text")))

    # -------------------------------------------------------------------------
    # HTML rendering
    # -------------------------------------------------------------------------

    def render_html(self) -> str:
        parts = [
            Markup(fragments.DOCUMENT_HEAD_HTML).format(
                email_id=self._email_id,
                subject=self._subject,
            )
        ]
        parts.extend(self._render_block_html(block) for block in self._blocks)
        parts.append(Markup(fragments.DOCUMENT_TAIL_HTML))

        self._logger.debug(
            "Rendered HTML email",
            extra={"context": {"blocks": len(self._blocks)}},
        )
        return str(Markup("").join(parts))

    def _render_block_html(self, block: Block) -> Markup:
        defaults = self._defaults

        if isinstance(block, Header):
            if defaults.logo_url:
                return Markup(fragments.HEADER_LOGO_HTML).format(
                    color=defaults.color,
                    logo_url=self._href(defaults.logo_url),
                    name=defaults.name,
                )
            return Markup(fragments.HEADER_NAME_HTML).format(
                color=defaults.color,
                text_color=defaults.text_color,
                name=defaults.name,
            )

        if isinstance(block, Heading):
            return Markup(fragments.HEADING_HTML).format(title=block.title)

        if isinstance(block, BodyText):
            return Markup(fragments.BODY_TEXT_HTML).format(text=block.text)

        if isinstance(block, BodyListItem):
            icon = Markup("")
            if block.icon:
                icon = Markup(fragments.LIST_ITEM_ICON_HTML).format(
                    icon=self._href(block.icon)
                )
            metadata = Markup("")
            if block.metadata:
                metadata = Markup(fragments.LIST_ITEM_METADATA_HTML).format(
                    metadata=block.metadata
                )
            return Markup(fragments.LIST_ITEM_HTML).format(
                icon=icon,
                text=block.text,
                metadata=metadata,
            )

        if isinstance(block, ButtonGroup):
            return Markup(fragments.BUTTON_GROUP_HTML).format(
                left_url=self._href(block.left_url),
                left_text=block.left_text,
                right_url=self._href(block.right_url),
                right_text=block.right_text,
                color=defaults.color,
                text_color=defaults.text_color,
            )

        if isinstance(block, Button):
            return Markup(fragments.BUTTON_HTML).format(
                url=self._href(block.url),
                text=block.text,
                color=defaults.color,
                text_color=defaults.text_color,
            )

        if isinstance(block, Footer):
            text = self._footer_text(block)
            lines = LINE_BREAK_MARKER.split(text)
            content = Markup("<br>").join(escape(line) for line in lines)
            if defaults.logo_url:
                return Markup(fragments.FOOTER_LOGO_HTML).format(
                    logo_url=self._href(defaults.logo_url),
                    name=defaults.name,
                    text=content,
                )
            return Markup(fragments.FOOTER_HTML).format(text=content)

        raise TypeError(f"Unsupported email block: {type(block).__name__}")

    def _href(self, url: str) -> str:
        if is_safe_url(url):
            return url
        self._logger.warning(
            "Replaced unsafe URL scheme in email link",
            extra={"context": {"scheme": url.split(":", 1)[0][:20].strip()}},
        )
        return "#"

    def _footer_text(self, block: Footer) -> str:
        return block.text or self._defaults.default_footer_text()

    # -------------------------------------------------------------------------
    # Plain-text rendering
    # -------------------------------------------------------------------------

    def render_text(self) -> str:
        parts: list[str] = []
        in_list = False
        for block in self._blocks:
            rendered = self._render_block_text(block)
            if not rendered:
                continue
            is_list_item = isinstance(block, BodyListItem)
            if in_list and not is_list_item:
                parts.append("\n")
            parts.append(rendered)
            in_list = is_list_item

        self._logger.debug(
            "Rendered plain-text email",
            extra={"context": {"blocks": len(self._blocks)}},
        )
        return "".join(parts)

    def _render_block_text(self, block: Block) -> str:
        if isinstance(block, Header):
            return ""

        if isinstance(block, Heading):
            title = plain_value(block.title, block.plain_title)
            if title is None:
                return ""
            return fragments.HEADING_TEXT.format(title=title)

        if isinstance(block, BodyText):
            text = plain_value(block.text, block.plain_text)
            if text is None:
                return ""
            return fragments.BODY_TEXT.format(text=text)

        if isinstance(block, BodyListItem):
            text = plain_value(block.text, block.plain_text)
            if text is None:
                return ""
            rendered = fragments.LIST_ITEM_TEXT.format(text=text)
            metadata = plain_value(block.metadata, block.plain_metadata)
            if metadata:
                rendered += fragments.LIST_ITEM_METADATA_TEXT.format(
                    metadata=metadata
                )
            return rendered

        if isinstance(block, ButtonGroup):
            lines = []
            left = plain_value(block.left_text, block.plain_left_text)
            if left is not None:
                lines.append(fragments.BUTTON_TEXT.format(text=left, url=block.left_url))
            right = plain_value(block.right_text, block.plain_right_text)
            if right is not None:
                lines.append(
                    fragments.BUTTON_TEXT.format(text=right, url=block.right_url)
                )
            if not lines:
                return ""
            return "".join(lines) + "\n"

        if isinstance(block, Button):
            text = plain_value(block.text, block.plain_text)
            if text is None:
                return ""
            return fragments.BUTTON_TEXT.format(text=text, url=block.url) + "\n"

        if isinstance(block, Footer):
            text = LINE_BREAK_MARKER.sub("\n", self._footer_text(block))
            return fragments.FOOTER_TEXT.format(text=text)

        raise TypeError(f"Unsupported email block: {type(block).__name__}")
