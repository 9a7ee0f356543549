"""Builder contract for block-based emails.

Example:

    template = EmailTemplate(email_id="settings.Welcome")
    template.set_subject("Welcome aboard")
    template.add_header()
    template.add_heading("Welcome aboard")
    template.add_body_text("You now have an account, you can add, protect, and share your data.")
    template.add_body_button_group(
        "Set your password", "https://example.org/reset/q1234567890",
        "Install client", "https://example.org/install",
    )
    template.add_footer("Optional footer text")

    html_content = template.render_html()
    plain_content = template.render_text()

Blocks render in the order they were added. A footer belongs after the
body content, but the call order is not enforced.
"""

from __future__ import annotations

from abc import ABC
from abc import abstractmethod

from mailtemplate.templates.types import EmailContent
from mailtemplate.templates.types import PlainOverride


class EmailTemplateBase(ABC):
    """Abstract builder for HTML emails with a plain-text alternative."""

    @property
    @abstractmethod
    def subject(self) -> str:
        """Subject line of the email."""

    @abstractmethod
    def set_subject(self, subject: str) -> None:
        """Set the subject line."""

    @abstractmethod
    def add_header(self) -> None:
        """Add the branding header.

        Calling this more than once adds more than one header; the visual
        result is undefined but nothing is raised.
        """

    @abstractmethod
    def add_heading(self, title: str, plain_title: PlainOverride = None) -> None:
        """Add a heading to the email.

        Args:
            title: Heading text; may be empty.
            plain_title: Plain-text wording, or False to leave it out.
        """

    @abstractmethod
    def add_body_text(self, text: str, plain_text: PlainOverride = None) -> None:
        """Add a paragraph to the body of the email.

        Args:
            text: Paragraph text. Not markup; it is escaped for HTML.
            plain_text: Plain-text wording, or False to leave it out.
        """

    @abstractmethod
    def add_body_list_item(
        self,
        text: str,
        metadata: str = "",
        icon: str = "",
        plain_text: PlainOverride = None,
        plain_metadata: PlainOverride = None,
    ) -> None:
        """Add a list item to the body of the email.

        Args:
            text: Item text.
            metadata: Secondary line shown below the text.
            icon: URL of an icon shown next to the item.
            plain_text: Plain-text wording, or False to leave it out.
            plain_metadata: Plain-text metadata, or False to leave it out.
        """

    @abstractmethod
    def add_body_button_group(
        self,
        left_text: str,
        left_url: str,
        right_text: str,
        right_url: str,
        plain_left_text: PlainOverride = None,
        plain_right_text: PlainOverride = None,
    ) -> None:
        """Add a group of two buttons to the body of the email.

        Args:
            left_text: Text of the left button.
            left_url: URL of the left button.
            right_text: Text of the right button.
            right_url: URL of the right button.
            plain_left_text: Plain-text label of the left button.
            plain_right_text: Plain-text label of the right button.
        """

    @abstractmethod
    def add_body_button(
        self,
        text: str,
        url: str,
        plain_text: PlainOverride = None,
    ) -> None:
        """Add a single button to the body of the email."""

    @abstractmethod
    def add_footer(self, text: str = "") -> None:
        """Add a footer.

        ``<br>`` in the text becomes a new line in the plain-text email.

        Args:
            text: Footer text. If empty, the branding default
                "Name - Slogan<br>This is an automatically generated email,
                please do not reply." is used.
        """

    def add_default_footer(self) -> None:
        """Add the branding default footer."""
        self.add_footer("")

    @abstractmethod
    def render_html(self) -> str:
        """Return the rendered HTML email as a string."""

    @abstractmethod
    def render_text(self) -> str:
        """Return the rendered plain-text email as a string."""

    def render(self) -> EmailContent:
        """Render subject and both bodies."""
        return EmailContent(
            subject=self.subject,
            body_text=self.render_text(),
            body_html=self.render_html(),
        )
