"""Pytest configuration and fixtures for the email template tests.

This module provides shared fixtures: branding defaults, a clean
environment for configuration tests, and a ready-made template.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Generator

import pytest

# Add backend source to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))

MAIL_ENV_VARS = (
    'MAIL_PRODUCT_NAME',
    'MAIL_SLOGAN',
    'MAIL_THEME_COLOR',
    'MAIL_TEXT_COLOR',
    'MAIL_LOGO_URL',
    'LOG_LEVEL',
)


# --- Configuration Fixtures ---


@pytest.fixture
def clean_env(monkeypatch) -> None:
    """Remove branding and logging variables from the environment."""
    for name in MAIL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def restore_root_logger() -> Generator:
    """Restore root logger handlers and level after a test reconfigures it."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level

    yield root_logger

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


# --- Sample Data Factories ---


@pytest.fixture
def defaults():
    """Branding without a logo."""
    from mailtemplate.defaults import Defaults

    return Defaults(
        name='Acme Cloud',
        slogan='Your files, everywhere',
        color='#123456',
        text_color='#ffffff',
    )


@pytest.fixture
def logo_defaults():
    """Branding with a logo image."""
    from mailtemplate.defaults import Defaults

    return Defaults(
        name='Acme Cloud',
        slogan='Your files, everywhere',
        logo_url='https://cdn.example.com/logo.png?v=2&size=large',
    )


@pytest.fixture
def template(defaults):
    """An empty template using the sample branding."""
    from mailtemplate.templates import EmailTemplate

    return EmailTemplate(defaults=defaults, email_id='settings.Welcome')


@pytest.fixture
def welcome_template(template):
    """A template populated like a typical welcome email."""
    template.set_subject('Welcome aboard')
    template.add_header()
    template.add_heading('Welcome aboard')
    template.add_body_text(
        'You now have an account, you can add, protect, and share your data.'
    )
    template.add_body_button_group(
        'Set your password',
        'https://example.org/reset/q1234567890',
        'Install client',
        'https://example.org/install',
    )
    template.add_footer()
    return template
