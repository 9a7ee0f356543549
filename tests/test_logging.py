"""Tests for structured logging utilities."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))

from mailtemplate.utils.logging import (
    ContextLogger,
    StructuredLogFormatter,
    configure_logging,
    get_logger,
)


def _make_record(**attrs) -> logging.LogRecord:
    record = logging.LogRecord(
        name='mailtemplate.test',
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg='Rendered %s blocks',
        args=(3,),
        exc_info=None,
    )
    for key, value in attrs.items():
        setattr(record, key, value)
    return record


class TestStructuredLogFormatter:
    """Tests for StructuredLogFormatter."""

    def test_formats_record_as_json(self) -> None:
        payload = json.loads(StructuredLogFormatter().format(_make_record()))

        assert payload['level'] == 'INFO'
        assert payload['logger'] == 'mailtemplate.test'
        assert payload['message'] == 'Rendered 3 blocks'
        assert payload['source']['line'] == 10
        assert 'context' not in payload

    def test_includes_context(self) -> None:
        record = _make_record(context={'email_id': 'settings.Welcome'})
        payload = json.loads(StructuredLogFormatter().format(record))
        assert payload['context'] == {'email_id': 'settings.Welcome'}
        assert 'extra' not in payload

    def test_includes_exception_details(self) -> None:
        try:
            raise ValueError('broken')
        except ValueError:
            record = _make_record(exc_info=sys.exc_info())

        payload = json.loads(StructuredLogFormatter().format(record))

        assert payload['exception']['type'] == 'ValueError'
        assert payload['exception']['message'] == 'broken'


class TestContextLogger:
    """Tests for ContextLogger and get_logger."""

    def test_get_logger_returns_context_logger(self) -> None:
        logger = get_logger('mailtemplate.test', email_id='abc')
        assert isinstance(logger, ContextLogger)
        assert logger.extra == {'email_id': 'abc'}

    def test_merges_adapter_and_call_context(self) -> None:
        logger = get_logger('mailtemplate.test', email_id='abc')

        msg, kwargs = logger.process(
            'hello',
            {'extra': {'context': {'block': 'Heading'}}},
        )

        assert msg == 'hello'
        assert kwargs['extra']['context'] == {'email_id': 'abc', 'block': 'Heading'}

    def test_does_not_mutate_adapter_context(self) -> None:
        logger = get_logger('mailtemplate.test', email_id='abc')
        logger.process('hello', {'extra': {'context': {'block': 'Footer'}}})
        assert logger.extra == {'email_id': 'abc'}


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_installs_structured_handler(self, restore_root_logger) -> None:
        configure_logging('debug')

        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(
            restore_root_logger.handlers[0].formatter,
            StructuredLogFormatter,
        )

    def test_reads_level_from_env(
        self,
        restore_root_logger,
        clean_env,
        monkeypatch,
    ) -> None:
        monkeypatch.setenv('LOG_LEVEL', 'WARNING')
        configure_logging()
        assert restore_root_logger.level == logging.WARNING
