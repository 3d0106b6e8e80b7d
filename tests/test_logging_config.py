"""Tests for root logger setup."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from miniserver.logging_config import setup_logging
from miniserver.models import LoggingConfig


class TestSetupLogging:
    def test_plain_format_installs_stream_handler(self):
        setup_logging(LoggingConfig(level="debug", format="plain"))
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        handler = root.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert not isinstance(handler, RichHandler)
        assert "%(levelname)s" in handler.formatter._fmt

    def test_rich_format_installs_rich_handler(self):
        setup_logging(LoggingConfig(level="WARNING", format="rich"), no_color=True)
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert isinstance(root.handlers[0], RichHandler)

    def test_repeated_setup_replaces_handlers(self):
        setup_logging(LoggingConfig())
        setup_logging(LoggingConfig(level="ERROR"))
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.ERROR
