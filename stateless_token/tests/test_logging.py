"""
Tests for structured logging configuration.
"""

import json
import logging

import structlog

from shared.logging import add_service_context, add_timestamp, configure_logging, get_logger


def test_configure_logging_renders_json(caplog):
    """Configured loggers emit JSON with service context."""
    caplog.set_level(logging.INFO)
    try:
        configure_logging("stateless-token", "info")
        get_logger("stateless_token.logging_test").info("Token policy resolved", access_timeout_seconds=1800)
    finally:
        structlog.reset_defaults()

    payload = json.loads(caplog.records[-1].getMessage())

    assert payload["event"] == "Token policy resolved"
    assert payload["service"] == "stateless-token"
    assert payload["level"] == "info"
    assert payload["logger"] == "stateless_token.logging_test"
    assert payload["access_timeout_seconds"] == 1800
    assert isinstance(payload["timestamp"], float)


def test_service_context_keeps_explicit_service():
    """An explicit service field is not overwritten."""
    processor = add_service_context("stateless-token")

    assert processor(None, "info", {"event": "x"})["service"] == "stateless-token"
    assert processor(None, "info", {"event": "x", "service": "other"})["service"] == "other"


def test_add_timestamp():
    """Events get a numeric timestamp."""
    event = add_timestamp(None, "info", {"event": "x"})

    assert isinstance(event["timestamp"], float)
