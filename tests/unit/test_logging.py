"""
Unit tests for logging setup and structured output.
"""

import json
import logging
import sys

import pytest

from exponential_pageset import __version__
from exponential_pageset.core.logging import (
    StructuredFormatter,
    get_logger,
    setup_logging,
)
from exponential_pageset.modules.pageset import PagerState


def _record(message: str, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="exponential_pageset.test",
        level=level,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=None,
    )


@pytest.mark.unit
def test_get_logger_namespacing():
    """Test logger names are prefixed with the package name."""
    assert get_logger().name == "exponential_pageset"
    assert get_logger("pager").name == "exponential_pageset.pager"
    assert (
        get_logger("exponential_pageset.modules").name == "exponential_pageset.modules"
    )


@pytest.mark.unit
def test_setup_logging_installs_json_handler(reset_logging):
    """Test setup attaches a single JSON console handler."""
    logger = setup_logging(log_level="DEBUG")

    assert logger.name == "exponential_pageset"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, StructuredFormatter)


@pytest.mark.unit
def test_setup_logging_is_idempotent(reset_logging):
    """Test repeated setup does not add handlers."""
    first = setup_logging(log_level="INFO")
    second = setup_logging(log_level="DEBUG")

    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.INFO


@pytest.mark.unit
def test_setup_logging_plain_text_from_settings(reset_logging, monkeypatch):
    """Test LOG_FORMAT=text selects the plain formatter."""
    monkeypatch.setenv("LOG_FORMAT", "text")

    logger = setup_logging()

    assert not isinstance(logger.handlers[0].formatter, StructuredFormatter)


@pytest.mark.unit
def test_structured_formatter_fields():
    """Test JSON records carry the standard fields."""
    formatter = StructuredFormatter(fmt="%(timestamp)s %(level)s %(message)s")

    data = json.loads(formatter.format(_record("page set built")))

    assert data["message"] == "page set built"
    assert data["level"] == "INFO"
    assert data["logger_name"] == "exponential_pageset.test"
    assert data["service"] == {"name": "exponential-pageset", "version": __version__}
    assert "timestamp" in data
    assert "pathname" not in data


@pytest.mark.unit
def test_structured_formatter_exception():
    """Test exceptions are rendered with type and message."""
    formatter = StructuredFormatter(fmt="%(message)s")
    try:
        raise ValueError("bad page")
    except ValueError:
        record = _record("failed", logging.ERROR)
        record.exc_info = sys.exc_info()

    data = json.loads(formatter.format(record))

    assert data["exception"]["type"] == "ValueError"
    assert data["exception"]["message"] == "bad page"


@pytest.mark.unit
def test_clamping_is_logged(caplog):
    """Test clamping an out-of-range page emits a debug record."""
    state = PagerState(total_entries=50, entries_per_page=10)

    with caplog.at_level(logging.DEBUG, logger="exponential_pageset"):
        state.set_current_page(40)

    assert "Clamped current page" in caplog.messages


@pytest.mark.unit
def test_non_numeric_page_is_logged(caplog):
    """Test a non-numeric page emits a warning."""
    state = PagerState(total_entries=50, entries_per_page=10)

    with caplog.at_level(logging.WARNING, logger="exponential_pageset"):
        state.set_current_page("abc")

    assert "Non-numeric page treated as 0" in caplog.messages
