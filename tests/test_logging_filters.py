"""Tests for JSON log output and request correlation."""

from __future__ import annotations

import json
import logging
from io import StringIO

import pytest

from gateway.core.config import LogSettings
from gateway.core.logging import (
    JsonFormatter,
    RequestIdFilter,
    configure_logging,
    get_request_id,
    request_context,
)


@pytest.fixture
def json_logger():
    logger = logging.getLogger("gateway.test_json")
    logger.setLevel(logging.INFO)
    logger.propagate = False

    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.addFilter(RequestIdFilter())
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    yield logger, stream
    logger.removeHandler(handler)


def test_json_formatter_emits_event_and_extras(json_logger):
    logger, stream = json_logger

    logger.info("proxy.forwarded", extra={"url": "/app/status", "status": 200})

    data = json.loads(stream.getvalue())
    assert data["message"] == "proxy.forwarded"
    assert data["level"] == "info"
    assert data["logger"] == "gateway.test_json"
    assert data["url"] == "/app/status"
    assert data["status"] == 200
    assert "request_id" not in data
    assert "lineno" not in data


def test_request_context_attaches_request_id(json_logger):
    logger, stream = json_logger

    with request_context("req-123") as rid:
        assert rid == "req-123"
        assert get_request_id() == "req-123"
        logger.info("rate_limit.exceeded")

    assert get_request_id() is None
    assert json.loads(stream.getvalue())["request_id"] == "req-123"


def test_request_context_generates_id_when_missing():
    with request_context() as rid:
        assert rid
        assert get_request_id() == rid


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_writes_json_file(tmp_path, restore_root_logger):
    log_file = tmp_path / "logs" / "gateway.log"
    configure_logging(
        LogSettings(level="INFO", format="json", output="file", file_path=str(log_file))
    )

    logging.getLogger("gateway.test").info("rate_limit.allowed", extra={"url": "/a"})
    for handler in restore_root_logger.handlers:
        handler.flush()

    record = json.loads(log_file.read_text().strip())
    assert record["message"] == "rate_limit.allowed"
    assert record["url"] == "/a"


def test_configure_logging_plain_format_includes_request_id(restore_root_logger, capsys):
    configure_logging(LogSettings(level="INFO", format="plain", output="stderr"))

    with request_context("req-9"):
        logging.getLogger("gateway.test").warning("rate_limit.exceeded")

    assert restore_root_logger.level == logging.INFO
    assert len(restore_root_logger.handlers) == 1
    assert "[req-9] rate_limit.exceeded" in capsys.readouterr().err
