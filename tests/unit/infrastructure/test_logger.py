from __future__ import annotations

import json
import logging
import sys

import pytest

from twelve_data.infrastructure.logging.logger import (
    _JsonFormatter,  # internal but importable
    configure_root_logging,
    get_json_logger,
    set_request_id,
)


def _render(msg: str, level: int = logging.INFO, **attrs: object) -> dict:
    """Build a record, attach attributes and return the parsed JSON payload."""
    logger = logging.getLogger("test.logger")
    record = logger.makeRecord(
        name=logger.name,
        level=level,
        fn="test_logger",
        lno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in attrs.items():
        setattr(record, key, value)
    return json.loads(_JsonFormatter().format(record))


def test_configure_root_logging_installs_json_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    root = logging.getLogger()
    saved = root.handlers[:]
    saved_level = root.level
    root.handlers.clear()
    try:
        configure_root_logging()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, _JsonFormatter)

        configure_root_logging()
        assert len(root.handlers) == 1
    finally:
        root.handlers[:] = saved
        root.setLevel(saved_level)


def test_formatter_basic_fields() -> None:
    payload = _render("hello")
    assert payload["message"] == "hello"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert "ts" in payload


def test_formatter_merges_extra_dict() -> None:
    payload = _render("twelve_data.dispatch", extra={"endpoint": "quote", "status_code": 429})
    assert payload["endpoint"] == "quote"
    assert payload["status_code"] == 429


def test_formatter_uses_context_request_id() -> None:
    set_request_id("req-1")
    try:
        assert _render("x")["request_id"] == "req-1"
        assert _render("x", request_id="req-2")["request_id"] == "req-2"
    finally:
        set_request_id(None)


def test_formatter_exception_fields() -> None:
    logger = logging.getLogger("test.logger")
    try:
        raise ValueError("bad")
    except ValueError:
        record = logger.makeRecord(
            logger.name, logging.ERROR, "f", 1, "failed", (), sys.exc_info()
        )
    payload = json.loads(_JsonFormatter().format(record))
    assert payload["exc_type"] == "ValueError"
    assert payload["exc_message"] == "bad"


def test_get_json_logger_propagates() -> None:
    assert get_json_logger("twelve_data.x").propagate is True
