"""Unit tests for structured logging: formatter, context and lazy adapter."""
from __future__ import annotations

import json
import logging
import sys

import pytest

from kickstart_service.infra.logging import (
    ContextInjectingFilter,
    JSONFormatter,
    clear_log_context,
    configure_logging,
    get_lazy_logger,
    get_log_context,
    set_log_context,
    shutdown,
)


def _record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="tests.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture(autouse=True)
def _clean_context():
    clear_log_context()
    yield
    clear_log_context()


@pytest.mark.unit
class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_single_line_json(self):
        """Each record is one JSON object with level, logger, message and timestamp."""
        line = JSONFormatter().format(_record("User created", user_id=7))
        data = json.loads(line)

        assert "\n" not in line
        assert data["level"] == "INFO"
        assert data["logger"] == "tests.logger"
        assert data["message"] == "User created"
        assert data["user_id"] == 7
        assert data["timestamp"].endswith("Z")

    def test_static_fields(self):
        data = json.loads(JSONFormatter(static={"service": "kickstart-service"}).format(_record()))

        assert data["service"] == "kickstart-service"

    def test_exception_is_escaped(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()

        data = json.loads(JSONFormatter().format(record))

        assert "ValueError: boom" in data["exception"]
        assert "\n" not in data["exception"]

    def test_non_serializable_extra(self):
        """Unknown objects are rendered with str()."""
        data = json.loads(JSONFormatter().format(_record(obj=object())))

        assert data["obj"].startswith("<object object")

    def test_no_trace_ids_without_span(self):
        data = json.loads(JSONFormatter().format(_record()))

        assert "trace_id" not in data


@pytest.mark.unit
class TestLogContext:
    """Tests for the contextvars log context."""

    def test_set_get_clear(self):
        set_log_context(request_id="abc")
        set_log_context(user_id=1)

        assert get_log_context() == {"request_id": "abc", "user_id": 1}

        clear_log_context()
        assert get_log_context() == {}

    def test_filter_injects_context(self):
        set_log_context(request_id="abc")
        record = _record()

        assert ContextInjectingFilter().filter(record) is True
        assert record.request_id == "abc"

    def test_filter_does_not_overwrite(self):
        set_log_context(request_id="abc")
        record = _record(request_id="explicit")

        ContextInjectingFilter().filter(record)

        assert record.request_id == "explicit"


@pytest.mark.unit
class TestLazyLogger:
    """Tests for LazyLoggerAdapter."""

    def test_callable_not_evaluated_when_disabled(self, caplog):
        calls = []
        lazy = get_lazy_logger("tests.lazy")

        with caplog.at_level(logging.INFO, logger="tests.lazy"):
            lazy.debug(lambda: calls.append(1) or "expensive")

        assert calls == []

    def test_callable_evaluated_when_enabled(self, caplog):
        lazy = get_lazy_logger("tests.lazy")

        with caplog.at_level(logging.DEBUG, logger="tests.lazy"):
            lazy.debug(lambda: "computed message")

        assert "computed message" in caplog.messages


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_file_output_carries_context(self, tmp_path):
        """Records reach the file as JSON with the request context attached."""
        log_file = tmp_path / "logs" / "app.jsonl"
        root = logging.getLogger()
        previous_level = root.level
        try:
            configure_logging(
                log_level="INFO",
                file_path=log_file,
                json_logs=True,
                console_enabled=False,
                capture_warnings=False,
            )
            set_log_context(request_id="req-1")
            logging.getLogger("tests.configured").info("hello", extra={"user_id": 3})
        finally:
            shutdown()
            root.setLevel(previous_level)

        lines = log_file.read_text(encoding="utf-8").splitlines()
        records = [json.loads(line) for line in lines]
        hello = next(r for r in records if r["message"] == "hello")

        assert hello["request_id"] == "req-1"
        assert hello["user_id"] == 3
        assert hello["service"] == "kickstart-service"
