"""Tests for i18nscan_common.logging module."""

from __future__ import annotations

import io
import json
import logging

from i18nscan_common.logging import (
    JsonFormatter,
    LoggerAdapter,
    get_logger,
    setup_logging,
    with_fields,
)


def _capture(name: str) -> tuple[logging.Logger, io.StringIO]:
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter())
    logger = logging.getLogger(name)
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger, stream


def _records(stream: io.StringIO) -> list[dict[str, object]]:
    return [json.loads(line) for line in stream.getvalue().splitlines()]


class TestGetLogger:
    """Tests for get_logger."""

    def test_returns_adapter_with_null_handler(self) -> None:
        """Library loggers are adapters with a NullHandler."""
        logger = get_logger(f"{__name__}.null")
        assert isinstance(logger, LoggerAdapter)
        assert any(isinstance(h, logging.NullHandler) for h in logger.logger.handlers)


class TestLoggerAdapter:
    """Tests for structured field injection."""

    def test_defaults_operation_and_status(self) -> None:
        """operation and status are filled in when missing."""
        base, stream = _capture(f"{__name__}.defaults")
        adapter = LoggerAdapter(base, {})
        adapter.info("hello")
        adapter.error("failed")
        info, error = _records(stream)
        assert info["operation"] == "unknown"
        assert info["status"] == "success"
        assert error["status"] == "error"

    def test_extra_fields_are_rendered(self) -> None:
        """Per-call extra fields appear in the JSON payload."""
        base, stream = _capture(f"{__name__}.extra")
        LoggerAdapter(base, {}).warning("slow", extra={"operation": "analyze", "matches": 3})
        (record,) = _records(stream)
        assert record["message"] == "slow"
        assert record["level"] == "WARNING"
        assert record["operation"] == "analyze"
        assert record["status"] == "warning"
        assert record["matches"] == 3


class TestWithFields:
    """Tests for with_fields."""

    def test_binds_fields_and_correlation_id(self) -> None:
        """Bound fields and the correlation ID reach every record."""
        base, stream = _capture(f"{__name__}.bound")
        with with_fields(base, correlation_id="run-1", command="i18nscan") as log:
            log.info("started", extra={"operation": "extract"})
        (record,) = _records(stream)
        assert record["correlation_id"] == "run-1"
        assert record["command"] == "i18nscan"

    def test_call_extra_wins_over_bound_fields(self) -> None:
        """Per-call values override bound values."""
        base, stream = _capture(f"{__name__}.override")
        with with_fields(base, status="start") as log:
            log.info("done", extra={"status": "success"})
        (record,) = _records(stream)
        assert record["status"] == "success"


class TestCorrelationId:
    """Tests for context correlation IDs."""

    def test_plain_logger_inside_bound_block(self) -> None:
        """Plain loggers pick up the correlation ID bound by with_fields."""
        bound, _ = _capture(f"{__name__}.bound_ctx")
        base, stream = _capture(f"{__name__}.ctx")
        with with_fields(bound, correlation_id="ctx-7"):
            base.info("plain")
        base.info("after")
        inside, after = _records(stream)
        assert inside["correlation_id"] == "ctx-7"
        assert "correlation_id" not in after


def test_setup_logging_writes_json_to_stream() -> None:
    """setup_logging installs the JSON formatter on the root logger."""
    stream = io.StringIO()
    setup_logging(logging.INFO, stream=stream)
    logging.getLogger(f"{__name__}.root").info("configured")
    (record,) = _records(stream)
    assert record["message"] == "configured"
