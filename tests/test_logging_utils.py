"""Tests for structured logging helpers."""

import json
import logging
from pathlib import Path

import pytest

from argv.classifier import classify
from argv.logging_utils import StructuredTextFormatter, log_event, setup_logging


def _payloads(caplog: pytest.LogCaptureFixture) -> list[dict]:
    return [json.loads(record.getMessage()) for record in caplog.records]


def test_classify_emits_summary_event(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="argv"):
        classify(["-ab", "x", "pos", "", "--", "rest"])

    payloads = _payloads(caplog)
    assert [p["event"] for p in payloads] == ["argv_end_of_options", "argv_classified"]
    assert payloads[0]["passthrough_count"] == 1
    summary = payloads[1]
    assert summary["token_count"] == 6
    assert summary["positional_count"] == 1
    assert summary["option_count"] == 2
    assert summary["passthrough_count"] == 1


def test_log_event_is_silent_when_disabled(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="argv"):
        log_event("ignored", detail="x")

    assert caplog.records == []


def test_log_event_makes_fields_log_safe(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="argv"):
        log_event("paths", path=Path("/tmp/x"), pairs=[("-a", "")], other=object())

    payload = _payloads(caplog)[0]
    assert payload["path"] == "/tmp/x"
    assert payload["pairs"] == [["-a", ""]]
    assert isinstance(payload["other"], str)


def _record(message: str) -> logging.LogRecord:
    return logging.LogRecord("argv", logging.DEBUG, __file__, 1, message, None, None)


def test_formatter_renders_structured_block() -> None:
    formatter = StructuredTextFormatter()
    message = json.dumps({"event": "argv_classified", "option_count": 2})

    text = formatter.format(_record(message))

    assert text.splitlines() == [
        "=== argv_classified ===",
        "level: DEBUG",
        "logger: argv",
        "option_count: 2",
    ]


def test_formatter_falls_back_for_plain_messages() -> None:
    formatter = StructuredTextFormatter()

    first = formatter.format(_record("hello\nworld"))
    second = formatter.format(_record("again"))

    assert first.splitlines()[0] == "=== argv ==="
    assert "message: hello\\nworld" in first
    assert second.startswith("\n=== argv ===")


def test_setup_logging_without_path_does_nothing(argv_logger: logging.Logger) -> None:
    before = list(argv_logger.handlers)

    assert setup_logging(None) is None
    assert argv_logger.handlers == before


def test_setup_logging_writes_events_to_file(
    tmp_path: Path, argv_logger: logging.Logger
) -> None:
    log_path = tmp_path / "logs" / "argv.log"

    handler = setup_logging(log_path)
    classify(["--name", "value"])
    assert handler is not None
    handler.flush()

    text = log_path.read_text(encoding="utf-8")
    assert "=== argv_classified ===" in text
    assert "option_count: 1" in text
