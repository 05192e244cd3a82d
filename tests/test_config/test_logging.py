"""Testes abrangentes para gcp_logfmt.config.logging.

Cobre: configure_logging, get_logger, CloudLoggingFormatter,
create_json_formatter.
"""

from __future__ import annotations

import io
import json
import logging
import sys
from collections.abc import Iterator
from typing import Any

import pytest
from pythonjsonlogger.json import JsonFormatter

from gcp_logfmt.config.logging import (
    VALID_LOG_LEVELS,
    CloudLoggingFormatter,
    configure_logging,
    create_json_formatter,
    get_logger,
)
from gcp_logfmt.config.settings import FormatterConfig
from gcp_logfmt.formatter import SOURCE_LOCATION_KEY
from gcp_logfmt.utils.errors import EncodingError


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def _make_record(msg: Any = "message", levelno: int = logging.INFO, **extra: Any) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test",
        level=levelno,
        pathname="/srv/app/module.py",
        lineno=17,
        msg=msg,
        args=(),
        exc_info=None,
        func="handler",
    )
    record.__dict__.update(extra)
    return record


def _format(formatter: logging.Formatter, record: logging.LogRecord) -> dict[str, Any]:
    return json.loads(formatter.format(record))


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        """Configura logging com nível padrão INFO."""
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_configure_logging_case_insensitive(self) -> None:
        """Nível é case insensitive."""
        configure_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_configure_logging_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_configure_logging_invalid_config_raises(self) -> None:
        """Configuração inválida levanta ValueError."""
        with pytest.raises(ValueError, match="caller_prettyfier"):
            configure_logging(config=FormatterConfig(caller_prettyfier="nope"))  # type: ignore[arg-type]

    def test_configure_logging_replaces_handlers(self) -> None:
        """configure_logging substitui handlers existentes."""
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, CloudLoggingFormatter)

    def test_configure_logging_writes_json_lines(self) -> None:
        """Cada registro vira uma linha JSON no stream."""
        stream = io.StringIO()
        configure_logging(level="DEBUG", stream=stream)
        logger = get_logger("integration.test")
        logger.debug("Debug message", extra={"custom_field": "value"})
        logger.warning("Warning message")

        lines = stream.getvalue().splitlines()
        assert len(lines) == 2
        first, second = (json.loads(line) for line in lines)
        assert first["message"] == "Debug message"
        assert first["severity"] == "DEBUG"
        assert first["custom_field"] == "value"
        assert second["severity"] == "WARNING"
        assert second["level"] == "warning"

    def test_configure_logging_report_caller(self) -> None:
        """report_caller emite sourceLocation do chamador real."""
        stream = io.StringIO()
        configure_logging(stream=stream, report_caller=True)
        get_logger("caller.test").info("hello")
        location = json.loads(stream.getvalue())[SOURCE_LOCATION_KEY]
        assert location["function"] == "test_configure_logging_report_caller"
        assert location["file"] == __file__
        assert isinstance(location["line"], int)

    def test_valid_log_levels_constant(self) -> None:
        """VALID_LOG_LEVELS contém os níveis esperados."""
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS


class TestGetLogger:
    """Testes para get_logger."""

    def test_get_logger_returns_logger(self) -> None:
        logger = get_logger("test.module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"

    def test_get_logger_same_name_returns_same_instance(self) -> None:
        assert get_logger("same.module") is get_logger("same.module")


class TestCloudLoggingFormatter:
    """Testes para CloudLoggingFormatter."""

    def test_create_json_formatter_returns_formatter(self) -> None:
        formatter = create_json_formatter()
        assert isinstance(formatter, CloudLoggingFormatter)
        assert isinstance(formatter, JsonFormatter)

    def test_reserved_fields(self) -> None:
        decoded = _format(create_json_formatter(), _make_record("Test message"))
        assert decoded["message"] == "Test message"
        assert decoded["severity"] == "INFO"
        assert decoded["level"] == "info"
        assert set(decoded["timestamp"]) == {"seconds", "nanos"}
        assert SOURCE_LOCATION_KEY not in decoded

    def test_timestamp_from_record_created(self) -> None:
        record = _make_record()
        record.created = 1700000000.25
        decoded = _format(create_json_formatter(), record)
        assert decoded["timestamp"] == {"seconds": 1700000000, "nanos": 250000000}

    def test_message_args_are_interpolated(self) -> None:
        record = _make_record("Fallback applied for %s")
        record.args = ("parser",)
        assert _format(create_json_formatter(), record)["message"] == "Fallback applied for parser"

    @pytest.mark.parametrize(
        ("level", "severity", "label"),
        [
            (logging.CRITICAL, "CRITICAL", "fatal"),
            (logging.ERROR, "ERROR", "error"),
            (logging.WARNING, "WARNING", "warning"),
            (logging.INFO, "INFO", "info"),
            (logging.DEBUG, "DEBUG", "debug"),
            (5, "DEBUG", "trace"),
        ],
    )
    def test_stdlib_levels(self, level: int, severity: str, label: str) -> None:
        decoded = _format(create_json_formatter(), _make_record(levelno=level))
        assert decoded["severity"] == severity
        assert decoded["level"] == label

    def test_extra_fields_are_merged(self) -> None:
        record = _make_record(latency_ms=42, tenant_id="t123")
        decoded = _format(create_json_formatter(), record)
        assert decoded["latency_ms"] == 42
        assert decoded["tenant_id"] == "t123"
        assert "pathname" not in decoded
        assert "levelno" not in decoded

    def test_extra_colliding_with_reserved_key_is_renamed(self) -> None:
        record = _make_record(level="custom", timestamp="user")
        decoded = _format(create_json_formatter(), record)
        assert decoded["fields.level"] == "custom"
        assert decoded["fields.timestamp"] == "user"
        assert decoded["level"] == "info"

    def test_extra_exception_keeps_message(self) -> None:
        decoded = _format(create_json_formatter(), _make_record(error=ValueError("wild walrus")))
        assert decoded["error"] == "wild walrus"

    def test_dict_message_becomes_fields(self) -> None:
        decoded = _format(create_json_formatter(), _make_record({"event": "login", "message": "x"}))
        assert decoded["message"] == ""
        assert decoded["event"] == "login"
        assert decoded["fields.message"] == "x"

    def test_exc_info_is_included(self) -> None:
        try:
            raise RuntimeError("kaboom")
        except RuntimeError:
            record = _make_record(levelno=logging.ERROR)
            record.exc_info = sys.exc_info()
        decoded = _format(create_json_formatter(), record)
        assert "RuntimeError: kaboom" in decoded["exc_info"]
        assert decoded["severity"] == "ERROR"

    def test_static_fields(self) -> None:
        formatter = CloudLoggingFormatter(static_fields={"service": "checkout"})
        assert _format(formatter, _make_record())["service"] == "checkout"

    def test_report_caller(self) -> None:
        formatter = create_json_formatter(report_caller=True)
        decoded = _format(formatter, _make_record())
        assert decoded[SOURCE_LOCATION_KEY] == {
            "function": "handler",
            "file": "/srv/app/module.py",
            "line": 17,
        }

    def test_report_caller_uses_config(self) -> None:
        config = FormatterConfig(
            trim_filename_prefix="/srv/",
            disable_timestamp=True,
        )
        formatter = create_json_formatter(config=config, report_caller=True)
        decoded = _format(formatter, _make_record())
        assert decoded[SOURCE_LOCATION_KEY]["file"] == "app/module.py"
        assert "timestamp" not in decoded

    def test_pretty_print(self) -> None:
        formatter = create_json_formatter(config=FormatterConfig(pretty_print=True))
        output = formatter.format(_make_record())
        assert output.startswith("{\n  ")
        assert not output.endswith("\n")
        assert json.loads(output)["message"] == "message"

    def test_compact_has_no_trailing_newline(self) -> None:
        output = create_json_formatter().format(_make_record())
        assert "\n" not in output

    def test_unserializable_extra_raises(self) -> None:
        with pytest.raises(EncodingError):
            create_json_formatter().format(_make_record(bad=object()))
