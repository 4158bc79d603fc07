"""Tests for the structured logging utilities."""

import logging
import time
from unittest.mock import MagicMock, patch

import pytest

from od_tools.utils.logging import (
    LogContext,
    PerformanceMetrics,
    StructuredLogFormatter,
    StructuredLogger,
    configure_logging,
    get_extra_context,
    get_logger,
    set_extra_context,
    timed_operation,
)


def _record(msg: str) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestContextVariables:
    """Tests for context variable management."""

    def setup_method(self) -> None:
        """Clear context before each test."""
        set_extra_context({})

    def teardown_method(self) -> None:
        """Clear context after each test."""
        set_extra_context({})

    def test_extra_context_default_empty(self) -> None:
        assert get_extra_context() == {}

    def test_set_and_get_extra_context(self) -> None:
        set_extra_context({"sim": "sim.xlsm"})
        assert get_extra_context() == {"sim": "sim.xlsm"}


class TestPerformanceMetrics:
    """Tests for PerformanceMetrics class."""

    def test_initialization(self) -> None:
        """Test basic initialization."""
        metrics = PerformanceMetrics(operation="generate_log")
        assert metrics.operation == "generate_log"
        assert metrics.duration_seconds == 0.0
        assert metrics.hours_processed == 0
        assert metrics.hours_reported == 0
        assert metrics.custom_metrics == {}

    def test_finish_calculates_duration(self) -> None:
        """Finish should calculate duration."""
        metrics = PerformanceMetrics(operation="generate_log")
        time.sleep(0.01)
        metrics.finish()
        assert metrics.duration_seconds > 0
        assert metrics.end_time is not None

    def test_to_dict_with_all_fields(self) -> None:
        metrics = PerformanceMetrics(operation="generate_log")
        metrics.duration_seconds = 2.0
        metrics.hours_processed = 73
        metrics.hours_reported = 12
        metrics.custom_metrics = {"sim": "sim.xlsm"}

        result = metrics.to_dict()

        assert result["operation"] == "generate_log"
        assert result["duration_seconds"] == 2.0
        assert result["hours_processed"] == 73
        assert result["hours_reported"] == 12
        assert result["custom_metrics"]["sim"] == "sim.xlsm"

    def test_to_dict_excludes_zero_values(self) -> None:
        """to_dict should exclude zero values."""
        metrics = PerformanceMetrics(operation="generate_log")
        result = metrics.to_dict()
        assert "hours_processed" not in result
        assert "hours_reported" not in result
        assert "custom_metrics" not in result


class TestStructuredLogger:
    """Tests for StructuredLogger class."""

    def setup_method(self) -> None:
        """Set up test fixtures."""
        self.logger = get_logger("test_logger")

    def test_get_logger_returns_structured_logger(self) -> None:
        assert isinstance(get_logger(__name__), StructuredLogger)

    def test_build_message_without_kwargs(self) -> None:
        assert self.logger._build_message("Opened sim") == "Opened sim"

    def test_build_message_with_kwargs(self) -> None:
        msg = self.logger._build_message("Opened sim", sheets=10, sim="a.xlsm")
        assert msg == "Opened sim | sheets=10, sim=a.xlsm"

    @patch.object(logging.Logger, "info")
    def test_info_logging(self, mock_info: MagicMock) -> None:
        """Info method should log at INFO level."""
        self.logger.info("Wrote log", characters=42)
        mock_info.assert_called_once()
        call_args = mock_info.call_args[0][0]
        assert "Wrote log" in call_args
        assert "characters=42" in call_args

    @patch.object(logging.Logger, "debug")
    def test_debug_logging(self, mock_debug: MagicMock) -> None:
        self.logger.debug("No events this hour")
        mock_debug.assert_called_once()

    @patch.object(logging.Logger, "warning")
    def test_warning_logging(self, mock_warning: MagicMock) -> None:
        self.logger.warning("Unusual header")
        mock_warning.assert_called_once()

    @patch.object(logging.Logger, "error")
    def test_error_logging(self, mock_error: MagicMock) -> None:
        self.logger.error("Action failed", action="tick")
        mock_error.assert_called_once()
        assert "action=tick" in mock_error.call_args[0][0]

    @patch.object(logging.Logger, "exception")
    def test_exception_logging(self, mock_exception: MagicMock) -> None:
        self.logger.exception("Log generation failed")
        mock_exception.assert_called_once()

    @patch.object(logging.Logger, "info")
    def test_log_performance(self, mock_info: MagicMock) -> None:
        metrics = PerformanceMetrics(operation="generate_log")
        metrics.duration_seconds = 1.5
        metrics.hours_processed = 73
        self.logger.log_performance(metrics)
        mock_info.assert_called_once()
        call_args = mock_info.call_args[0][0]
        assert "Performance: generate_log" in call_args
        assert "hours_processed=73" in call_args


class TestLogContext:
    """Tests for LogContext context manager."""

    def setup_method(self) -> None:
        set_extra_context({})

    def teardown_method(self) -> None:
        set_extra_context({})

    def test_context_sets_values(self) -> None:
        with LogContext(hour=5, sim="sim.xlsm"):
            assert get_extra_context() == {"hour": 5, "sim": "sim.xlsm"}

    def test_context_restores_values(self) -> None:
        set_extra_context({"sim": "sim.xlsm"})

        with LogContext(hour=5):
            assert get_extra_context() == {"sim": "sim.xlsm", "hour": 5}

        assert get_extra_context() == {"sim": "sim.xlsm"}

    def test_nested_contexts(self) -> None:
        with LogContext(hour=1):
            with LogContext(hour=2):
                assert get_extra_context()["hour"] == 2
            assert get_extra_context()["hour"] == 1
        assert get_extra_context() == {}

    def test_context_restored_after_exception(self) -> None:
        with pytest.raises(RuntimeError), LogContext(hour=9):
            raise RuntimeError("boom")
        assert get_extra_context() == {}


class TestTimedOperation:
    """Tests for timed_operation context manager."""

    @patch.object(StructuredLogger, "log_performance")
    def test_timed_operation_logs_metrics(self, mock_log: MagicMock) -> None:
        logger = get_logger("test")
        with timed_operation(logger, "generate_log") as metrics:
            metrics.hours_processed = 73

        mock_log.assert_called_once()
        logged_metrics = mock_log.call_args[0][0]
        assert logged_metrics.operation == "generate_log"
        assert logged_metrics.hours_processed == 73
        assert logged_metrics.end_time is not None

    @patch.object(StructuredLogger, "log_performance")
    def test_timed_operation_logs_on_error(self, mock_log: MagicMock) -> None:
        logger = get_logger("test")
        with pytest.raises(ValueError), timed_operation(logger, "generate_log"):
            raise ValueError("bad sim")

        mock_log.assert_called_once()


@pytest.mark.usefixtures("restore_root_logger")
class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_configure_with_string_level(self) -> None:
        configure_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_configure_with_int_level(self) -> None:
        configure_logging(level=logging.WARNING)
        assert logging.getLogger().level == logging.WARNING

    def test_configure_uses_structured_formatter(self) -> None:
        configure_logging()
        handler = logging.getLogger().handlers[0]
        assert isinstance(handler.formatter, StructuredLogFormatter)

    def test_configure_replaces_handlers(self) -> None:
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1


class TestStructuredLogFormatter:
    """Tests for StructuredLogFormatter class."""

    def setup_method(self) -> None:
        set_extra_context({})

    def teardown_method(self) -> None:
        set_extra_context({})

    def test_format_without_context(self) -> None:
        formatter = StructuredLogFormatter("%(message)s")
        assert formatter.format(_record("Opened sim")) == "Opened sim"

    def test_format_with_extra_context(self) -> None:
        set_extra_context({"sim": "sim.xlsm", "hour": 4})
        formatter = StructuredLogFormatter("%(message)s")
        result = formatter.format(_record("Reading hour"))
        assert result == "[sim=sim.xlsm hour=4] Reading hour"

    def test_record_message_is_restored(self) -> None:
        set_extra_context({"hour": 4})
        record = _record("Reading hour")
        StructuredLogFormatter("%(message)s").format(record)
        assert record.msg == "Reading hour"
