"""Tests for structured logging configuration."""

import json
import logging
from collections.abc import Iterator
from unittest.mock import patch

import pytest
import structlog

from httpcontract.observability.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Reset logging to defaults after each test so later handlers stay valid."""
    yield
    configure_logging(log_format="console", log_level="INFO", force=True)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_configure_logging_respects_log_level(self) -> None:
        """Test that configure_logging sets the root level."""
        configure_logging(log_format="console", log_level="WARNING", force=True)

        assert logging.getLogger().level == logging.WARNING

    def test_lowercase_level_accepted(self) -> None:
        """Test that level names are case-insensitive."""
        configure_logging(log_format="console", log_level="debug", force=True)

        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self) -> None:
        """Test that an unknown level name does not break configuration."""
        configure_logging(log_format="console", log_level="CHATTY", force=True)

        assert logging.getLogger().level == logging.INFO

    def test_does_not_reconfigure_by_default(self) -> None:
        """Test that a second call without force is a no-op."""
        configure_logging(log_format="console", log_level="DEBUG", force=True)
        configure_logging(log_format="json", log_level="ERROR")

        assert logging.getLogger().level == logging.DEBUG

    def test_from_environment_variables(self) -> None:
        """Test that configure_logging reads HTTPCONTRACT_* variables."""
        with patch.dict(
            "os.environ",
            {
                "HTTPCONTRACT_LOG_FORMAT": "json",
                "HTTPCONTRACT_LOG_LEVEL": "ERROR",
                "HTTPCONTRACT_SERVICE_NAME": "env-service",
            },
        ):
            configure_logging(force=True)

        assert logging.getLogger().level == logging.ERROR
        assert structlog.contextvars.get_contextvars()["service"] == "env-service"

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that JSON mode emits one JSON object per event."""
        configure_logging(log_format="json", log_level="INFO", service_name="svc", force=True)
        logging.getLogger("httpcontract.test").info("plain stdlib message")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "plain stdlib message"
        assert record["service"] == "svc"
        assert record["level"] == "info"


class TestContext:
    """Tests for bind_context and clear_context."""

    def test_bind_and_clear(self) -> None:
        """Test context binding round trip."""
        clear_context()
        bind_context(request_id="req_123")

        assert structlog.contextvars.get_contextvars() == {"request_id": "req_123"}

        clear_context()
        assert structlog.contextvars.get_contextvars() == {}


class TestGetLogger:
    """Tests for get_logger."""

    def test_returns_usable_logger(self) -> None:
        """Test that loggers accept structured events."""
        configure_logging(log_format="console", log_level="DEBUG", force=True)
        logger = get_logger("httpcontract.test")

        logger.info("test.event", key="value", number=42)
        assert hasattr(logger, "debug")
