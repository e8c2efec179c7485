"""Structured logging configuration for httpcontract.

This module configures structlog on top of the standard library logging
module, with a colored console renderer for development and a JSON
renderer for production.

Environment Variables:
    HTTPCONTRACT_LOG_FORMAT: "json" for JSON output, "console" for colored output
    HTTPCONTRACT_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR)
    HTTPCONTRACT_SERVICE_NAME: Service name bound into every log event

Example:
    >>> from httpcontract.observability.logging import configure_logging, get_logger
    >>> configure_logging(log_format="json", log_level="INFO")
    >>> logger = get_logger("httpcontract.http.factory")
    >>> logger.info("httpcontract.factory.resolved", factory="HttpxRequestFactory")
"""

import logging
import os
import sys
from typing import Any

import structlog
from structlog.typing import Processor

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "console"
DEFAULT_SERVICE_NAME = "httpcontract"

ENV_LOG_FORMAT = "HTTPCONTRACT_LOG_FORMAT"
ENV_LOG_LEVEL = "HTTPCONTRACT_LOG_LEVEL"
ENV_SERVICE_NAME = "HTTPCONTRACT_SERVICE_NAME"

_logging_configured = False


def _get_log_level() -> str:
    return os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()


def _get_log_format() -> str:
    return os.environ.get(ENV_LOG_FORMAT, DEFAULT_LOG_FORMAT).lower()


def _get_service_name() -> str:
    return os.environ.get(ENV_SERVICE_NAME, DEFAULT_SERVICE_NAME)


def _get_shared_processors() -> list[Processor]:
    """Get shared processors for all log formats."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _get_renderer(log_format: str) -> Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=True,
        exception_formatter=structlog.dev.plain_traceback,
    )


def configure_logging(
    log_format: str | None = None,
    log_level: str | None = None,
    service_name: str | None = None,
    force: bool = False,
) -> None:
    """Configure structured logging for the process.

    Args:
        log_format: "json" or "console". Defaults to env var or "console"
        log_level: Minimum log level. Defaults to env var or "INFO"
        service_name: Service name for log context. Defaults to env var or "httpcontract"
        force: If True, reconfigure even if already configured
    """
    global _logging_configured

    if _logging_configured and not force:
        return

    log_format = log_format or _get_log_format()
    log_level = (log_level or _get_log_level()).upper()
    service_name = service_name or _get_service_name()

    shared_processors = _get_shared_processors()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(log_format),
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level, logging.INFO))

    structlog.contextvars.bind_contextvars(service=service_name)

    _logging_configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger, configuring logging with defaults on first use.

    Args:
        name: Logger name (typically __name__ of the module)
    """
    if not _logging_configured:
        configure_logging()

    return structlog.stdlib.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables included in all subsequent logs of this context.

    Example:
        >>> bind_context(request_id="req_123")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()
