"""
Logger Implementation
=====================

Configures structlog for structured logging with:
- JSON output in production
- Colored console output in development
- Secret censoring for key material
- Request context binding

Version: 0.1.0
"""

import datetime
import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import EventDict, Processor


if TYPE_CHECKING:
    from structlog.stdlib import BoundLogger


SENSITIVE_KEYS = frozenset({
    "password",
    "secret",
    "token",
    "authorization",
    "private_key",
    "secret_scalar",
    "key_pair",
})

REDACTED = "***REDACTED***"


def _service_context(service_name: str, version: str) -> Processor:
    """Build a processor adding service-level context to all log entries."""

    def add_service_context(
        logger: logging.Logger,
        method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        event_dict.setdefault("service", service_name)
        event_dict.setdefault("version", version)
        return event_dict

    return add_service_context


def _add_timestamp(
    logger: logging.Logger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Add ISO timestamp to log entries."""
    event_dict["timestamp"] = datetime.datetime.now(datetime.UTC).isoformat()
    return event_dict


def censor_secrets(
    logger: logging.Logger | None,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Censor sensitive data in logs."""

    def censor(value: Any) -> Any:
        if isinstance(value, dict):
            return {
                key: REDACTED if _is_sensitive(key) else censor(item)
                for key, item in value.items()
            }
        if isinstance(value, (list, tuple)):
            return type(value)(censor(item) for item in value)
        return value

    return censor(event_dict)


def _is_sensitive(key: Any) -> bool:
    key_lower = str(key).lower()
    return any(s in key_lower for s in SENSITIVE_KEYS)


def setup_logging(
    log_level: str = "INFO",
    json_logs: bool = False,
    service_name: str = "badge-registrar",
) -> None:
    """
    Configure structlog for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Whether to output JSON format (True for production)
        service_name: Name of the service for context
    """
    from badge_registrar import __version__

    # Configure standard library logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )

    # starknet-py talks to the node through aiohttp
    for noisy_logger in ["aiohttp", "asyncio", "urllib3"]:
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)

    # Build processor chain
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        _add_timestamp,
        _service_context(service_name, __version__),
        censor_secrets,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        # Production: JSON output
        shared_processors.append(structlog.processors.format_exc_info)
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        # Development: Colored console output, locals hidden so key material
        # never ends up in a rendered traceback
        shared_processors.append(structlog.dev.set_exc_info)
        renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.RichTracebackFormatter(
                show_locals=False,
                max_frames=10,
            ),
        )

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Configure stdlib formatter
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    # Apply to root logger
    root_handler = logging.StreamHandler(sys.stdout)
    root_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(root_handler)


def get_logger(name: str | None = None) -> "BoundLogger":
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        BoundLogger: Structured logger with context binding support

    Example:
        logger = get_logger(__name__)
        logger.info("transaction_submitted", tx_hash="0xabc")
    """
    return structlog.stdlib.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """
    Bind context variables to all subsequent logs in this async context.

    Args:
        **kwargs: Key-value pairs to add to log context

    Example:
        bind_context(github_user_id=42)
        logger.info("event")  # Will include github_user_id
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()
