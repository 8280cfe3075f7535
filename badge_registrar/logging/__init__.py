"""
Logging Module
==============

Structured logging using structlog with JSON output for production
and colored console output for development.

Usage:
    from badge_registrar.logging import get_logger, setup_logging

    # Setup at application start
    setup_logging()

    # Get logger for a module
    logger = get_logger(__name__)

    # Log with context
    logger.info("transaction_submitted", tx_hash="0x1f", chain="TESTNET")
    logger.warning("transaction_status_query_failed", error=str(e))
"""

from badge_registrar.logging.logger import (
    bind_context,
    censor_secrets,
    clear_context,
    get_logger,
    setup_logging,
)


__all__ = [
    "get_logger",
    "setup_logging",
    "bind_context",
    "clear_context",
    "censor_secrets",
]
