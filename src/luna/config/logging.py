"""Logging configuration using structlog.

Luna modules log through `structlog.get_logger(__name__)` and never
configure logging on import. Applications call `configure_logging()` once
at startup, before the first Helius request:

    from luna.config.logging import configure_logging
    from luna.services.helius import get_helius_client

    configure_logging()
    client = await get_helius_client()
    await client.tx.poll_transaction_confirmation(signature)

Output is JSON unless DEBUG is set, filtered at LOG_LEVEL.
"""

import logging
import sys

import structlog

from luna.config.settings import get_settings

# httpx logs every request URL at INFO, and Helius URLs carry the API key
QUIET_LOGGERS = ("httpx", "httpcore")


def configure_logging() -> None:
    """Configure structlog and the stdlib root logger from settings."""
    settings = get_settings()

    log_level = getattr(logging, settings.log_level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer()
            if settings.debug
            else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance."""
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
