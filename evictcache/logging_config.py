"""Structured logging setup."""

import logging
from typing import Optional

import structlog

from evictcache.config import settings


def configure_logging(log_level: Optional[str] = None) -> None:
    """
    Configure structlog to emit JSON lines through the standard library.
    
    Args:
        log_level: Logging level name; defaults to the configured log level
    """
    level = (log_level or settings.log_level).upper()
    logging.basicConfig(format="%(message)s", level=level)
    logging.getLogger().setLevel(level)
    
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
