"""
Shared logging configuration for the CanCan authorization engine.

Loggers are routed through the standard library, so nothing is emitted
until the embedding application configures logging (either through
``configure_logging`` or its own handlers).
"""

import sys
import structlog
import logging
from typing import Optional

from .config import get_config


def configure_logging(service_name: str = "cancan", log_level: Optional[str] = None) -> None:
    """Configure structured logging for an embedding application.

    ``log_level`` defaults to ``EngineConfig.log_level`` (``CANCAN_LOG_LEVEL``).
    """
    if log_level is None:
        log_level = get_config().log_level
    level = getattr(logging, log_level.upper())

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

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )
    logging.getLogger(service_name).setLevel(level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger backed by the stdlib logger ``name``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger
    )
