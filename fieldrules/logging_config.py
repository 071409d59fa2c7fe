"""structlog setup shared by the library and its example services.

Library modules log through get_logger(), which binds structlog to a stdlib
logger under the "fieldrules" namespace. That namespace carries a
NullHandler, so nothing is written until the host application configures
logging, either its own way or by calling configure_logging().
"""

import logging
import sys
from typing import Optional

import structlog

from fieldrules.config import Settings, get_settings

LOGGER_NAME = "fieldrules"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str):
    """structlog logger writing to the stdlib logger `name`."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structured logging from settings.

    DEBUG selects the console renderer, otherwise logs are rendered as JSON.
    LOG_LEVEL sets the minimum level of the "fieldrules" logger, which gets
    a stdout handler of its own.
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: '{settings.LOG_LEVEL}'")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.propagate = False

    # Clear existing handlers
    package_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(console_handler)
