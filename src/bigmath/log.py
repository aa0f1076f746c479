"""
Structured logging for bigmath.

The package only emits events; it never configures logging on import.
Loggers are structlog wrappers around stdlib loggers under the ``bigmath``
namespace, so an unconfigured process drops the debug events the way any
stdlib-logging library does. Applications that want to see them call
configure_logging() once at startup.
"""

import logging
import sys

import structlog

from bigmath.exceptions import InvalidInputError

PACKAGE_LOGGER = "bigmath"


def configure_logging(level: str = "INFO", json: bool = False) -> None:
    """
    Configure structlog and the ``bigmath`` stdlib logger.

    Events are rendered by structlog and written to stdout by a single
    handler on the package logger. Calling this again replaces that handler.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ...)
        json: Render events as JSON lines instead of console output

    Raises:
        InvalidInputError: If level is not a known logging level name
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise InvalidInputError(level, "Unknown logging level")

    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(numeric_level)
    package_logger.propagate = False


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Return a lazy structlog logger bound to the stdlib logger ``name``.

    Processors come from the current structlog configuration at call time;
    output goes through stdlib logging, which drops debug events until the
    package logger is configured.
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )
