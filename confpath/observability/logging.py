"""Structured logging configuration using structlog.

confpath loggers are structlog loggers wrapping standard library loggers
under the "confpath" hierarchy, so nothing is emitted until a handler is
attached, either by the host application or by setup_logging. Output is JSON
for production and console for development. Config file paths are logged;
resolved config values never are.
"""

import logging
import sys
from typing import Any, cast

import structlog

ROOT_LOGGER = "confpath"

LEVELS: dict[str, int] = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50,
}

# Applied per event before the stdlib handler's formatter renders it
PRE_CHAIN: list[Any] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
]


class _ConfpathHandler(logging.StreamHandler):
    """Stream handler installed by setup_logging; replaced on reconfiguration."""


def setup_logging(
    level: str = "INFO",
    format: str = "console",
) -> None:
    """Attach a stderr handler to the confpath loggers.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Output format - "json" for production, "console" for development
    """
    if format == "json":
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = _ConfpathHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root = logging.getLogger(ROOT_LOGGER)
    reset_logging()
    root.addHandler(handler)
    root.setLevel(LEVELS.get(level.upper(), 20))
    root.propagate = False


def reset_logging() -> None:
    """Remove the handler installed by setup_logging and restore propagation."""
    root = logging.getLogger(ROOT_LOGGER)
    for handler in list(root.handlers):
        if isinstance(handler, _ConfpathHandler):
            root.removeHandler(handler)
    root.setLevel(logging.NOTSET)
    root.propagate = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance bound to the given name.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        A bound structlog logger writing to the stdlib logger of that name
    """
    return cast(
        structlog.stdlib.BoundLogger,
        structlog.wrap_logger(
            logging.getLogger(name),
            processors=[
                structlog.stdlib.filter_by_level,
                *PRE_CHAIN,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
        ),
    )
