"""Observability: structured logging for confpath.

confpath logs through structlog on top of standard library loggers named
"confpath.*". Nothing is printed unless the application attaches a handler
or calls setup_logging (or confpath.config.configure_logging).
"""

from confpath.observability.logging import get_logger, reset_logging, setup_logging

__all__ = ["get_logger", "reset_logging", "setup_logging"]
