"""Structured logging setup."""

import logging
import sys

import structlog

from .config import Settings, settings as default_settings

_handler = None


def configure_logging(settings: Settings = None) -> None:
    """
    Configure structlog and the stdlib root logger.

    Events are rendered as JSON lines unless ``settings.log_format`` is
    ``"console"``. Levels below ``settings.log_level`` are dropped.
    """
    settings = settings or default_settings
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    if settings.log_format.lower() == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    global _handler
    root = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(logging.Formatter("%(message)s"))
    if _handler not in root.handlers:
        root.addHandler(_handler)
    root.setLevel(level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
