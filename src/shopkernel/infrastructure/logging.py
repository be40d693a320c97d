"""Logging configuration.

Domain and infrastructure modules log through ``structlog.get_logger``;
this module routes those events through stdlib logging to stderr so CLI
output on stdout stays clean.
"""

from __future__ import annotations

import logging
import os
import sys

import structlog

LOG_LEVEL_ENV = "SHOPKERNEL_LOG_LEVEL"
LOG_FORMAT_ENV = "SHOPKERNEL_LOG_FORMAT"

# marks the handler we install so reconfiguring replaces only ours
_HANDLER_MARK = "_shopkernel_handler"


def get_log_level(default: str = "WARNING") -> str:
    return os.getenv(LOG_LEVEL_ENV, default).upper()


def setup_stdlib_logging(level: str) -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for existing in list(root_logger.handlers):
        if getattr(existing, _HANDLER_MARK, False):
            root_logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    setattr(handler, _HANDLER_MARK, True)
    root_logger.addHandler(handler)


def setup_structlog(json_output: bool = False) -> None:
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(level: str | None = None) -> None:
    """Configure all logging for the application."""
    level = (level or get_log_level()).upper()
    setup_stdlib_logging(level)
    setup_structlog(json_output=os.getenv(LOG_FORMAT_ENV, "").lower() == "json")
