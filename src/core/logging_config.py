"""Structured logging configuration.

This module initializes structlog loggers with a stable JSON format.
The minimum level is taken from the runtime configuration.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

from core.config import TabularConfig
from core.constants import DEFAULT_LOG_LEVEL
from core.errors import TabularConfigError


def configure_logging(config: TabularConfig | None = None) -> None:
    """Configure structlog processors and level filtering.

    Loggers are not cached, so module loggers pick up a new level
    the next time they log.

    Args:
        config: Optional runtime configuration, read from env if omitted.
    """
    level_name = config.log_level if config is not None else _env_log_level()
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level_name)
        ),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    if not structlog.is_configured():
        configure_logging()
    return structlog.get_logger(name)


def _env_log_level() -> str:
    """Read the level from env, deferring invalid values to Dataset config."""
    try:
        return TabularConfig.from_env().log_level
    except TabularConfigError:
        return DEFAULT_LOG_LEVEL
