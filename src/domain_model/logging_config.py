"""structlog setup for applications embedding the domain model.

The library only emits events through ``structlog.get_logger()``; nothing is
configured on import. Call configure_logging() once at startup.
"""

import logging
from typing import Optional

import structlog

from .config import DomainModelConfig, LogFormat


def build_processors(config: DomainModelConfig) -> list:
    """Return the processor chain for the configured log format."""
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if config.log_format == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(config: Optional[DomainModelConfig] = None) -> DomainModelConfig:
    """
    Configure structlog from settings.

    Args:
        config: Settings to apply (default: loaded from the environment)

    Returns:
        The configuration that was applied
    """
    config = config or DomainModelConfig()
    structlog.configure(
        processors=build_processors(config),
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, config.log_level)
        ),
        cache_logger_on_first_use=False,
    )
    return config
