"""
Structured logging setup.

JSON output by default (LOG_FORMAT=json), human-readable console output
for local runs. Call configure_logging() once at startup, then use
get_logger() wherever a logger is needed.
"""
import logging
import sys
from typing import Any

import structlog


def configure_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure stdlib logging and structlog with a shared level and renderer."""
    level_value = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level_value)
    
    renderer: Any
    if fmt.strip().lower() == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()
    
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str, **initial_values: Any) -> structlog.typing.FilteringBoundLogger:
    """Return a structlog logger bound to the given module name."""
    return structlog.get_logger(name, **initial_values)
