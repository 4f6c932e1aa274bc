"""Structured logging for the application using structlog.

structlog is bound to the standard library ``logging`` module at import time,
so loggers obtained before ``setup_logging`` runs are routed through the same
handlers once they are installed. Rendering happens in the handlers'
``ProcessorFormatter``, which is what ``setup_logging`` swaps.
"""
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

import structlog

from creational_patterns.config.schemas.logging_schema import LoggingConfig

APP_LOGGER_NAME = "creational_patterns"


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _build_formatter(config: LoggingConfig) -> logging.Formatter:
    if config.json_output:
        return structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.add_logger_name,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
        )

    # Level, logger name and time come from the standard library format string
    return structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        fmt=config.format,
    )


def _build_handlers(config: LoggingConfig) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []

    if config.destination in ("file", "both"):
        log_dir = os.path.dirname(config.file.path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                config.file.path,
                maxBytes=config.file.max_size_mb * 1024 * 1024,
                backupCount=config.file.backup_count,
            )
        )

    if config.destination in ("console", "both"):
        # stderr keeps stdout free for the demo output
        handlers.append(logging.StreamHandler(sys.stderr))

    return handlers


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application.

    Args:
        config: Logging configuration. Defaults are used when None.

    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        config = LoggingConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level))

    formatter = _build_formatter(config)
    handlers = _build_handlers(config)

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    logger = structlog.get_logger(config.logger_name or APP_LOGGER_NAME)
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=config.destination,
        json_output=config.json_output,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to the standard library logger ``name``."""
    return structlog.get_logger(name)


_configure_structlog()
