"""Structured logging built on structlog and the standard logging module."""
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Any, List, Optional

import structlog

from pattern_catalog.config.schemas.logging_schema import LoggingConfig

_structlog_configured = False

_SHARED_PROCESSORS: List[Any] = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def _configure_structlog() -> None:
    """Route structlog through the standard logging module."""
    global _structlog_configured
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    _structlog_configured = True


def _build_formatter(renderer: str) -> logging.Formatter:
    if renderer == "json":
        final = structlog.processors.JSONRenderer()
    else:
        final = structlog.dev.ConsoleRenderer(colors=False)
    return structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            final,
        ],
        foreign_pre_chain=_SHARED_PROCESSORS,
    )


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Logging configuration. Defaults are used when omitted.

    Returns:
        Configured structlog logger instance.
    """
    config = config or LoggingConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level.upper()))

    formatter = _build_formatter(config.renderer)
    handlers: List[logging.Handler] = []

    if config.destination in ("file", "both"):
        log_dir = os.path.dirname(config.file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if config.destination in ("stderr", "both"):
        # stdout is reserved for example output
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    if config.destination == "none":
        handlers.append(logging.NullHandler())

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)

    _configure_structlog()

    logger = structlog.get_logger("pattern_catalog")
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=config.destination,
        renderer=config.renderer,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to the given name."""
    if not _structlog_configured:
        _configure_structlog()
    return structlog.get_logger(name)
