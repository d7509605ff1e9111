"""Structured logging for the catalogue, built on structlog over stdlib logging."""
import logging
import os
import sys
import threading
from logging.handlers import RotatingFileHandler
from typing import List, Optional

import structlog

from src.config.manager import get_config_manager
from src.config.schemas.logging_schema import LoggingConfig
from src.domain.core.exceptions import ConfigurationError

_installed_handlers: List[logging.Handler] = []
_setup_lock = threading.Lock()


class _ConsoleHandler(logging.StreamHandler):
    """Stream handler that looks up sys.stdout/sys.stderr on every record."""

    def __init__(self, stream_name: str = "stderr"):
        super().__init__(getattr(sys, stream_name))
        self._stream_name = stream_name

    def emit(self, record: logging.LogRecord) -> None:
        self.stream = getattr(sys, self._stream_name)
        super().emit(record)


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Logging configuration. If None, the logging section of the
            process-wide configuration manager is used.

    Returns:
        Configured structlog logger instance.
    """
    fallback_reason = None
    if config is None:
        try:
            config = get_config_manager().get_typed(LoggingConfig)
        except ConfigurationError as e:
            config = LoggingConfig()
            fallback_reason = str(e)

    with _setup_lock:
        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, config.level.upper()))

        formatter = logging.Formatter(config.format)
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
            handlers.append(file_handler)

        if config.destination in ("stderr", "both"):
            handlers.append(_ConsoleHandler("stderr"))
        elif config.destination == "stdout":
            handlers.append(_ConsoleHandler("stdout"))

        # Replace only handlers installed by a previous call
        for handler in _installed_handlers:
            root_logger.removeHandler(handler)
            handler.close()
        _installed_handlers.clear()

        for handler in handlers:
            handler.setFormatter(formatter)
            root_logger.addHandler(handler)
            _installed_handlers.append(handler)

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True),
            ],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

    logger = structlog.get_logger("patterns")
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=config.destination,
    )
    if fallback_reason is not None:
        logger.warning("Invalid logging configuration, using defaults", error=fallback_reason)
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a named logger, applying default configuration on first use."""
    if not structlog.is_configured():
        setup_logging()
    return structlog.get_logger(name)
