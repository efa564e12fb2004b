"""
Structured Logging Framework

This module provides the logging infrastructure using structlog on top of the
standard logging module: a human-readable console stream and an optional
rotating JSON log file.
"""

import logging
import logging.handlers
import sys
import traceback
from pathlib import Path
from typing import Optional

import structlog

from ..config.schema import LoggingConfig

_SHARED_PROCESSORS = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
]


class StructuredLogger:
    """Structured logger using structlog with console and JSON file output."""

    def __init__(self, config: LoggingConfig, stream=None):
        """Initialize structured logger.

        Args:
            config: Logging configuration
            stream: Console stream (stderr by default, stdout carries the menu)
        """
        self.config = config
        self.stream = stream
        self._configured = False
        self.logger = None
        self.file_handler: Optional[logging.Handler] = None

    def _get_console_renderer(self):
        if self.config.format == "simple":
            return structlog.processors.KeyValueRenderer(
                key_order=["timestamp", "level", "event"]
            )
        return structlog.dev.ConsoleRenderer(colors=False)

    def configure(self) -> None:
        """Configure structlog and the standard library handlers."""
        if self._configured:
            return

        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            handler.close()
        root_logger.handlers.clear()

        log_level = getattr(logging, self.config.level.upper())
        root_logger.setLevel(log_level)

        console_handler = logging.StreamHandler(self.stream or sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=self._get_console_renderer(),
                foreign_pre_chain=_SHARED_PROCESSORS,
            )
        )
        root_logger.addHandler(console_handler)

        if self.config.file:
            self._setup_file_logging(root_logger, log_level)

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                *_SHARED_PROCESSORS,
                structlog.processors.format_exc_info,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=False,
        )

        self._configured = True
        self.logger = structlog.get_logger("dns_cache_table")

    def _setup_file_logging(self, root_logger: logging.Logger, log_level: int) -> None:
        """Attach a rotating file handler writing one JSON object per line."""
        log_path = Path(self.config.file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            filename=self.config.file,
            maxBytes=self.config.max_size_mb * 1024 * 1024,
            backupCount=self.config.backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=structlog.processors.JSONRenderer(),
                foreign_pre_chain=_SHARED_PROCESSORS,
            )
        )
        root_logger.addHandler(file_handler)
        self.file_handler = file_handler

    def get_logger(self, name: str = "dns_cache_table") -> structlog.stdlib.BoundLogger:
        """Get a structured logger instance."""
        if not self._configured:
            self.configure()

        return structlog.get_logger(name)


# Global logger instance
_logger_instance: Optional[StructuredLogger] = None


def setup_logging(config: LoggingConfig, stream=None) -> StructuredLogger:
    """Setup global logging configuration.

    Args:
        config: Logging configuration
        stream: Console stream override
    """
    global _logger_instance
    _logger_instance = StructuredLogger(config, stream)
    _logger_instance.configure()
    return _logger_instance


def get_logger(name: str = "dns_cache_table") -> structlog.stdlib.BoundLogger:
    """Get a logger instance.

    Raises:
        RuntimeError: If logging hasn't been configured
    """
    if _logger_instance is None:
        raise RuntimeError("Logging not configured. Call setup_logging() first.")

    return _logger_instance.get_logger(name)


def log_exception(logger, message: str, exc: Optional[BaseException] = None) -> None:
    """Log an exception with its type, message and traceback.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance (optional, will use current exception if None)
    """
    if exc is None:
        exc = sys.exc_info()[1]

    if exc is None:
        logger.error(message)
        return

    logger.error(
        message,
        exception_type=type(exc).__name__,
        exception_message=str(exc),
        traceback="".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        ),
    )
