"""
DNS Cache Logging Module

Structured logging setup built on structlog.
"""

from .logger import StructuredLogger, get_logger, log_exception, setup_logging

__all__ = [
    "StructuredLogger",
    "setup_logging",
    "get_logger",
    "log_exception",
]
