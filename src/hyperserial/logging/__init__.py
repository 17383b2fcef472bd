"""Logging infrastructure for hyperserial.

This module provides structured logging with JSON output and definition
context tracking.
"""

from hyperserial.logging.filters import ContextFilter
from hyperserial.logging.logger import StructuredJsonFormatter, get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "StructuredJsonFormatter",
    "ContextFilter",
]
