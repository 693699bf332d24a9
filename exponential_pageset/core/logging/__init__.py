"""Logging infrastructure for the pageset library."""

from .logger_config import get_logger, setup_logging, shutdown_logging
from .structured_logger import StructuredFormatter, setup_structured_logging

__all__ = [
    "StructuredFormatter",
    "get_logger",
    "setup_logging",
    "setup_structured_logging",
    "shutdown_logging",
]
