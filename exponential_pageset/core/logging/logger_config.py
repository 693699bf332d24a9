"""
Central logging configuration for the pageset library.
Provides setup functions and logger management.
"""

import logging

from ...config import get_settings
from .structured_logger import setup_structured_logging


class LoggingConfig:
    """Central logging configuration manager."""

    def __init__(self):
        self.logger: logging.Logger | None = None
        self._is_configured = False

    def setup(
        self,
        log_level: str = "INFO",
        use_json_format: bool = True,
    ) -> logging.Logger:
        """
        Set up logging configuration.

        Args:
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
            use_json_format: Whether to use JSON formatting

        Returns:
            Configured main logger instance
        """
        if self._is_configured:
            return get_logger()

        self.logger = setup_structured_logging(log_level, use_json_format)
        self._is_configured = True

        return self.logger

    def shutdown(self) -> None:
        """Detach handlers installed by setup."""
        if self.logger:
            for handler in list(self.logger.handlers):
                handler.flush()
                self.logger.removeHandler(handler)
            self.logger = None
        self._is_configured = False


# Global logging configuration instance
_logging_config = LoggingConfig()


def setup_logging(
    log_level: str | None = None,
    use_json_format: bool | None = None,
) -> logging.Logger:
    """
    Set up logging with settings support.

    Args:
        log_level: Logging level (settings: log_level / env: LOG_LEVEL)
        use_json_format: Whether to use JSON format (settings: log_format / env: LOG_FORMAT=json)

    Returns:
        Configured main logger instance
    """
    settings = get_settings()

    if log_level is None:
        log_level = settings.log_level.upper()

    if use_json_format is None:
        use_json_format = settings.log_format.lower() == "json"

    return _logging_config.setup(
        log_level=log_level,
        use_json_format=use_json_format,
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Optional logger name (will be prefixed with the package name)

    Returns:
        Logger instance
    """
    if name:
        if name.startswith("exponential_pageset"):
            return logging.getLogger(name)
        return logging.getLogger(f"exponential_pageset.{name}")
    return logging.getLogger("exponential_pageset")


def shutdown_logging() -> None:
    """Shutdown logging gracefully."""
    _logging_config.shutdown()
