"""
Custom exception classes for consistent error handling across the library.
"""

from typing import Any

from pydantic import ValidationError as PydanticValidationError


class PagesetException(Exception):
    """Base exception for all pageset related errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(PagesetException):
    """Raised when data validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
        details: dict[str, Any] | None = None,
    ):
        if field:
            full_message = f"Validation error for field '{field}': {message}"
        else:
            full_message = message
        super().__init__(full_message, details)
        self.field = field
        self.value = value


class InvalidArgumentError(ValidationError):
    """Raised when a pager attribute receives a value outside its contract."""

    pass


class ConfigurationError(PagesetException):
    """Raised when pager construction arguments cannot be interpreted."""

    pass


def from_pydantic_error(exc: PydanticValidationError) -> PagesetException:
    """Translate the first pydantic validation error into a library exception."""
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"]) or None
    if error["type"] == "extra_forbidden":
        return ConfigurationError(
            f"Unknown pager argument '{field}'", details={"field": field}
        )
    return InvalidArgumentError(error["msg"], field=field, value=error.get("input"))
