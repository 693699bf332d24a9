"""Core infrastructure for the pageset library."""

from .exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    PagesetException,
    ValidationError,
    from_pydantic_error,
)
from .pagination import (
    calculate_last_page,
    calculate_offset,
    clamp_page,
    coerce_page_number,
    validate_entries_per_page,
    validate_total_entries,
)

__all__ = [
    "PagesetException",
    "ValidationError",
    "InvalidArgumentError",
    "ConfigurationError",
    "from_pydantic_error",
    "calculate_last_page",
    "calculate_offset",
    "clamp_page",
    "coerce_page_number",
    "validate_entries_per_page",
    "validate_total_entries",
]
