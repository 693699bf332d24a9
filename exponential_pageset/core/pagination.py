"""
Shared pagination arithmetic used by the pager models.
"""

import math
from decimal import Decimal
from numbers import Real
from typing import Any

from .exceptions import InvalidArgumentError


def validate_total_entries(value: Any) -> int:
    """
    Validate a total entry count.

    Raises:
        InvalidArgumentError: If the value is not an integer >= 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            "must be an integer", field="total_entries", value=value
        )
    if value < 0:
        raise InvalidArgumentError("must be >= 0", field="total_entries", value=value)
    return value


def validate_entries_per_page(value: Any) -> int:
    """
    Validate a page size.

    Raises:
        InvalidArgumentError: If the value is not an integer > 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            "must be an integer", field="entries_per_page", value=value
        )
    if value <= 0:
        raise InvalidArgumentError(
            "must be > 0", field="entries_per_page", value=value
        )
    return value


def coerce_page_number(value: Any) -> int | None:
    """
    Floor a requested page number to an integer.

    Returns None when the value is missing or cannot be read as a finite
    number; callers treat that as page 0.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if not isinstance(value, (Real, Decimal)):
        return None
    if not math.isfinite(value):
        return None
    return math.floor(value)


def calculate_last_page(total_entries: int, entries_per_page: int, first_page: int) -> int:
    """
    Calculate the last page number.

    An empty result set has a single page, the first one.
    """
    if not total_entries:
        return first_page
    return (total_entries + entries_per_page - 1) // entries_per_page


def clamp_page(page: int, first_page: int, last_page: int) -> int:
    """Clamp page number to valid bounds."""
    if page < first_page:
        return first_page
    if page > last_page:
        return last_page
    return page


def calculate_offset(page: int, page_size: int) -> int:
    """
    Calculate the zero-based offset of the first entry on a page.

    Args:
        page: Page number (1-based)
        page_size: Number of items per page

    Returns:
        Offset (0-based)
    """
    return (page - 1) * page_size
