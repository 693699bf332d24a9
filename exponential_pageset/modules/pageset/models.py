"""Pager state and the exponential page set built on top of it."""

from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ...core.exceptions import InvalidArgumentError, from_pydantic_error
from ...core.logging import get_logger
from ...core.pagination import (
    calculate_last_page,
    calculate_offset,
    clamp_page,
    coerce_page_number,
    validate_entries_per_page,
    validate_total_entries,
)
from .series import SeriesConfig
from .window import next_set_anchor, pages_in_window, previous_set_anchor

logger = get_logger(__name__)


class PagerState:
    """
    Page numbering for a result set.

    The current page is stored as requested (floored) and clamped to
    ``[first_page, last_page]`` whenever it is read, so changing the total
    entry count never leaves the pager on a page that does not exist.
    """

    def __init__(
        self,
        total_entries: int = 0,
        entries_per_page: int = 10,
        first_page: int = 1,
        current_page: Any = None,
    ):
        if isinstance(first_page, bool) or not isinstance(first_page, int):
            raise InvalidArgumentError(
                "must be an integer", field="first_page", value=first_page
            )
        self._first_page = first_page
        self._total_entries = validate_total_entries(total_entries)
        self._entries_per_page = validate_entries_per_page(entries_per_page)
        self._current_page = first_page
        if current_page is not None:
            self._store_current_page(current_page)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(total_entries={self.total_entries}, "
            f"entries_per_page={self.entries_per_page}, "
            f"current_page={self.current_page})"
        )

    @property
    def first_page(self) -> int:
        return self._first_page

    @property
    def total_entries(self) -> int:
        return self._total_entries

    @total_entries.setter
    def total_entries(self, value: int) -> None:
        self._total_entries = validate_total_entries(value)

    @property
    def entries_per_page(self) -> int:
        return self._entries_per_page

    @entries_per_page.setter
    def entries_per_page(self, value: int) -> None:
        value = validate_entries_per_page(value)

        # Keep the old first entry on (or near) the new current page.
        first = self.first_entry_index
        self._entries_per_page = value
        page = self.set_current_page(self.first_page + first / value)

        logger.debug(
            "Rebased current page after page size change",
            extra={"first_entry": first, "entries_per_page": value, "page": page},
        )

    @property
    def current_page(self) -> int:
        return clamp_page(self._current_page, self.first_page, self.last_page)

    @current_page.setter
    def current_page(self, value: Any) -> None:
        self.set_current_page(value)

    def set_current_page(self, value: Any) -> int:
        """
        Set the current page and return the page actually in effect.

        Values outside the page range are clamped rather than rejected, so
        the return value may differ from the one requested.
        """
        self._store_current_page(value)
        page = self.current_page
        if page != self._current_page:
            logger.debug(
                "Clamped current page",
                extra={"requested": self._current_page, "page": page},
            )
        return page

    def _store_current_page(self, value: Any) -> None:
        page = coerce_page_number(value)
        if page is None:
            if value is not None:
                logger.warning(
                    "Non-numeric page treated as 0", extra={"value": repr(value)}
                )
            page = 0
        self._current_page = page

    @property
    def last_page(self) -> int:
        return calculate_last_page(
            self.total_entries, self.entries_per_page, self.first_page
        )

    @property
    def first_entry_index(self) -> int:
        """1-based index of the first entry on the current page, 0 if empty."""
        if not self.total_entries:
            return 0
        return calculate_offset(self.current_page, self.entries_per_page) + 1

    @property
    def last_entry_index(self) -> int:
        """1-based index of the last entry on the current page."""
        page = self.current_page
        if page == self.last_page:
            return self.total_entries
        return page * self.entries_per_page

    @property
    def entries_on_this_page(self) -> int:
        if not self.total_entries:
            return 0
        return self.last_entry_index - self.first_entry_index + 1

    @property
    def previous_page(self) -> int | None:
        page = self.current_page
        return page - 1 if page > self.first_page else None

    @property
    def next_page(self) -> int | None:
        page = self.current_page
        return page + 1 if page < self.last_page else None

    @property
    def skipped(self) -> int:
        """Number of entries before the current page."""
        if not self.total_entries:
            return 0
        return self.first_entry_index - 1

    def change_entries_per_page(self, value: int) -> int:
        """Change the page size and return the rebased current page."""
        self.entries_per_page = value
        return self.current_page

    def splice(self, items: Sequence[Any]) -> list[Any]:
        """Return the entries of ``items`` that fall on the current page."""
        last = min(self.last_entry_index, len(items))
        if last <= 0:
            return []
        return list(items[self.first_entry_index - 1 : last])


class ExponentialPageset(PagerState):
    """
    Pager for result sets that span hundreds or thousands of pages.

    ``pages_in_set`` offers a sparse list of pages around the current one,
    spaced at exponentially increasing intervals. With the defaults and the
    first page current it is ``[1, 2, 3, 10, 20, 30, 100, 200, 300, 1000,
    2000, 3000]``, limited to pages that exist.
    """

    def __init__(
        self,
        total_entries: int = 0,
        entries_per_page: int = 10,
        first_page: int = 1,
        current_page: Any = None,
        exponent_base: int = 10,
        exponent_max: int = 3,
        pages_per_exponent: int = 3,
    ):
        try:
            self._series_config = SeriesConfig(
                exponent_base=exponent_base,
                exponent_max=exponent_max,
                pages_per_exponent=pages_per_exponent,
            )
        except PydanticValidationError as e:
            raise from_pydantic_error(e) from e
        super().__init__(
            total_entries=total_entries,
            entries_per_page=entries_per_page,
            first_page=first_page,
            current_page=current_page,
        )

    @property
    def series_config(self) -> SeriesConfig:
        return self._series_config

    @property
    def exponent_base(self) -> int:
        return self._series_config.exponent_base

    @property
    def exponent_max(self) -> int:
        return self._series_config.exponent_max

    @property
    def pages_per_exponent(self) -> int:
        return self._series_config.pages_per_exponent

    @property
    def pages_per_set(self) -> int:
        """Maximum number of pages in ``pages_in_set``."""
        return self._series_config.pages_per_set

    # Deprecated name for pages_per_set.
    max_pages_per_set = pages_per_set

    @property
    def series(self) -> tuple[int, ...]:
        return self._series_config.series

    @property
    def pages_in_set(self) -> list[int]:
        return pages_in_window(
            self.series, self.current_page, self.first_page, self.last_page
        )

    @property
    def previous_set(self) -> int | None:
        """First page of the previous set, using the first exponent tier."""
        return previous_set_anchor(
            self.current_page, self.pages_per_exponent, self.first_page
        )

    @property
    def next_set(self) -> int | None:
        """First page of the next set, using the first exponent tier."""
        return next_set_anchor(
            self.current_page, self.pages_per_exponent, self.last_page
        )
