"""
Adapter exposing a pager through the classic accessor-style paging interface.

Older rendering code expects every attribute to be a method, with read/write
attributes taking an optional new value. ``LegacyPageAdapter`` provides that
shape by delegating to a ``PagerState``.
"""

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from .models import PagerState


@runtime_checkable
class LegacyPage(Protocol):
    """Method set of the classic paging interface."""

    def total_entries(self, value: int | None = None) -> int: ...

    def entries_per_page(self, value: int | None = None) -> int: ...

    def current_page(self, value: Any = None) -> int: ...

    def entries_on_this_page(self) -> int: ...

    def first_page(self) -> int: ...

    def last_page(self) -> int: ...

    def first(self) -> int: ...

    def last(self) -> int: ...

    def previous_page(self) -> int | None: ...

    def next_page(self) -> int | None: ...

    def skipped(self) -> int: ...

    def splice(self, items: Sequence[Any]) -> list[Any]: ...

    def change_entries_per_page(self, value: int) -> int: ...


class LegacyPageAdapter:
    """Implements ``LegacyPage`` on top of a pager."""

    def __init__(self, pager: PagerState):
        self.pager = pager

    def total_entries(self, value: int | None = None) -> int:
        if value is not None:
            self.pager.total_entries = value
        return self.pager.total_entries

    def entries_per_page(self, value: int | None = None) -> int:
        if value is not None:
            self.pager.entries_per_page = value
        return self.pager.entries_per_page

    def current_page(self, value: Any = None) -> int:
        if value is not None:
            return self.pager.set_current_page(value)
        return self.pager.current_page

    def entries_on_this_page(self) -> int:
        return self.pager.entries_on_this_page

    def first_page(self) -> int:
        return self.pager.first_page

    def last_page(self) -> int:
        return self.pager.last_page

    def first(self) -> int:
        return self.pager.first_entry_index

    def last(self) -> int:
        return self.pager.last_entry_index

    def previous_page(self) -> int | None:
        return self.pager.previous_page

    def next_page(self) -> int | None:
        return self.pager.next_page

    def skipped(self) -> int:
        return self.pager.skipped

    def splice(self, items: Sequence[Any]) -> list[Any]:
        return self.pager.splice(items)

    def change_entries_per_page(self, value: int) -> int:
        return self.pager.change_entries_per_page(value)
