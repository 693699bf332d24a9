"""Page set windowing and coarse set navigation."""

from collections.abc import Sequence


def pages_in_window(
    series: Sequence[int], current_page: int, first_page: int, last_page: int
) -> list[int]:
    """
    Map offsets onto the current page and keep those within bounds.

    The result is ascending and free of repeats. Tiers overlap when
    ``exponent_base`` does not exceed ``pages_per_exponent``, so the series
    alone does not guarantee either.
    """
    pages = {
        current_page + offset
        for offset in series
        if first_page <= current_page + offset <= last_page
    }
    return sorted(pages)


def previous_set_anchor(
    current_page: int, pages_per_exponent: int, first_page: int
) -> int | None:
    """First page of the previous set for the first exponent tier."""
    page = current_page - (2 * pages_per_exponent) - 1
    return None if page < first_page else page


def next_set_anchor(
    current_page: int, pages_per_exponent: int, last_page: int
) -> int | None:
    """First page of the next set for the first exponent tier."""
    page = current_page + (2 * pages_per_exponent) - 1
    return None if page > last_page else page
