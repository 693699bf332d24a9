"""Exponentially spaced page offset series."""

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

from ...core.logging import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=128)
def generate_series(
    exponent_base: int, exponent_max: int, pages_per_exponent: int
) -> tuple[int, ...]:
    """
    Build the symmetric offset series for a pager configuration.

    Each exponent tier ``j`` contributes ``pages_per_exponent`` offsets spaced
    ``exponent_base ** j`` apart. The non-negative half starts at 0 and is
    mirrored to produce the negative half, so the result is symmetric about
    its middle element, 0. It is strictly increasing when
    ``exponent_base > pages_per_exponent``; otherwise adjacent tiers overlap.

    Args:
        exponent_base: Base of the geometric spacing (> 0)
        exponent_max: Highest exponent tier (>= 0)
        pages_per_exponent: Offsets per tier (> 0)

    Returns:
        Tuple of offsets relative to the current page
    """
    half: list[int] = []

    for exponent in range(exponent_max + 1):
        step = exponent_base**exponent
        offset = step
        for _ in range(pages_per_exponent):
            half.append(offset - 1)
            offset += step

    previous = [-value for value in reversed(half[1:])]

    logger.debug(
        "Generated page series",
        extra={
            "exponent_base": exponent_base,
            "exponent_max": exponent_max,
            "pages_per_exponent": pages_per_exponent,
            "length": len(previous) + len(half),
        },
    )

    return tuple(previous + half)


def calculate_pages_per_set(exponent_max: int, pages_per_exponent: int) -> int:
    """Maximum number of pages a page set can hold. Always odd."""
    tier_pages = pages_per_exponent * (exponent_max + 1)
    return (tier_pages - 1) * 2 + 1


class SeriesConfig(BaseModel):
    """Immutable inputs for the offset series."""

    model_config = ConfigDict(frozen=True)

    exponent_base: int = Field(default=10, gt=0, description="Base exponent")
    exponent_max: int = Field(default=3, ge=0, description="Maximum exponent")
    pages_per_exponent: int = Field(
        default=3, gt=0, description="Number of pages per exponent tier"
    )

    @property
    def pages_per_set(self) -> int:
        return calculate_pages_per_set(self.exponent_max, self.pages_per_exponent)

    @property
    def series(self) -> tuple[int, ...]:
        return generate_series(
            self.exponent_base, self.exponent_max, self.pages_per_exponent
        )

