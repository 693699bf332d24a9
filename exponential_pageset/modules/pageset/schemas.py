"""Pageset schemas for construction and serialization."""

from pydantic import BaseModel, ConfigDict, Field


class PagesetConfig(BaseModel):
    """Validated construction arguments for a pager."""

    model_config = ConfigDict(extra="forbid")

    total_entries: int = Field(default=0, ge=0)
    entries_per_page: int = Field(default=10, gt=0)
    first_page: int = 1
    current_page: int | float | str | None = None
    exponent_base: int = Field(default=10, gt=0)
    exponent_max: int = Field(default=3, ge=0)
    pages_per_exponent: int = Field(default=3, gt=0)


class PagesetSnapshot(BaseModel):
    """Serializable view of a pager's position and navigation targets."""

    model_config = ConfigDict(from_attributes=True)

    total_entries: int
    entries_per_page: int
    current_page: int
    first_page: int
    last_page: int
    first_entry_index: int = Field(description="1-based index, 0 when empty")
    last_entry_index: int = Field(description="1-based index, 0 when empty")
    entries_on_this_page: int
    skipped: int
    previous_page: int | None = None
    next_page: int | None = None
    previous_set: int | None = None
    next_set: int | None = None
    pages_per_set: int
    pages_in_set: list[int] = Field(default_factory=list)
