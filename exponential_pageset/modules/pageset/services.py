"""Pageset construction and serialization services."""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ...config import get_settings
from ...core.exceptions import ConfigurationError, from_pydantic_error
from ...core.logging import get_logger
from .models import ExponentialPageset
from .schemas import PagesetConfig, PagesetSnapshot

logger = get_logger(__name__)

POSITIONAL_FIELDS = ("total_entries", "entries_per_page", "current_page")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _settings_defaults() -> dict[str, int]:
    settings = get_settings()
    return {
        "entries_per_page": settings.default_entries_per_page,
        "first_page": settings.default_first_page,
        "exponent_base": settings.default_exponent_base,
        "exponent_max": settings.default_exponent_max,
        "pages_per_exponent": settings.default_pages_per_exponent,
    }


def parse_pager_args(*args: Any, **kwargs: Any) -> PagesetConfig:
    """
    Normalize the supported construction shapes into a validated config.

    Accepted shapes:
        - a single mapping of argument names to values
        - one to three integers: total_entries, entries_per_page, current_page
        - keyword arguments

    Keyword arguments may be combined with either positional shape. Values
    that are not given fall back to the configured defaults.

    Raises:
        ConfigurationError: If the arguments match no supported shape
        InvalidArgumentError: If a value violates its contract
    """
    if len(args) == 1 and isinstance(args[0], Mapping):
        values = dict(args[0])
    elif 1 <= len(args) <= 3 and all(_is_int(arg) for arg in args):
        values = dict(zip(POSITIONAL_FIELDS, args))
    elif not args:
        values = {}
    else:
        raise ConfigurationError(
            "Expected a mapping, up to three integers, or keyword arguments",
            details={"args": list(args)},
        )

    duplicated = sorted(set(values) & set(kwargs))
    if duplicated:
        raise ConfigurationError(
            f"Arguments given more than once: {', '.join(duplicated)}",
            details={"fields": duplicated},
        )
    values.update(kwargs)

    merged = {**_settings_defaults(), **values}

    try:
        return PagesetConfig.model_validate(merged)
    except PydanticValidationError as e:
        raise from_pydantic_error(e) from e


def build_pager(*args: Any, **kwargs: Any) -> ExponentialPageset:
    """Create an exponential pager from any supported argument shape."""
    config = parse_pager_args(*args, **kwargs)
    pager = ExponentialPageset(**config.model_dump())

    logger.debug(
        "Built pager",
        extra={
            "total_entries": pager.total_entries,
            "entries_per_page": pager.entries_per_page,
            "current_page": pager.current_page,
        },
    )

    return pager


def snapshot(pager: ExponentialPageset) -> PagesetSnapshot:
    """Capture the pager's current position for serialization."""
    return PagesetSnapshot.model_validate(pager)
