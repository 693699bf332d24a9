"""Exponential page set module."""

from .compat import LegacyPage, LegacyPageAdapter
from .models import ExponentialPageset, PagerState
from .schemas import PagesetConfig, PagesetSnapshot
from .series import SeriesConfig, calculate_pages_per_set, generate_series
from .services import build_pager, parse_pager_args, snapshot
from .window import next_set_anchor, pages_in_window, previous_set_anchor

__all__ = [
    "ExponentialPageset",
    "LegacyPage",
    "LegacyPageAdapter",
    "PagerState",
    "PagesetConfig",
    "PagesetSnapshot",
    "SeriesConfig",
    "build_pager",
    "calculate_pages_per_set",
    "generate_series",
    "next_set_anchor",
    "pages_in_window",
    "parse_pager_args",
    "previous_set_anchor",
    "snapshot",
]
