"""
Pytest configuration and fixtures for the exponential pageset tests.
"""

import pytest

from exponential_pageset.config import get_settings
from exponential_pageset.core.logging import shutdown_logging
from exponential_pageset.modules.pageset import ExponentialPageset, PagerState


# Isolate every test from a developer's CONFIG file and cached settings
@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Clear the settings cache and any CONFIG override."""
    monkeypatch.delenv("CONFIG", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def reset_logging():
    """Detach handlers installed by setup_logging."""
    shutdown_logging()
    yield
    shutdown_logging()


@pytest.fixture
def empty_pager() -> ExponentialPageset:
    """Provide a pager with no entries."""
    return ExponentialPageset()


@pytest.fixture
def pager_240() -> ExponentialPageset:
    """Provide a pager with 1200 entries at 5 per page (240 pages)."""
    return ExponentialPageset(total_entries=1200, entries_per_page=5)


@pytest.fixture
def large_pager() -> ExponentialPageset:
    """Provide a pager with 10000 pages."""
    return ExponentialPageset(total_entries=100_000, entries_per_page=10)


@pytest.fixture
def state_50() -> PagerState:
    """Provide a plain pager state with 50 entries at 10 per page."""
    return PagerState(total_entries=50, entries_per_page=10)
