"""
Unit tests for the legacy paging adapter.
"""

import pytest

from exponential_pageset.modules.pageset import (
    ExponentialPageset,
    LegacyPage,
    LegacyPageAdapter,
    PagerState,
)


@pytest.mark.unit
def test_adapter_satisfies_protocol(pager_240):
    """Test the adapter implements the legacy method set."""
    adapter = LegacyPageAdapter(pager_240)

    assert isinstance(adapter, LegacyPage)
    assert not isinstance(pager_240, LegacyPage)


@pytest.mark.unit
def test_adapter_reads_through(state_50):
    """Test accessor methods delegate to the pager."""
    adapter = LegacyPageAdapter(state_50)

    assert adapter.total_entries() == 50
    assert adapter.entries_per_page() == 10
    assert adapter.current_page() == 1
    assert adapter.first_page() == 1
    assert adapter.last_page() == 5
    assert adapter.first() == 1
    assert adapter.last() == 10
    assert adapter.entries_on_this_page() == 10
    assert adapter.previous_page() is None
    assert adapter.next_page() == 2
    assert adapter.skipped() == 0


@pytest.mark.unit
def test_adapter_writes_through(state_50):
    """Test accessor methods with a value update the pager."""
    adapter = LegacyPageAdapter(state_50)

    assert adapter.current_page(99) == 5
    assert state_50.current_page == 5

    assert adapter.total_entries(500) == 500
    assert adapter.last_page() == 50


@pytest.mark.unit
def test_adapter_change_entries_per_page():
    """Test page size changes rebase through the adapter."""
    adapter = LegacyPageAdapter(
        PagerState(total_entries=1000, entries_per_page=10, current_page=3)
    )

    assert adapter.change_entries_per_page(5) == 5
    assert adapter.entries_per_page() == 5
    assert adapter.entries_per_page(20) == 20
    assert adapter.current_page() == 2


@pytest.mark.unit
def test_adapter_splice():
    """Test splicing items through the adapter."""
    adapter = LegacyPageAdapter(
        ExponentialPageset(total_entries=26, entries_per_page=5, current_page=6)
    )

    assert adapter.splice(list("abcdefghijklmnopqrstuvwxyz")) == ["z"]
