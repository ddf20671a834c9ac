"""Shared pytest fixtures for cooking-menu tests."""

from __future__ import annotations

from decimal import Decimal

import pytest

from cooking_menu.models import MenuItem
from cooking_menu.store import MenuStore


def _build_item(item_id: str, name: str, course: str, price: str, description: str = "") -> MenuItem:
    return MenuItem(item_id=item_id, name=name, description=description, course=course, price=Decimal(price))


@pytest.fixture
def make_item():
    """Factory for menu items with a string price."""
    return _build_item


@pytest.fixture
def empty_store() -> MenuStore:
    """A store with no dishes."""
    return MenuStore()


@pytest.fixture
def sample_store() -> MenuStore:
    """A small mixed menu with no desserts."""
    store = MenuStore()
    store = store.add(_build_item("a", "Soup", "Starters", "25.00", "Tomato and basil"))
    store = store.add(_build_item("b", "Steak", "Mains", "180.00", "Sirloin with chips"))
    store = store.add(_build_item("c", "Salad", "Starters", "35.00"))
    return store


@pytest.fixture
def debug_log_path(tmp_path) -> str:
    """Debug log location kept inside the test's temp dir."""
    return str(tmp_path / "debug.log")
