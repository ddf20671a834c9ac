"""Domain models for cooking-menu."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from uuid import uuid4


def new_item_id() -> str:
    """Return a fresh identifier for a menu item."""
    return uuid4().hex


@dataclass(frozen=True)
class MenuItem:
    """A dish on the menu."""

    item_id: str
    name: str
    description: str
    course: str
    price: Decimal


@dataclass(frozen=True)
class CourseAverage:
    """Average price of one course, rounded to cents."""

    course: str
    average: Decimal
