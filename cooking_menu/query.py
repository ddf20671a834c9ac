"""Read-only derivations over a menu store."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Sequence

from cooking_menu.constant import COURSES
from cooking_menu.models import CourseAverage, MenuItem
from cooking_menu.store import MenuStore

_CENTS = Decimal("0.01")


def round_cents(value: Decimal) -> Decimal:
    """Round half-up to two decimals, however many integer digits ``value`` has."""
    with localcontext() as ctx:
        # Integer digits, two decimals and one for a carry such as 9.995 -> 10.00.
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        return value.quantize(_CENTS, rounding=ROUND_HALF_UP)


def filter_by_course(store: MenuStore, course: str) -> list[MenuItem]:
    """Return the items of ``course`` in store order."""
    return [item for item in store if item.course == course]


def average_by_course(store: MenuStore, courses: Sequence[str] = COURSES) -> list[CourseAverage]:
    """
    Compute the average price of each course.

    One entry per course in ``courses``, in that order. A course with no items
    averages to 0.00 rather than being left out.
    """
    averages: list[CourseAverage] = []
    for course in courses:
        prices = [item.price for item in filter_by_course(store, course)]
        if not prices:
            averages.append(CourseAverage(course, Decimal("0.00")))
            continue
        with localcontext() as ctx:
            # Widen precision so the sum of large prices stays exact.
            ctx.prec += max(0, max(price.adjusted() for price in prices)) + len(str(len(prices)))
            mean = sum(prices, Decimal(0)) / len(prices)
        averages.append(CourseAverage(course, round_cents(mean)))
    return averages
