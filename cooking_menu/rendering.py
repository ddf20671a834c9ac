"""Rendering helpers for menu rows and course statistics."""

from __future__ import annotations

from decimal import Decimal

from rich import box
from rich.table import Table
from rich.text import Text

from cooking_menu.config import CURRENCY_SYMBOL
from cooking_menu.constant import COURSE_BADGE_STYLES, FALLBACK_BADGE_STYLE
from cooking_menu.models import CourseAverage, MenuItem
from cooking_menu.query import round_cents


def badge_style(course: str) -> str:
    """Return a consistent badge style for course tags."""
    return COURSE_BADGE_STYLES.get(course, FALLBACK_BADGE_STYLE)


def format_price(price: Decimal) -> str:
    """Format a price with the currency symbol, rounded half-up to cents."""
    return f"{CURRENCY_SYMBOL}{round_cents(price)}"


def format_item_label(item: MenuItem, show_course: bool = True) -> Text:
    """Render a menu row as an optional course badge, the name and the price."""
    text = Text()
    if show_course:
        text.append(f" {item.course} ", style=badge_style(item.course))
        text.append(" ")
    text.append(item.name, style="bold")
    text.append(f" - {format_price(item.price)}")
    return text


def format_item_description(item: MenuItem) -> Text:
    """Render the dimmed description line, empty when the dish has none."""
    return Text(item.description, style="dim")


def averages_table(averages: list[CourseAverage]) -> Table:
    """Build the average-price-by-course table."""
    table = Table(box=box.SIMPLE_HEAD, expand=True, header_style="bold #d4af37")
    table.add_column("Course", justify="center")
    table.add_column(f"Average Price ({CURRENCY_SYMBOL})", justify="center")
    for entry in averages:
        table.add_row(Text(entry.course, style=badge_style(entry.course)), str(entry.average))
    return table
