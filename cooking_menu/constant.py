"""Editable static menu and display configuration."""

from __future__ import annotations

APP_TITLE = "Christoffel's Cooking Menu"
APP_SUB_TITLE = "Starters / Mains / Desserts"

# Recognized courses, in display order.
COURSES: tuple[str, ...] = ("Starters", "Mains", "Desserts")
DEFAULT_COURSE = "Starters"

COURSE_BADGE_STYLES: dict[str, str] = {
    "Starters": "bold #0b1f0f on #5fbf72",
    "Mains": "bold #ffffff on #b23a48",
    "Desserts": "bold #ffffff on #2f6db5",
}
FALLBACK_BADGE_STYLE = "bold #121212 on #d4af37"
