"""Filter-by-course modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from cooking_menu.constant import COURSES, DEFAULT_COURSE
from cooking_menu.models import MenuItem
from cooking_menu.query import filter_by_course
from cooking_menu.rendering import badge_style, format_item_description, format_item_label
from cooking_menu.store import MenuStore


class FilterModal(ModalScreen[None]):
    """Centered modal listing the dishes of one course."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("ctrl+c", "close", "Close"),
        ("left", "cycle_course(-1)", "Previous course"),
        ("right", "cycle_course(1)", "Next course"),
        ("tab", "cycle_course(1)", "Next course"),
    ]

    CSS = """
    FilterModal {
        align: center middle;
        background: $background 60%;
    }

    #filter-dialog {
        width: 64;
        height: auto;
        max-height: 80%;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #filter-title {
        text-style: bold;
        margin-bottom: 1;
        color: #d4af37;
    }

    #filter-course {
        margin-bottom: 1;
        color: white;
    }

    #filter-results {
        color: white;
    }

    #filter-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    selected_course = reactive(DEFAULT_COURSE)

    def __init__(self, store: MenuStore) -> None:
        super().__init__()
        self.store = store

    def compose(self) -> ComposeResult:
        with Container(id="filter-dialog"):
            yield Static("Filter Menu by Course", id="filter-title")
            yield Static(id="filter-course")
            yield Static(id="filter-results")
            yield Static("←/→/Tab change course, Esc/q/Ctrl+C close", id="filter-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def action_close(self) -> None:
        self.dismiss()

    def action_cycle_course(self, delta: int) -> None:
        idx = COURSES.index(self.selected_course) if self.selected_course in COURSES else 0
        self.selected_course = COURSES[(idx + delta) % len(COURSES)]
        self._refresh_content()

    def filtered_items(self) -> list[MenuItem]:
        return filter_by_course(self.store, self.selected_course)

    def _refresh_content(self) -> None:
        course_widget = self.query_one("#filter-course", Static)
        results_widget = self.query_one("#filter-results", Static)

        picker = Text()
        for idx, course in enumerate(COURSES):
            if idx > 0:
                picker.append("  ")
            if course == self.selected_course:
                picker.append(f" {course} ", style=badge_style(course))
            else:
                picker.append(f" {course} ", style="dim")
        course_widget.update(picker)

        items = self.filtered_items()
        if not items:
            results_widget.update(f"No {self.selected_course.lower()} on the menu")
            return

        lines = Text()
        for idx, item in enumerate(items):
            if idx > 0:
                lines.append("\n")
            lines.append_text(format_item_label(item, show_course=False))
            if item.description:
                lines.append("\n    ")
                lines.append_text(format_item_description(item))
        results_widget.update(lines)
