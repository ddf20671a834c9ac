"""Main Textual app class."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Header, Static

from cooking_menu.add_item_modal import AddItemModal
from cooking_menu.config import resolve_debug_log_path
from cooking_menu.constant import APP_SUB_TITLE, APP_TITLE, COURSES
from cooking_menu.filter_modal import FilterModal
from cooking_menu.models import CourseAverage, MenuItem
from cooking_menu.query import average_by_course
from cooking_menu.rendering import averages_table, format_item_description, format_item_label
from cooking_menu.store import MenuStore


class MenuApp(App):
    """A Textual app for managing a restaurant's menu."""

    TITLE = APP_TITLE
    SUB_TITLE = APP_SUB_TITLE

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #menu-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #stats-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #summary {
        text-style: bold;
        margin-bottom: 1;
    }

    #averages {
        height: auto;
        margin-bottom: 1;
    }

    #menu-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #help-bar {
        color: $text-muted;
    }

    .pane-title {
        text-style: bold;
        color: #d4af37;
        margin-bottom: 1;
    }
    """

    menu_store = reactive(MenuStore)
    selected_index = reactive(None)

    BINDINGS = [
        ("up", "move_selection(-1)", "Previous dish"),
        ("down", "move_selection(1)", "Next dish"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, debug_log_path: str | None = None) -> None:
        super().__init__()
        self._debug_log_path = Path(debug_log_path or resolve_debug_log_path())
        self.summary_text = ""
        self.course_averages: list[CourseAverage] = []
        self.log_debug("app_init")

    def log_debug(self, message: str) -> None:
        try:
            ts = datetime.now(timezone.utc).isoformat()
            self._debug_log_path.parent.mkdir(parents=True, exist_ok=True)
            with self._debug_log_path.open("a", encoding="utf-8") as fh:
                fh.write(f"{ts} {message}\n")
        except OSError:
            # Logging must never interfere with app flow.
            return

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="menu-pane"):
                yield Static("Full Menu", classes="pane-title")
                yield Static("(no dishes yet)", id="menu-list")
            with Vertical(id="stats-pane"):
                yield Static(id="summary")
                yield Static("Average Price by Course", classes="pane-title")
                yield Static(id="averages")
                yield Static(id="help-bar")

    def on_mount(self) -> None:
        self.log_debug(f"on_mount items={len(self.menu_store)}")
        self._refresh_all()

    def watch_menu_store(self, store: MenuStore) -> None:
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        # While a modal is active, let the modal own keyboard handling.
        if isinstance(self.screen, ModalScreen):
            return

        if not event.is_printable or not event.character or len(event.character) != 1:
            return

        key = event.character.lower()
        if key == "a":
            self.log_debug("open_add_item")
            self.push_screen(AddItemModal(on_add=self.add_item), callback=self._on_modal_closed)
            event.stop()
            return

        if key == "f":
            self.log_debug(f"open_filter items={len(self.menu_store)}")
            self.push_screen(FilterModal(self.menu_store), callback=self._on_modal_closed)
            event.stop()
            return

        if key == "j":
            self.action_move_selection(1)
            event.stop()
            return

        if key == "k":
            self.action_move_selection(-1)
            event.stop()
            return

        if key == "d":
            self._remove_selected_item()
            event.stop()
            return

    def add_item(self, item: MenuItem) -> None:
        """Append a dish and select it."""
        self.menu_store = self.menu_store.add(item)
        self.selected_index = len(self.menu_store) - 1
        self.log_debug(f"item_added id={item.item_id} course={item.course!r} price={item.price}")
        self._refresh_menu_list()

    def remove_item(self, item_id: str) -> None:
        """Remove a dish by id; unknown ids leave the menu untouched."""
        before = len(self.menu_store)
        self.menu_store = self.menu_store.remove(item_id)
        self.log_debug(f"item_removed id={item_id} removed={before - len(self.menu_store)}")

    def action_move_selection(self, delta: int) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        total = len(self.menu_store)
        if not total:
            return

        if self.selected_index is None:
            self.selected_index = 0 if delta > 0 else total - 1
        else:
            self.selected_index = (self.selected_index + delta) % total
        self._refresh_menu_list()

    def _selected_item(self) -> MenuItem | None:
        if self.selected_index is None:
            return None
        if not (0 <= self.selected_index < len(self.menu_store)):
            return None
        return self.menu_store.items[self.selected_index]

    def _remove_selected_item(self) -> None:
        item = self._selected_item()
        if item is None:
            return

        idx = self.selected_index
        self.remove_item(item.item_id)
        if not len(self.menu_store):
            self.selected_index = None
        else:
            self.selected_index = min(idx, len(self.menu_store) - 1)
        self._refresh_menu_list()

    def _on_modal_closed(self, _result: None) -> None:
        self._refresh_all()

    def _refresh_all(self) -> None:
        self._refresh_menu_list()
        self._refresh_stats()

    def _visible_rows(self, widget: Static, total: int) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return self._rows_for_height(height, total)

    def _rows_for_height(self, height: int, total: int) -> int:
        # Each dish takes two lines: label and description.
        rows = max(1, height // 2)
        if total > rows:
            # Leave room for the ⋮ markers above and below the window.
            rows = max(1, (height - 2) // 2)
        return rows

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        if selected is None:
            start = 0
        else:
            half = rows // 2
            start = selected - half
            start = max(0, start)
            start = min(start, total - rows)

        return (start, start + rows)

    def _refresh_menu_list(self) -> None:
        try:
            menu_widget = self.query_one("#menu-list", Static)
        except NoMatches:
            return
        items = self.menu_store.items
        if not items:
            self.selected_index = None
            menu_widget.update("(no dishes yet)")
            return

        if self.selected_index is not None and self.selected_index >= len(items):
            self.selected_index = len(items) - 1

        visible_rows = self._visible_rows(menu_widget, len(items))
        start, end = self._window_bounds(len(items), visible_rows, self.selected_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")

            pointer = "➤ " if idx == self.selected_index else "  "
            lines.append(pointer)
            lines.append(f"{idx + 1}. ")
            lines.append_text(format_item_label(items[idx]))
            lines.append("\n      ")
            lines.append_text(format_item_description(items[idx]))

        if end < len(items):
            lines.append("\n⋮", style="dim")

        menu_widget.update(lines)

    def _refresh_stats(self) -> None:
        try:
            summary = self.query_one("#summary", Static)
            averages = self.query_one("#averages", Static)
            help_bar = self.query_one("#help-bar", Static)
        except NoMatches:
            return
        self.summary_text = f"Total Menu Items: {len(self.menu_store)}"
        self.course_averages = average_by_course(self.menu_store, COURSES)
        summary.update(self.summary_text)
        averages.update(averages_table(self.course_averages))
        help_bar.update("A add dish. F filter. J/K select. D remove. Ctrl+Q quit.")
