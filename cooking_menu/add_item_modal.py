"""Add dish modal screen."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from cooking_menu.config import CURRENCY_SYMBOL
from cooking_menu.constant import COURSES, DEFAULT_COURSE
from cooking_menu.models import MenuItem, new_item_id
from cooking_menu.rendering import badge_style


def parse_item_form(name: str, description: str, course: str, price_text: str) -> MenuItem:
    """Build a new menu item from raw form values.

    Raises ValueError with a user-facing message when a required field is
    missing or the price is not a non-negative number.
    """
    name = name.strip()
    price_text = price_text.strip()
    if not name:
        raise ValueError("Dish name is required.")
    if not price_text:
        raise ValueError("Price is required.")

    try:
        price = Decimal(price_text)
    except InvalidOperation as exc:
        raise ValueError("Price must be a number.") from exc
    if not price.is_finite():
        raise ValueError("Price must be a number.")
    if price < 0:
        raise ValueError("Price cannot be negative.")

    return MenuItem(
        item_id=new_item_id(),
        name=name,
        description=description.strip(),
        course=course,
        price=price,
    )


class AddItemModal(ModalScreen[None]):
    """Form for adding dishes. Stays open after each add, like a till entry."""

    CSS = """
    AddItemModal {
        align: center middle;
        background: $background 60%;
    }

    #add-item-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #add-item-title {
        text-style: bold;
        margin-bottom: 1;
        color: #d4af37;
    }

    #add-item-fields {
        color: white;
        margin-bottom: 1;
    }

    #add-item-error {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    #add-item-status {
        color: #b3ffb3;
        margin-bottom: 1;
    }

    #add-item-help {
        color: #dddddd;
    }
    """

    FIELDS = ("name", "description", "course", "price")
    FIELD_LABELS = {
        "name": "Dish Name",
        "description": "Description",
        "course": "Course",
        "price": f"Price ({CURRENCY_SYMBOL})",
    }

    def __init__(self, on_add: Callable[[MenuItem], None]) -> None:
        super().__init__()
        self.on_add = on_add
        self.field_index = 0
        self.values = {"name": "", "description": "", "price": ""}
        self.course = DEFAULT_COURSE
        self.error = ""
        self.status = ""

    def compose(self) -> ComposeResult:
        with Container(id="add-item-dialog"):
            yield Static("Add a New Dish", id="add-item-title")
            yield Static(id="add-item-fields")
            yield Static(id="add-item-error")
            yield Static(id="add-item-status")
            yield Static(
                "Tab/↑/↓ field. ←/→ course. Enter add. Backspace delete. Esc/Ctrl+C close.",
                id="add-item-help",
            )

    def on_mount(self) -> None:
        self._refresh_content()

    @property
    def active_field(self) -> str:
        return self.FIELDS[self.field_index]

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "ctrl+c"}:
            self.dismiss()
            event.stop()
            return

        if event.key == "enter":
            self._confirm()
            event.stop()
            return

        if event.key in {"tab", "down"}:
            self.field_index = (self.field_index + 1) % len(self.FIELDS)
            self._refresh_content()
            event.stop()
            return

        if event.key in {"shift+tab", "up"}:
            self.field_index = (self.field_index - 1) % len(self.FIELDS)
            self._refresh_content()
            event.stop()
            return

        if self.active_field == "course":
            if event.key in {"left", "right"}:
                self._cycle_course(-1 if event.key == "left" else 1)
            # The course is picked, never typed.
            event.stop()
            return

        if event.key == "backspace":
            field = self.active_field
            if self.values[field]:
                self.values[field] = self.values[field][:-1]
                self.error = ""
                self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character:
            if self.active_field == "price" and not (event.character.isdigit() or event.character == "."):
                event.stop()
                return
            self.values[self.active_field] += event.character
            self.error = ""
            self._refresh_content()
            event.stop()

    def _cycle_course(self, delta: int) -> None:
        idx = COURSES.index(self.course) if self.course in COURSES else 0
        self.course = COURSES[(idx + delta) % len(COURSES)]
        self._refresh_content()

    def _confirm(self) -> None:
        try:
            item = parse_item_form(
                self.values["name"],
                self.values["description"],
                self.course,
                self.values["price"],
            )
        except ValueError as exc:
            self.error = str(exc)
            self.status = ""
            self.app.log_debug(f"add_rejected error={self.error!r}")
            self._refresh_content()
            return

        self.on_add(item)
        self._reset_form()
        self.status = f"Added {item.name}"
        self._refresh_content()

    def _reset_form(self) -> None:
        self.values = {"name": "", "description": "", "price": ""}
        self.course = DEFAULT_COURSE
        self.field_index = 0
        self.error = ""

    def _refresh_content(self) -> None:
        fields_widget = self.query_one("#add-item-fields", Static)
        error_widget = self.query_one("#add-item-error", Static)
        status_widget = self.query_one("#add-item-status", Static)

        content = Text(style="white")
        for idx, field in enumerate(self.FIELDS):
            if idx > 0:
                content.append("\n")
            is_active = idx == self.field_index
            pointer = "➤ " if is_active else "  "
            content.append(f"{pointer}{self.FIELD_LABELS[field]}: ", style="bold white" if is_active else "white")
            if field == "course":
                content.append(f" {self.course} ", style=badge_style(self.course))
                if is_active:
                    content.append("  ← →", style="dim")
                continue
            content.append(self.values[field])
            if is_active:
                content.append("|", style="bold")

        fields_widget.update(content)
        error_widget.update(self.error or "")
        status_widget.update(self.status or "")
