"""Headless tests for the Textual shell.

Each test drives the app through Textual's Pilot inside asyncio.run, so no
async pytest plugin is needed.
"""

import asyncio
from decimal import Decimal
from pathlib import Path

from rich.console import Console

from cooking_menu.add_item_modal import AddItemModal
from cooking_menu.filter_modal import FilterModal
from cooking_menu.menu_app import MenuApp
from cooking_menu.rendering import averages_table


def averages_by_course(app: MenuApp) -> dict[str, str]:
    return {entry.course: str(entry.average) for entry in app.course_averages}


def render_averages(app: MenuApp) -> str:
    console = Console(width=80, record=True, color_system=None)
    console.print(averages_table(app.course_averages))
    return console.export_text()


class TestAddDish:
    def test_form_adds_dish_and_resets(self, debug_log_path):
        async def scenario():
            app = MenuApp(debug_log_path=debug_log_path)
            async with app.run_test() as pilot:
                await pilot.press("a")
                assert isinstance(app.screen, AddItemModal)

                await pilot.press("s", "o", "u", "p")
                # Description stays empty; course stays Starters.
                await pilot.press("tab", "tab", "tab")
                await pilot.press("2", "5")
                await pilot.press("enter")
                await pilot.pause()

                assert len(app.menu_store) == 1
                item = app.menu_store.items[0]
                assert (item.name, item.course, item.price) == ("soup", "Starters", Decimal("25"))

                form = app.screen
                assert isinstance(form, AddItemModal)
                assert form.values == {"name": "", "description": "", "price": ""}
                assert form.field_index == 0
                assert form.status == "Added soup"

                await pilot.press("escape")
                await pilot.pause()
                assert not isinstance(app.screen, AddItemModal)

        asyncio.run(scenario())

    def test_course_picker_cycles(self, debug_log_path):
        async def scenario():
            app = MenuApp(debug_log_path=debug_log_path)
            async with app.run_test() as pilot:
                await pilot.press("a")
                await pilot.press("p", "i", "e")
                await pilot.press("tab", "tab", "right", "right")
                assert app.screen.course == "Desserts"
                await pilot.press("tab", "4", "0", "enter")
                await pilot.pause()

                assert app.menu_store.items[0].course == "Desserts"
                # The form resets the course to its default.
                assert app.screen.course == "Starters"

        asyncio.run(scenario())

    def test_missing_price_shows_error(self, debug_log_path):
        async def scenario():
            app = MenuApp(debug_log_path=debug_log_path)
            async with app.run_test() as pilot:
                await pilot.press("a")
                await pilot.press("s", "o", "u", "p", "enter")
                await pilot.pause()

                assert len(app.menu_store) == 0
                assert app.screen.error == "Price is required."
                assert app.screen.values["name"] == "soup"

        asyncio.run(scenario())

        assert "add_rejected" in Path(debug_log_path).read_text(encoding="utf-8")

    def test_price_field_ignores_letters(self, debug_log_path):
        async def scenario():
            app = MenuApp(debug_log_path=debug_log_path)
            async with app.run_test() as pilot:
                await pilot.press("a")
                await pilot.press("up")
                assert app.screen.active_field == "price"
                await pilot.press("1", "x", "2")
                assert app.screen.values["price"] == "12"

        asyncio.run(scenario())


class TestRemoveDish:
    def test_remove_selected_dish(self, debug_log_path, make_item):
        async def scenario():
            app = MenuApp(debug_log_path=debug_log_path)
            async with app.run_test() as pilot:
                for item_id, name in (("a", "Soup"), ("b", "Steak"), ("c", "Salad")):
                    app.add_item(make_item(item_id, name, "Starters", "10"))
                await pilot.pause()

                # Adding selects the newest dish; move up to the middle one.
                await pilot.press("k")
                assert app.selected_index == 1
                await pilot.press("d")
                await pilot.pause()

                assert [item.item_id for item in app.menu_store] == ["a", "c"]
                assert app.selected_index == 1

        asyncio.run(scenario())

        log_text = Path(debug_log_path).read_text(encoding="utf-8")
        assert "item_removed id=b removed=1" in log_text

    def test_remove_on_empty_menu_is_ignored(self, debug_log_path):
        async def scenario():
            app = MenuApp(debug_log_path=debug_log_path)
            async with app.run_test() as pilot:
                await pilot.press("j", "d")
                await pilot.pause()
                assert len(app.menu_store) == 0
                assert app.selected_index is None

        asyncio.run(scenario())

    def test_remove_unknown_id_keeps_menu(self, debug_log_path, make_item):
        async def scenario():
            app = MenuApp(debug_log_path=debug_log_path)
            async with app.run_test() as pilot:
                app.add_item(make_item("a", "Soup", "Starters", "10"))
                app.remove_item("missing")
                await pilot.pause()
                assert [item.item_id for item in app.menu_store] == ["a"]

        asyncio.run(scenario())


class TestHomeStats:
    def test_stats_follow_add_and_remove(self, debug_log_path, make_item):
        async def scenario():
            app = MenuApp(debug_log_path=debug_log_path)
            async with app.run_test() as pilot:
                app.add_item(make_item("a", "Soup", "Starters", "25"))
                app.add_item(make_item("b", "Salad", "Starters", "35"))
                await pilot.pause()

                assert app.summary_text == "Total Menu Items: 2"
                assert averages_by_course(app) == {"Starters": "30.00", "Mains": "0.00", "Desserts": "0.00"}
                assert "30.00" in render_averages(app)

                # The newest dish is selected, so this removes the salad.
                await pilot.press("d")
                await pilot.pause()

                assert app.summary_text == "Total Menu Items: 1"
                assert averages_by_course(app)["Starters"] == "25.00"

        asyncio.run(scenario())

    def test_stats_refresh_after_form_closes(self, debug_log_path):
        async def scenario():
            app = MenuApp(debug_log_path=debug_log_path)
            async with app.run_test() as pilot:
                await pilot.press("a")
                await pilot.press("s", "o", "u", "p", "up", "4", "0", "enter")
                await pilot.press("escape")
                await pilot.pause()

                assert not isinstance(app.screen, AddItemModal)
                assert app.summary_text == "Total Menu Items: 1"
                assert averages_by_course(app)["Starters"] == "40.00"

        asyncio.run(scenario())

    def test_very_long_price_keeps_running(self, debug_log_path):
        async def scenario():
            app = MenuApp(debug_log_path=debug_log_path)
            async with app.run_test() as pilot:
                await pilot.press("a")
                await pilot.press("c", "a", "v", "up")
                await pilot.press(*["9"] * 27)
                await pilot.press("enter", "escape")
                await pilot.pause()

                assert len(app.menu_store) == 1
                assert averages_by_course(app)["Starters"] == "9" * 27 + ".00"

        asyncio.run(scenario())


class TestMenuWindow:
    def test_rows_without_overflow(self, debug_log_path):
        app = MenuApp(debug_log_path=debug_log_path)
        assert app._rows_for_height(10, 3) == 5
        assert app._rows_for_height(10, 5) == 5

    def test_rows_leave_room_for_markers(self, debug_log_path):
        app = MenuApp(debug_log_path=debug_log_path)
        assert app._rows_for_height(10, 6) == 4
        assert app._rows_for_height(3, 5) == 1

    def test_window_fits_height_for_every_selection(self, debug_log_path):
        app = MenuApp(debug_log_path=debug_log_path)
        height, total = 10, 6
        rows = app._rows_for_height(height, total)
        for selected in range(total):
            start, end = app._window_bounds(total, rows, selected)
            assert start <= selected < end
            lines = 2 * (end - start) + (start > 0) + (end < total)
            assert lines <= height


class TestFilter:
    def test_filter_cycles_courses(self, debug_log_path, make_item):
        async def scenario():
            app = MenuApp(debug_log_path=debug_log_path)
            async with app.run_test() as pilot:
                app.add_item(make_item("a", "Soup", "Starters", "25"))
                app.add_item(make_item("b", "Steak", "Mains", "180"))
                app.add_item(make_item("c", "Salad", "Starters", "35"))
                await pilot.press("f")
                await pilot.pause()

                modal = app.screen
                assert isinstance(modal, FilterModal)
                assert modal.selected_course == "Starters"
                assert [item.name for item in modal.filtered_items()] == ["Soup", "Salad"]

                await pilot.press("right")
                assert [item.name for item in modal.filtered_items()] == ["Steak"]

                await pilot.press("right")
                assert modal.filtered_items() == []

                await pilot.press("escape")
                await pilot.pause()
                assert not isinstance(app.screen, FilterModal)

        asyncio.run(scenario())


def test_debug_log_records_startup(debug_log_path):
    async def scenario():
        app = MenuApp(debug_log_path=debug_log_path)
        async with app.run_test() as pilot:
            await pilot.pause()

    asyncio.run(scenario())

    log_text = Path(debug_log_path).read_text(encoding="utf-8")
    assert "app_init" in log_text
    assert "on_mount items=0" in log_text
