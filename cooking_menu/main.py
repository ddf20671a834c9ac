"""Entry point for the cooking-menu Textual app."""

from __future__ import annotations

from cooking_menu.menu_app import MenuApp


def main() -> None:
    """Run the Textual application."""
    MenuApp().run()


if __name__ == "__main__":
    main()
