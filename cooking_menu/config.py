"""Runtime configuration defaults for logging and display."""

from __future__ import annotations

import os

DEBUG_LOG_PATH = "/tmp/cooking-menu-debug.log"
DEBUG_LOG_ENV = "COOKING_MENU_DEBUG_LOG"

CURRENCY_SYMBOL = "R"


def resolve_debug_log_path() -> str:
    """Return the debug log path, preferring COOKING_MENU_DEBUG_LOG when set."""
    env_override = os.environ.get(DEBUG_LOG_ENV, "").strip()
    if env_override:
        return env_override
    return DEBUG_LOG_PATH
