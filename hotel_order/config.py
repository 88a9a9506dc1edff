"""Runtime configuration defaults."""

from __future__ import annotations

import os

DEBUG_LOG_ENV = "HOTEL_ORDER_DEBUG_LOG"
DEFAULT_DEBUG_LOG_PATH = "/tmp/hotel-order-debug.log"


def debug_log_path() -> str:
    """Resolve the debug log path, preferring HOTEL_ORDER_DEBUG_LOG when set."""
    override = os.environ.get(DEBUG_LOG_ENV, "").strip()
    return override or DEFAULT_DEBUG_LOG_PATH
