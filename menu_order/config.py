"""Runtime configuration defaults for ordering and search."""

from __future__ import annotations

import os

ORDER_ENDPOINT = "http://localhost:8000/api/orders"
ORDER_TIMEOUT_SECONDS = 10.0

SEARCH_MIN_LENGTH = 2
SEARCH_DELAY_SECONDS = 0.3

DEBUG_LOG_PATH = "/tmp/menu-order-debug.log"
CURRENCY_LABEL = "rub."

_ENDPOINT_OVERRIDE_ENV = "MENU_ORDER_ENDPOINT"


def resolve_order_endpoint(explicit: str | None = None) -> str:
    """
    Resolve the order endpoint URL.

    Resolution order:
    1. explicit value (command line)
    2. MENU_ORDER_ENDPOINT (if set)
    3. ORDER_ENDPOINT
    """
    if explicit and explicit.strip():
        return explicit.strip()
    env_override = os.environ.get(_ENDPOINT_OVERRIDE_ENV, "").strip()
    if env_override:
        return env_override
    return ORDER_ENDPOINT
