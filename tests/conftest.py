"""Shared fixtures for menu-order tests."""

from __future__ import annotations

from typing import Any

import pytest

from menu_order.catalog import normalize_catalog
from menu_order.models import Catalog
from tests.factories import dish


@pytest.fixture
def raw_catalog() -> dict[str, Any]:
    return {
        "categories": [
            {"name": "Main", "dishes": [dish(1, "Pizza", 500, "https://img.test/pizza.png"), dish(2, "Pasta", 300)]},
            {"name": "Drinks", "dishes": [dish(3, "Lemonade", 150), dish(4, "Espresso", 120)]},
            {"name": "Desserts", "dishes": [dish(5, "Tiramisu", 280)]},
        ]
    }


@pytest.fixture
def catalog(raw_catalog: dict[str, Any]) -> Catalog:
    return normalize_catalog(raw_catalog)
