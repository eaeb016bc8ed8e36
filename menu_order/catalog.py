"""Catalog normalization: nested category input into flat projections."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from menu_order.errors import CatalogError
from menu_order.models import Catalog, NormalizedDish

logger = logging.getLogger(__name__)

# Routing-state wrapper the catalog may arrive in.
_WRAPPER_KEY = "dishesObj"


def _coerce_price(raw: Any, dish_id: str) -> int:
    if not raw:
        return 0
    if isinstance(raw, bool):
        raise CatalogError(f"Dish {dish_id!r} has a non-numeric price: {raw!r}")
    try:
        value = float(raw)
    except (TypeError, ValueError) as exc:
        raise CatalogError(f"Dish {dish_id!r} has a non-numeric price: {raw!r}") from exc
    if value < 0:
        raise CatalogError(f"Dish {dish_id!r} has a negative price: {raw!r}")
    if not value.is_integer():
        raise CatalogError(f"Dish {dish_id!r} has a fractional price: {raw!r}")
    return int(value)


def _first_size(dish: Mapping[str, Any]) -> Mapping[str, Any]:
    sizes = dish.get("sizes")
    if not isinstance(sizes, list) or not sizes or not isinstance(sizes[0], Mapping):
        return {}
    return sizes[0]


def _normalize_dish(dish: Any, category: str) -> NormalizedDish | None:
    if not isinstance(dish, Mapping) or dish.get("id") is None:
        logger.warning("Skipping malformed dish in category %r: %r", category, dish)
        return None

    dish_id = str(dish["id"])
    size = _first_size(dish)
    try:
        price = _coerce_price(size.get("price"), dish_id)
    except CatalogError as exc:
        logger.warning("Skipping dish in category %r: %s", category, exc)
        return None

    image_url = size.get("imageUrl") or None
    return NormalizedDish(
        dish_id=dish_id,
        name=str(dish.get("name") or dish_id),
        category=category,
        price=price,
        image_url=str(image_url) if image_url is not None else None,
    )


def normalize_catalog(raw: Mapping[str, Any] | None) -> Catalog:
    """
    Flatten a ``{categories: [{name, dishes: [...]}]}`` structure.

    Absent or malformed input yields an empty catalog. Category names keep
    their first occurrence only; dishes keep category-then-dish order.
    """
    if not raw or not isinstance(raw, Mapping):
        logger.debug("normalize_catalog: no catalog input, using empty catalog")
        return Catalog()

    groups = raw.get("categories")
    if not isinstance(groups, list):
        logger.warning("normalize_catalog: 'categories' is not a list, using empty catalog")
        return Catalog()

    categories: list[str] = []
    dishes: list[NormalizedDish] = []
    for group in groups:
        if not isinstance(group, Mapping) or not group.get("name"):
            logger.warning("Skipping malformed category: %r", group)
            continue

        name = str(group["name"])
        if name in categories:
            logger.warning("Category %r listed more than once; merging its dishes", name)
        else:
            categories.append(name)

        for dish in group.get("dishes") or []:
            normalized = _normalize_dish(dish, name)
            if normalized is not None:
                dishes.append(normalized)

    catalog = Catalog(categories=tuple(categories), dishes=tuple(dishes))
    logger.debug("normalize_catalog: %d categories, %d dishes", len(catalog.categories), len(catalog.dishes))
    return catalog


def load_catalog_file(path: str | Path) -> Catalog:
    """Read a catalog JSON file and normalize it."""
    catalog_path = Path(path)
    try:
        data = json.loads(catalog_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise CatalogError(f"Cannot read catalog file {catalog_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Catalog file {catalog_path} is not valid JSON: {exc}") from exc

    if isinstance(data, Mapping) and _WRAPPER_KEY in data:
        data = data[_WRAPPER_KEY]
    return normalize_catalog(data)
