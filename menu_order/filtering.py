"""Category filtering and text search over the flat dish list."""

from __future__ import annotations

from typing import Iterable, Sequence

from menu_order.config import SEARCH_MIN_LENGTH
from menu_order.models import NormalizedDish


def dishes_by_category(dishes: Sequence[NormalizedDish], active: Iterable[str]) -> list[NormalizedDish]:
    """Dishes in any of the active categories, or every dish when none are active."""
    selected = set(active)
    if not selected:
        return list(dishes)
    return [dish for dish in dishes if dish.category in selected]


def toggle_category(active: Sequence[str], name: str) -> tuple[str, ...]:
    if name in active:
        return tuple(category for category in active if category != name)
    return (*active, name)


def matches_query(dish: NormalizedDish, query: str) -> bool:
    return query.lower() in dish.name.lower()


def search_dishes(
    dishes: Sequence[NormalizedDish],
    query: str,
    previous: Sequence[NormalizedDish],
    min_length: int = SEARCH_MIN_LENGTH,
) -> list[NormalizedDish]:
    """
    Evaluate a search query.

    Queries longer than ``min_length`` filter by case-insensitive substring.
    An empty query clears the results. Anything in between leaves the
    previous results untouched.
    """
    if len(query) > min_length:
        return [dish for dish in dishes if matches_query(dish, query)]
    if not query:
        return []
    return list(previous)
