"""Screen state for the menu: catalog, cart, category filter and search."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from menu_order.cart import Cart
from menu_order.config import SEARCH_MIN_LENGTH
from menu_order.filtering import dishes_by_category, search_dishes, toggle_category
from menu_order.models import Catalog, NormalizedDish

logger = logging.getLogger(__name__)


@dataclass
class MenuState:
    """All mutable state of one menu screen.

    Child widgets never mutate this directly; they emit add/remove/toggle
    intents that the owning app applies here.
    """

    catalog: Catalog = field(default_factory=Catalog)
    cart: Cart = field(default_factory=Cart)
    active_categories: tuple[str, ...] = ()
    search_mode: bool = False
    query: str = ""
    search_results: list[NormalizedDish] = field(default_factory=list)
    sending: bool = False
    min_query_length: int = SEARCH_MIN_LENGTH

    def toggle_category(self, name: str) -> None:
        if name not in self.catalog.categories:
            logger.warning("toggle_category: unknown category %r ignored", name)
            return
        self.active_categories = toggle_category(self.active_categories, name)

    def enter_search(self) -> None:
        self.search_mode = True
        self.query = ""
        self.search_results = []

    def exit_search(self) -> None:
        self.search_mode = False
        self.query = ""
        self.search_results = []

    def set_query(self, text: str) -> None:
        """Record the query; evaluation happens later in apply_search."""
        self.query = text

    def apply_search(self) -> None:
        if not self.search_mode:
            return
        self.search_results = search_dishes(
            self.catalog.dishes,
            self.query,
            self.search_results,
            min_length=self.min_query_length,
        )

    def category_dishes(self) -> list[NormalizedDish]:
        return dishes_by_category(self.catalog.dishes, self.active_categories)

    def visible_dishes(self) -> list[NormalizedDish]:
        if self.search_mode:
            return list(self.search_results)
        return self.category_dishes()

    def add_dish(self, dish_id: object) -> bool:
        if self.catalog.dish_by_id(dish_id) is None:
            logger.error("add_dish: dish id %r is not in the catalog", dish_id)
            return False
        self.cart.add(dish_id)
        return True

    def remove_dish(self, dish_id: object) -> None:
        self.cart.remove(dish_id)

    def total_price(self) -> int:
        return self.cart.total_price(self.catalog)

    def can_submit(self) -> bool:
        return not self.sending and self.total_price() > 0 and not self.search_mode
