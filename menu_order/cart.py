"""In-memory cart ledger keyed by canonical dish id."""

from __future__ import annotations

import logging

from menu_order.models import Catalog, OrderLine

logger = logging.getLogger(__name__)


class Cart:
    """Dish id to strictly positive quantity. Absent ids have quantity zero."""

    def __init__(self) -> None:
        self._quantities: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._quantities)

    @property
    def is_empty(self) -> bool:
        return not self._quantities

    @property
    def count(self) -> int:
        """Total number of portions across all entries."""
        return sum(self._quantities.values())

    def quantity(self, dish_id: object) -> int:
        return self._quantities.get(str(dish_id), 0)

    def items(self) -> list[tuple[str, int]]:
        return list(self._quantities.items())

    def add(self, dish_id: object) -> int:
        """Increment the quantity for a dish and return the new quantity."""
        key = str(dish_id)
        self._quantities[key] = self._quantities.get(key, 0) + 1
        return self._quantities[key]

    def remove(self, dish_id: object) -> int:
        """Decrement the quantity for a dish, dropping the entry when it reaches zero."""
        key = str(dish_id)
        current = self._quantities.get(key, 0)
        if current <= 0:
            return 0

        current -= 1
        if current == 0:
            del self._quantities[key]
        else:
            self._quantities[key] = current
        return current

    def line_total(self, catalog: Catalog, dish_id: object) -> int:
        dish = catalog.dish_by_id(dish_id)
        if dish is None:
            return 0
        return dish.price * self.quantity(dish_id)

    def total_price(self, catalog: Catalog) -> int:
        """Sum price x quantity over all entries; ids unknown to the catalog are excluded."""
        total = 0
        for dish_id, amount in self._quantities.items():
            dish = catalog.dish_by_id(dish_id)
            if dish is None:
                logger.error("Cart references dish id %r which is not in the catalog; excluded from total", dish_id)
                continue
            total += dish.price * amount
        return total

    def to_order_lines(self) -> list[OrderLine]:
        return [OrderLine(dish_id=dish_id, amount=amount) for dish_id, amount in self._quantities.items()]

    def to_order_payload(self) -> dict[str, list[dict[str, object]]]:
        """Build the JSON request body for order submission."""
        return {"orders": [line.to_json() for line in self.to_order_lines()]}
