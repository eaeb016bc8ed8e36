"""Domain models for menu-order."""

from __future__ import annotations

from dataclasses import dataclass, field

from menu_order.errors import CatalogError


@dataclass(frozen=True)
class NormalizedDish:
    """A dish flattened out of its category, priced from its first size."""

    dish_id: str
    name: str
    category: str
    price: int = 0
    image_url: str | None = None


@dataclass(frozen=True)
class Catalog:
    """Category names plus the flat dish list derived from them."""

    categories: tuple[str, ...] = ()
    dishes: tuple[NormalizedDish, ...] = ()
    _by_id: dict[str, NormalizedDish] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        by_id: dict[str, NormalizedDish] = {}
        for dish in self.dishes:
            if dish.dish_id in by_id:
                raise CatalogError(f"Duplicate dish id {dish.dish_id!r} ({by_id[dish.dish_id].name!r} and {dish.name!r})")
            by_id[dish.dish_id] = dish
        object.__setattr__(self, "_by_id", by_id)

    @property
    def is_empty(self) -> bool:
        return not self.dishes and not self.categories

    def dish_by_id(self, dish_id: object) -> NormalizedDish | None:
        """Look up a dish by id, comparing on the canonical string form."""
        return self._by_id.get(str(dish_id))


@dataclass(frozen=True)
class OrderLine:
    """One row of the submitted order body."""

    dish_id: str
    amount: int

    def to_json(self) -> dict[str, object]:
        return {"dish_id": self.dish_id, "amount": self.amount}
