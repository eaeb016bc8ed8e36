"""Rendering helpers for categories, dishes and the cart footer."""

from __future__ import annotations

from rich.text import Text

from menu_order.config import CURRENCY_LABEL
from menu_order.models import NormalizedDish

NO_IMAGE_PLACEHOLDER = "no_img.png"


def category_style(active: bool, under_cursor: bool) -> str:
    """Return a consistent chip style for a category."""
    if active and under_cursor:
        return "bold #ffffff on #b23a48 underline"
    if active:
        return "bold #ffffff on #b23a48"
    if under_cursor:
        return "bold #0b1f0f on #5fbf72"
    return "#dddddd on #2b2b2b"


def format_price(amount: int) -> str:
    return f"{amount} {CURRENCY_LABEL}"


def dish_image_source(dish: NormalizedDish) -> str:
    return dish.image_url or NO_IMAGE_PLACEHOLDER


def format_category_strip(categories: tuple[str, ...], active: tuple[str, ...], cursor: int | None) -> Text:
    """Render categories as a single row of chips."""
    text = Text()
    if not categories:
        text.append("(no categories)", style="dim")
        return text

    for idx, name in enumerate(categories):
        if idx > 0:
            text.append(" ")
        text.append(f" {name} ", style=category_style(name in active, idx == cursor))
    return text


def format_quantity_badge(quantity: int) -> Text:
    text = Text()
    if quantity > 0:
        text.append(f" x{quantity} ", style="bold #ffffff on #2f6db5")
    return text


def format_dish_row(dish: NormalizedDish, quantity: int, selected: bool) -> Text:
    """Render a dish line with its price and cart quantity."""
    text = Text()
    text.append("➤ " if selected else "  ")
    text.append(dish.name, style="bold" if selected else "")
    text.append(f"  {format_price(dish.price)}", style="dim")
    if quantity > 0:
        text.append("  ")
        text.append_text(format_quantity_badge(quantity))
    return text


def format_cart_footer(total: int, search_mode: bool, sending: bool) -> Text:
    """Footer shown while the cart total is positive."""
    text = Text()
    if total <= 0:
        return text
    if sending:
        text.append("Sending order...", style="bold yellow")
        return text

    label = "Cart" if search_mode else "Order (Ctrl+S)"
    text.append(f" {label} ", style="bold #ffffff on #2f6db5")
    text.append(f"  {format_price(total)}", style="bold")
    return text
