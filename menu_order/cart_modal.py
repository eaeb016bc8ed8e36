"""Cart review modal screen."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from menu_order.rendering import format_price, format_quantity_badge
from menu_order.state import MenuState


class CartModal(ModalScreen[None]):
    """Centered modal listing cart lines with quantity controls."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("ctrl+c", "close", "Close"),
        ("j", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("enter", "add_current", "Add"),
        ("x", "remove_current", "Remove"),
    ]

    CSS = """
    CartModal {
        align: center middle;
        background: $background 60%;
    }

    #cart-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #cart-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #cart-body {
        margin-bottom: 1;
        color: white;
    }

    #cart-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    cursor_index = reactive(0)

    def __init__(
        self,
        state: MenuState,
        on_add: Callable[[str], None],
        on_remove: Callable[[str], None],
    ) -> None:
        super().__init__()
        self.state = state
        self.on_add = on_add
        self.on_remove = on_remove

    def compose(self) -> ComposeResult:
        with Container(id="cart-dialog"):
            yield Static("Cart", id="cart-title")
            yield Static(id="cart-body")
            yield Static("J/K/↑/↓ move, +/Enter add, -/x remove, Esc/q close", id="cart-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.character == "+":
            self.action_add_current()
            event.stop()
            return
        if event.character == "-":
            self.action_remove_current()
            event.stop()

    def action_close(self) -> None:
        self.dismiss()

    def action_move_cursor(self, delta: int) -> None:
        rows = self._rows()
        if not rows:
            return
        self.cursor_index = (self.cursor_index + delta) % len(rows)
        self._refresh_content()

    def action_add_current(self) -> None:
        dish_id = self._current_dish_id()
        if dish_id is None:
            return
        self.on_add(dish_id)
        self._refresh_content()

    def action_remove_current(self) -> None:
        dish_id = self._current_dish_id()
        if dish_id is None:
            return
        self.on_remove(dish_id)
        self._refresh_content()

    def _rows(self) -> list[tuple[str, int]]:
        return self.state.cart.items()

    def _current_dish_id(self) -> str | None:
        rows = self._rows()
        if not rows:
            return None
        if self.cursor_index >= len(rows):
            self.cursor_index = len(rows) - 1
        return rows[self.cursor_index][0]

    def _refresh_content(self) -> None:
        body = self.query_one("#cart-body", Static)
        rows = self._rows()
        if not rows:
            body.update("Cart is empty")
            return
        if self.cursor_index >= len(rows):
            self.cursor_index = max(0, len(rows) - 1)

        content = Text(style="white")
        for idx, (dish_id, amount) in enumerate(rows):
            if idx > 0:
                content.append("\n")
            pointer = "➤ " if idx == self.cursor_index else "  "
            dish = self.state.catalog.dish_by_id(dish_id)
            name = dish.name if dish is not None else f"#{dish_id}"
            content.append(f"{pointer}{name} ", style="bold white" if idx == self.cursor_index else "white")
            content.append_text(format_quantity_badge(amount))
            content.append(f"  {format_price(self.state.cart.line_total(self.state.catalog, dish_id))}", style="dim")

        content.append("\n\n")
        content.append(f"Total: {format_price(self.state.total_price())}", style="bold white")
        body.update(content)
