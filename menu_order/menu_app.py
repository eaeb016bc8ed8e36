"""Main Textual app class."""

from __future__ import annotations

import logging

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.timer import Timer
from textual.widgets import Header, Static

from menu_order.cart_modal import CartModal
from menu_order.config import SEARCH_DELAY_SECONDS, resolve_order_endpoint
from menu_order.errors import OrderSubmissionError
from menu_order.models import Catalog, NormalizedDish
from menu_order.ordering import OrderClient
from menu_order.rendering import (
    dish_image_source,
    format_cart_footer,
    format_category_strip,
    format_dish_row,
    format_price,
)
from menu_order.retry_modal import RetryModal
from menu_order.state import MenuState

logger = logging.getLogger(__name__)


class MenuOrderApp(App):
    """A Textual app for browsing a categorized menu and ordering dishes."""

    TITLE = "Menu"
    SUB_TITLE = "Browse / Order"

    CSS = """
    Screen {
        layout: vertical;
    }

    #menu-layout {
        height: 1fr;
        border: round $primary;
        padding: 0 1;
    }

    #categories {
        height: auto;
        margin-bottom: 1;
    }

    #search-bar {
        border: heavy $secondary;
        padding: 0 1;
        margin-bottom: 1;
        height: 4;
    }

    #dishes {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #dish-detail {
        height: 1;
        color: $text-muted;
    }

    #footer {
        height: 1;
        margin-top: 1;
    }
    """

    selected_index = reactive(0)
    category_index = reactive(0)

    BINDINGS = [
        ("up", "move_dish(-1)", "Previous dish"),
        ("down", "move_dish(1)", "Next dish"),
        ("left", "move_category(-1)", "Previous category"),
        ("right", "move_category(1)", "Next category"),
        ("space", "toggle_category", "Toggle category"),
        ("enter", "add_selected", "Add dish"),
        ("ctrl+x", "remove_selected", "Remove dish"),
        ("backspace", "backspace_query", "Delete query char"),
        ("escape", "exit_search", "Leave search"),
        ("ctrl+o", "open_cart", "Cart"),
        Binding("ctrl+s", "submit_order", "Order", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        catalog: Catalog | None = None,
        order_client: OrderClient | None = None,
        endpoint: str | None = None,
        search_delay: float = SEARCH_DELAY_SECONDS,
    ) -> None:
        super().__init__()
        self.state = MenuState(catalog=catalog or Catalog())
        self._owns_client = order_client is None
        if order_client is None:
            order_client = OrderClient(resolve_order_endpoint(endpoint))
        self.order_client = order_client
        self.search_delay = search_delay
        self.system_status = ""
        self._search_timer: Timer | None = None
        self._log_debug(
            f"app_init categories={len(self.state.catalog.categories)} dishes={len(self.state.catalog.dishes)}"
        )

    def _log_debug(self, message: str) -> None:
        logger.debug(message)

    def _modal_open(self) -> bool:
        return isinstance(self.screen, ModalScreen)

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="menu-layout"):
            yield Static(id="categories")
            yield Static(id="search-bar")
            yield Static(id="dishes")
            yield Static(id="dish-detail")
            yield Static(id="footer")

    def on_mount(self) -> None:
        if self.state.catalog.is_empty:
            self.system_status = "No menu loaded"
        self._refresh_all()

    async def on_unmount(self) -> None:
        self._cancel_search_timer()
        if self._owns_client:
            await self.order_client.aclose()

    def on_key(self, event: Key) -> None:
        if self._modal_open():
            return

        self._log_debug(
            f"on_key key={event.key!r} char={event.character!r} printable={event.is_printable} "
            f"search_mode={self.state.search_mode!r}"
        )

        if not event.is_printable or not event.character:
            return

        if self.state.search_mode:
            self.state.set_query(self.state.query + event.character)
            self._schedule_search()
            self._refresh_search_bar()
            event.stop()
            event.prevent_default()
            return

        key = event.character.lower()
        handlers = {
            "j": lambda: self.action_move_dish(1),
            "k": lambda: self.action_move_dish(-1),
            "h": lambda: self.action_move_category(-1),
            "l": lambda: self.action_move_category(1),
            "+": self.action_add_selected,
            "a": self.action_add_selected,
            "-": self.action_remove_selected,
            "x": self.action_remove_selected,
            "s": self.action_enter_search,
            "/": self.action_enter_search,
            "c": self.action_open_cart,
        }
        handler = handlers.get(key)
        if handler is None:
            return

        handler()
        event.stop()
        event.prevent_default()

    def action_enter_search(self) -> None:
        if self._modal_open() or self.state.search_mode:
            return

        self._cancel_search_timer()
        self.state.enter_search()
        self.selected_index = 0
        self._refresh_all()

    def action_exit_search(self) -> None:
        if self._modal_open() or not self.state.search_mode:
            return

        self._cancel_search_timer()
        self.state.exit_search()
        self.selected_index = 0
        self._refresh_all()

    def action_backspace_query(self) -> None:
        if self._modal_open() or not self.state.search_mode:
            return
        if not self.state.query:
            return

        self.state.set_query(self.state.query[:-1])
        self._schedule_search()
        self._refresh_search_bar()

    def action_move_dish(self, delta: int) -> None:
        if self._modal_open():
            return

        dishes = self.state.visible_dishes()
        if not dishes:
            self.selected_index = 0
            self._refresh_dishes(dishes)
            return
        self.selected_index = (self.selected_index + delta) % len(dishes)
        self._refresh_dishes(dishes)

    def action_move_category(self, delta: int) -> None:
        if self._modal_open() or self.state.search_mode:
            return

        categories = self.state.catalog.categories
        if not categories:
            return
        self.category_index = (self.category_index + delta) % len(categories)
        self._refresh_categories()

    def action_toggle_category(self) -> None:
        if self._modal_open() or self.state.search_mode:
            return

        categories = self.state.catalog.categories
        if not categories:
            return
        self.state.toggle_category(categories[self.category_index])
        self.selected_index = 0
        self._refresh_all()

    def action_add_selected(self) -> None:
        if self._modal_open():
            return

        dish = self._selected_dish()
        if dish is None:
            return
        self.add_dish(dish.dish_id)

    def action_remove_selected(self) -> None:
        if self._modal_open():
            return

        dish = self._selected_dish()
        if dish is None:
            return
        self.remove_dish(dish.dish_id)

    def action_open_cart(self) -> None:
        if self._modal_open():
            return
        if self.state.cart.is_empty:
            self.system_status = "Cart is empty"
            self._refresh_search_bar()
            return
        self.push_screen(CartModal(self.state, on_add=self.add_dish, on_remove=self.remove_dish))

    def add_dish(self, dish_id: str) -> None:
        """Apply an add intent from the dish list or the cart modal."""
        if self.state.add_dish(dish_id):
            self._log_debug(f"add_dish id={dish_id!r} qty={self.state.cart.quantity(dish_id)}")
        self._refresh_dishes()
        self._refresh_footer()

    def remove_dish(self, dish_id: str) -> None:
        """Apply a remove intent from the dish list or the cart modal."""
        self.state.remove_dish(dish_id)
        self._log_debug(f"remove_dish id={dish_id!r} qty={self.state.cart.quantity(dish_id)}")
        self._refresh_dishes()
        self._refresh_footer()

    def action_submit_order(self) -> None:
        self._log_debug(
            f"submit_enter search_mode={self.state.search_mode!r} sending={self.state.sending!r} "
            f"lines={len(self.state.cart)} screen={type(self.screen).__name__}"
        )
        if self._modal_open():
            self._log_debug("submit_blocked reason=modal")
            return
        if self.state.search_mode:
            self.system_status = "Leave search (Esc) to place the order"
            self._refresh_search_bar()
            self._log_debug("submit_blocked reason=search_mode")
            return
        if self.state.sending:
            self._log_debug("submit_blocked reason=in_flight")
            return
        if self.state.total_price() <= 0:
            self.system_status = "Nothing to order"
            self._refresh_search_bar()
            self._log_debug("submit_blocked reason=zero_total")
            return

        self._start_submission()

    def _start_submission(self) -> None:
        payload = self.state.cart.to_order_payload()
        self.state.sending = True
        self.system_status = "Sending order..."
        self._refresh_search_bar()
        self._refresh_footer()
        self.run_worker(self._send_order(payload), exclusive=True, group="order")

    async def _send_order(self, payload: dict[str, list[dict[str, object]]]) -> None:
        try:
            await self.order_client.submit(payload)
        except OrderSubmissionError as exc:
            self.system_status = f"Order failed: {exc}"
            self._log_debug(f"submit_failed status={exc.status_code!r} error={exc}")
            self.push_screen(RetryModal(str(exc)), self._on_retry_choice)
        else:
            total = self.state.total_price()
            self.system_status = f"Order sent: {self.state.cart.count} items, {format_price(total)}"
            self._log_debug(f"submit_sent lines={len(payload['orders'])} total={total}")
        finally:
            self.state.sending = False
            self._refresh_all()

    def _on_retry_choice(self, retry: bool | None) -> None:
        if not retry:
            self._log_debug("retry_declined")
            return
        self._log_debug("retry_accepted")
        if not self.state.can_submit():
            return
        self._start_submission()

    def _schedule_search(self) -> None:
        self._cancel_search_timer()
        self._search_timer = self.set_timer(self.search_delay, self._run_debounced_search)

    def _cancel_search_timer(self) -> None:
        if self._search_timer is not None:
            self._search_timer.stop()
            self._search_timer = None

    def _run_debounced_search(self) -> None:
        self._search_timer = None
        self.state.apply_search()
        self.selected_index = 0
        self._log_debug(f"search query={self.state.query!r} results={len(self.state.search_results)}")
        self._refresh_dishes()

    def _selected_dish(self) -> NormalizedDish | None:
        dishes = self.state.visible_dishes()
        if not dishes:
            return None
        if not (0 <= self.selected_index < len(dishes)):
            return None
        return dishes[self.selected_index]

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        if selected is None:
            start = 0
        else:
            start = max(0, selected - rows // 2)
            start = min(start, total - rows)

        return (start, start + rows)

    def _refresh_all(self) -> None:
        self._refresh_categories()
        self._refresh_search_bar()
        self._refresh_dishes()
        self._refresh_footer()

    def _refresh_categories(self) -> None:
        try:
            widget = self.query_one("#categories", Static)
        except NoMatches:
            return
        if self.state.search_mode:
            widget.update(Text("Search", style="bold"))
            return
        widget.update(
            format_category_strip(self.state.catalog.categories, self.state.active_categories, self.category_index)
        )

    def _refresh_search_bar(self) -> None:
        try:
            bar = self.query_one("#search-bar", Static)
        except NoMatches:
            return
        if not self.state.search_mode:
            status = self.system_status or "Ready"
            bar.update(Text(f"H/L move category, Space toggle, J/K move, +/- add/remove, S search, C cart.\n{status}"))
            return

        text = Text()
        text.append(" Search ", style="bold #ffffff on #2f6db5")
        text.append(f": {self.state.query}|")
        text.append("\nEsc back, Enter add, Ctrl+X remove, Ctrl+O cart", style="dim")
        bar.update(text)

    def _refresh_dishes(self, dishes: list[NormalizedDish] | None = None) -> None:
        try:
            widget = self.query_one("#dishes", Static)
        except NoMatches:
            return
        if dishes is None:
            dishes = self.state.visible_dishes()

        if not dishes:
            widget.update("Type a dish name" if self.state.search_mode else "No dishes")
            self._refresh_detail(None)
            return

        if self.selected_index >= len(dishes):
            self.selected_index = 0

        visible_rows = self._visible_rows(widget)
        start, end = self._window_bounds(len(dishes), visible_rows, self.selected_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            dish = dishes[idx]
            lines.append_text(format_dish_row(dish, self.state.cart.quantity(dish.dish_id), idx == self.selected_index))

        if end < len(dishes):
            lines.append("\n⋮", style="dim")

        widget.update(lines)
        self._refresh_detail(dishes[self.selected_index])

    def _refresh_detail(self, dish: NormalizedDish | None) -> None:
        try:
            widget = self.query_one("#dish-detail", Static)
        except NoMatches:
            return
        if dish is None:
            widget.update("")
            return
        widget.update(Text(f"{dish.category} · {dish_image_source(dish)}"))

    def _refresh_footer(self) -> None:
        try:
            widget = self.query_one("#footer", Static)
        except NoMatches:
            return
        widget.update(format_cart_footer(self.state.total_price(), self.state.search_mode, self.state.sending))
