"""Order failure modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static


class RetryModal(ModalScreen[bool]):
    """Report a failed order submission and offer to send it again."""

    CSS = """
    RetryModal {
        align: center middle;
        background: $background 60%;
    }

    #retry-dialog {
        width: 56;
        height: auto;
        border: round $error;
        background: $panel;
        padding: 1 2;
    }

    #retry-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #retry-error {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    #retry-help {
        color: #dddddd;
    }
    """

    def __init__(self, message: str) -> None:
        super().__init__()
        self.message = message

    def compose(self) -> ComposeResult:
        with Container(id="retry-dialog"):
            yield Static("Order not sent", id="retry-title")
            yield Static(Text(self.message), id="retry-error")
            yield Static("R/Enter retry. Esc/q/Ctrl+C cancel.", id="retry-help")

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "q", "ctrl+c"}:
            self.dismiss(False)
            event.stop()
            return

        if event.key in {"enter", "r"}:
            self.dismiss(True)
            event.stop()
