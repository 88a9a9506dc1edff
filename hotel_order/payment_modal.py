"""Payment method picker modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from hotel_order.data import payment_label
from hotel_order.models import PAYMENT_METHODS
from hotel_order.rendering import pointer


class PaymentModal(ModalScreen[str | None]):
    """Centered modal listing the accepted payment methods."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("j", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("enter", "select_current", "Select"),
    ]

    CSS = """
    PaymentModal {
        align: center middle;
        background: $background 60%;
    }

    #payment-dialog {
        width: 48;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #payment-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #payment-body {
        margin-bottom: 1;
        color: white;
    }

    #payment-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    cursor_index = reactive(0)

    def __init__(self, current: str | None = None) -> None:
        super().__init__()
        self.current = current
        self.methods = list(PAYMENT_METHODS)
        if current in self.methods:
            self.set_reactive(PaymentModal.cursor_index, self.methods.index(current))

    def compose(self) -> ComposeResult:
        with Container(id="payment-dialog"):
            yield Static("Payment Method", id="payment-title")
            yield Static(id="payment-body")
            yield Static("J/K/↑/↓ move, Enter select, Esc/q close", id="payment-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def action_close(self) -> None:
        self.dismiss(None)

    def action_move_cursor(self, delta: int) -> None:
        self.cursor_index = (self.cursor_index + delta) % len(self.methods)
        self._refresh_content()

    def action_select_current(self) -> None:
        self.dismiss(self.methods[self.cursor_index])

    def _refresh_content(self) -> None:
        body = self.query_one("#payment-body", Static)
        content = Text(style="white")
        for idx, method in enumerate(self.methods):
            if idx > 0:
                content.append("\n")
            is_current = method == self.current
            checked = "(•)" if is_current else "( )"
            content.append(
                f"{pointer(idx == self.cursor_index)}{checked} {payment_label(method)}",
                style="bold white" if is_current else "white",
            )
        body.update(content)
