"""Room / table entry modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Input, Static

from hotel_order.constant import ROOM_PLACEHOLDER


class RoomModal(ModalScreen[str | None]):
    """Prompt for the room number or table location the order goes to."""

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
    ]

    CSS = """
    RoomModal {
        align: center middle;
        background: $background 60%;
    }

    #room-dialog {
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #room-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #room-input {
        margin-bottom: 1;
    }

    #room-help {
        color: #dddddd;
    }
    """

    def __init__(self, value: str = "") -> None:
        super().__init__()
        self.initial_value = value

    def compose(self) -> ComposeResult:
        with Container(id="room-dialog"):
            yield Static("Room Number / Table Location", id="room-title")
            yield Input(value=self.initial_value, placeholder=ROOM_PLACEHOLDER, id="room-input")
            yield Static("Enter confirm. Esc cancel.", id="room-help")

    def on_mount(self) -> None:
        self.query_one("#room-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.dismiss(event.value)

    def action_cancel(self) -> None:
        self.dismiss(None)
