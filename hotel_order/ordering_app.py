"""Main Textual app class."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.message import Message
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Header, Static

from hotel_order.cart import CartController
from hotel_order.config import debug_log_path
from hotel_order.constant import RESTAURANT_NAME, RESTAURANT_TAGLINE
from hotel_order.data import MENU, payment_label
from hotel_order.models import MenuItem, OrderDraft
from hotel_order.payment_modal import PaymentModal
from hotel_order.pricing import format_price
from hotel_order.rendering import (
    format_cart,
    format_count_badge,
    format_menu_item,
    format_order_details,
)
from hotel_order.room_modal import RoomModal

MENU_PANE = "menu"
CART_PANE = "cart"


class HotelOrderingApp(App):
    """A Textual app for browsing the restaurant menu and building a room-service order."""

    TITLE = RESTAURANT_NAME
    SUB_TITLE = RESTAURANT_TAGLINE

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #menu-pane {
        width: 2fr;
        border: round $primary;
        padding: 1;
    }

    #side-pane {
        width: 1fr;
    }

    #cart-pane {
        height: 1fr;
        border: round $secondary;
        padding: 1;
    }

    #details-pane {
        height: auto;
        border: round $secondary;
        padding: 1;
    }

    #menu-list {
        height: 1fr;
        padding: 0 1;
    }

    #cart-list {
        height: 1fr;
        padding: 0 1;
    }

    #status-bar {
        height: 2;
        padding: 0 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    focused_pane = reactive(MENU_PANE)
    menu_index = reactive(0)
    cart_index = reactive(None)

    BINDINGS = [
        ("up,k", "move_cursor(-1)", "Previous"),
        ("down,j", "move_cursor(1)", "Next"),
        Binding("tab", "toggle_pane", "Menu / Cart", priority=True),
        ("enter,a,plus", "add_selected", "Add"),
        ("minus,x,d", "remove_selected", "Remove"),
        ("r", "edit_room", "Room / Table"),
        ("p", "choose_payment", "Payment"),
        Binding("ctrl+s", "place_order", "Place Order", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    class OrderPlaced(Message):
        """Posted with the order draft when Place Order is accepted."""

        def __init__(self, draft: OrderDraft) -> None:
            super().__init__()
            self.draft = draft

    def __init__(self, menu: list[MenuItem] | None = None) -> None:
        super().__init__()
        self.menu: list[MenuItem] = list(MENU if menu is None else menu)
        self.cart = CartController()
        self.system_status = ""
        self.last_draft: OrderDraft | None = None
        self._debug_log_path = Path(debug_log_path())
        self._log_debug("app_init")

    def _log_debug(self, message: str) -> None:
        try:
            ts = datetime.now(timezone.utc).isoformat()
            self._debug_log_path.parent.mkdir(parents=True, exist_ok=True)
            with self._debug_log_path.open("a", encoding="utf-8") as fh:
                fh.write(f"{ts} {message}\n")
        except OSError:
            # Logging must never interfere with app flow.
            return

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="menu-pane"):
                yield Static("Our Menu", classes="pane-title")
                yield Static(id="menu-list")
            with Vertical(id="side-pane"):
                with Vertical(id="cart-pane"):
                    yield Static(id="cart-title", classes="pane-title")
                    yield Static(id="cart-list")
                with Vertical(id="details-pane"):
                    yield Static("Order Details", classes="pane-title")
                    yield Static(id="details")
        yield Static(id="status-bar")

    def on_mount(self) -> None:
        self._log_debug(f"on_mount menu_items={len(self.menu)}")
        self._refresh_all()

    def _modal_open(self) -> bool:
        return isinstance(self.screen, ModalScreen)

    def action_move_cursor(self, delta: int) -> None:
        if self._modal_open():
            return

        if self.focused_pane == MENU_PANE:
            if not self.menu:
                return
            self.menu_index = (self.menu_index + delta) % len(self.menu)
            self._refresh_menu()
            return

        entries = self.cart.entries
        if not entries:
            return
        if self.cart_index is None:
            self.cart_index = 0 if delta > 0 else len(entries) - 1
        else:
            self.cart_index = (self.cart_index + delta) % len(entries)
        self._refresh_cart()

    def action_toggle_pane(self) -> None:
        if self._modal_open():
            return

        if self.focused_pane == MENU_PANE and self.cart.entries:
            self.focused_pane = CART_PANE
            if self.cart_index is None:
                self.cart_index = 0
        else:
            self.focused_pane = MENU_PANE
        self._refresh_all()

    def action_add_selected(self) -> None:
        if self._modal_open():
            return

        item = self._item_under_cursor()
        if item is None:
            return
        self.cart.add_item(item)
        self._log_debug(f"add_item item_id={item.item_id} count={self.cart.item_count()}")
        self.system_status = ""
        self._refresh_all()

    def action_remove_selected(self) -> None:
        if self._modal_open():
            return

        item = self._item_under_cursor()
        if item is None:
            return
        self.cart.remove_item(item.item_id)
        self._log_debug(f"remove_item item_id={item.item_id} count={self.cart.item_count()}")
        self.system_status = ""
        self._refresh_all()

    def action_edit_room(self) -> None:
        if self._modal_open():
            return
        self.push_screen(RoomModal(self.cart.room), self._on_room_chosen)

    def action_choose_payment(self) -> None:
        if self._modal_open():
            return
        self.push_screen(PaymentModal(self.cart.payment_method), self._on_payment_chosen)

    def action_place_order(self) -> None:
        self._log_debug(
            f"place_order_enter rows={len(self.cart.entries)} room={self.cart.room!r} "
            f"payment={self.cart.payment_method!r} screen={type(self.screen).__name__}"
        )
        if self._modal_open():
            self._log_debug("place_order_blocked reason=modal")
            return
        if not self.cart.can_submit():
            self.system_status = self._blocked_reason()
            self._refresh_status()
            self._log_debug(f"place_order_blocked reason={self.system_status!r}")
            return

        draft = self.cart.build_order_draft()
        self.last_draft = draft
        self.post_message(self.OrderPlaced(draft))
        self.system_status = (
            f"Order ready for {draft.room}: {format_price(draft.total)} "
            f"via {payment_label(draft.payment_method)}"
        )
        self._refresh_status()
        self._log_debug(f"place_order_drafted rows={len(draft.entries)} total={draft.total}")

    def _on_room_chosen(self, room: str | None) -> None:
        if room is None:
            return
        self.cart.set_room(room)
        self._log_debug(f"set_room room={room!r}")
        self.system_status = ""
        self._refresh_all()

    def _on_payment_chosen(self, method: str | None) -> None:
        if method is None:
            return
        self.cart.set_payment_method(method)
        self._log_debug(f"set_payment_method method={method!r}")
        self.system_status = ""
        self._refresh_all()

    def _blocked_reason(self) -> str:
        if not self.cart.entries:
            return "Add something to your order first"
        if not self.cart.room.strip():
            return "Enter a room number or table location (R)"
        return "Select a payment method (P)"

    def _item_under_cursor(self) -> MenuItem | None:
        if self.focused_pane == MENU_PANE:
            if not (0 <= self.menu_index < len(self.menu)):
                return None
            return self.menu[self.menu_index]

        entries = self.cart.entries
        if self.cart_index is None or not (0 <= self.cart_index < len(entries)):
            return None
        return entries[self.cart_index].item

    def _refresh_all(self) -> None:
        # Cart first: it may hand focus back to the menu pane.
        self._refresh_cart()
        self._refresh_menu()
        self._refresh_details()
        self._refresh_status()

    def _refresh_menu(self) -> None:
        try:
            menu_widget = self.query_one("#menu-list", Static)
        except NoMatches:
            return

        if not self.menu:
            menu_widget.update("(menu is empty)")
            return

        lines = Text()
        for idx, item in enumerate(self.menu):
            if idx > 0:
                lines.append("\n\n")
            selected = self.focused_pane == MENU_PANE and idx == self.menu_index
            lines.append_text(format_menu_item(item, self.cart.quantity_of(item.item_id), selected))
        menu_widget.update(lines)

    def _refresh_cart(self) -> None:
        try:
            title_widget = self.query_one("#cart-title", Static)
            cart_widget = self.query_one("#cart-list", Static)
        except NoMatches:
            return

        entries = self.cart.entries
        if not entries:
            self.cart_index = None
            if self.focused_pane == CART_PANE:
                self.focused_pane = MENU_PANE
        elif self.cart_index is not None and self.cart_index >= len(entries):
            self.cart_index = len(entries) - 1

        title = Text("Your Order ")
        title.append_text(format_count_badge(self.cart.item_count()))
        title_widget.update(title)

        selected = self.cart_index if self.focused_pane == CART_PANE else None
        cart_widget.update(format_cart(entries, self.cart.total_price(), selected))

    def _refresh_details(self) -> None:
        try:
            details_widget = self.query_one("#details", Static)
        except NoMatches:
            return
        details_widget.update(format_order_details(self.cart.room, self.cart.payment_method, self.cart.can_submit()))

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return
        hint = "↑/↓ move, Enter/+ add, - remove, Tab menu/cart, R room, P payment, Ctrl+S place order"
        status = self.system_status or "Ready"
        bar.update(Text(f"{hint}\n{status}"))
