"""Rendering helpers for menu, cart and order details."""

from __future__ import annotations

from rich.text import Text

from hotel_order.constant import EMPTY_CART_MESSAGE
from hotel_order.data import payment_label
from hotel_order.models import CartEntry, MenuItem
from hotel_order.pricing import format_price

PRICE_BADGE_STYLE = "bold #1f1f1f on #e0e0e0"
COUNT_BADGE_STYLE = "bold #ffffff on #1f1f1f"
SUBMIT_READY_STYLE = "bold #ffffff on #2f8f4e"
SUBMIT_BLOCKED_STYLE = "#8a8a8a on #2b2b2b"


def pointer(selected: bool) -> str:
    return "➤ " if selected else "  "


def format_menu_item(item: MenuItem, in_cart: int = 0, selected: bool = False) -> Text:
    """Render a menu row: name with a price badge, then the description."""
    text = Text()
    text.append(pointer(selected))
    text.append(item.name, style="bold")
    text.append(" ")
    text.append(f" {format_price(item.price)} ", style=PRICE_BADGE_STYLE)
    if in_cart:
        text.append(f"  ×{in_cart} in cart", style="dim")
    text.append(f"\n    {item.description}", style="dim")
    return text


def format_count_badge(count: int) -> Text:
    """Render the cart count badge; empty when nothing is in the cart."""
    text = Text()
    if count > 0:
        text.append(f" {count} ", style=COUNT_BADGE_STYLE)
    return text


def format_cart_entry(entry: CartEntry, selected: bool = False) -> Text:
    text = Text()
    text.append(pointer(selected))
    text.append(entry.item.name, style="bold")
    text.append(f"  − {entry.quantity} +")
    text.append(f"\n    {format_price(entry.item.price)} each", style="dim")
    return text


def format_cart(entries: tuple[CartEntry, ...], total: int, selected_index: int | None = None) -> Text:
    """Render all cart lines followed by the total, or the empty-cart message."""
    if not entries:
        return Text(EMPTY_CART_MESSAGE, style="dim")

    text = Text()
    for idx, entry in enumerate(entries):
        if idx > 0:
            text.append("\n")
        text.append_text(format_cart_entry(entry, selected=idx == selected_index))
    text.append("\n" + "─" * 24 + "\n", style="dim")
    text.append_text(format_total(total))
    return text


def format_total(total: int) -> Text:
    text = Text(style="bold")
    text.append("Total: ")
    text.append(format_price(total))
    return text


def format_order_details(room: str, payment_method: str | None, can_submit: bool) -> Text:
    """Render room, payment method and the Place Order control state."""
    text = Text()
    text.append("Room Number / Table Location (R)\n", style="bold")
    if room:
        text.append(f"  {room}\n")
    else:
        text.append("  (not set)\n", style="dim")
    text.append("Payment Method (P)\n", style="bold")
    label = payment_label(payment_method)
    if label:
        text.append(f"  {label}\n")
    else:
        text.append("  Select payment method\n", style="dim")
    text.append("\n")
    style = SUBMIT_READY_STYLE if can_submit else SUBMIT_BLOCKED_STYLE
    text.append("  Place Order (Ctrl+S)  ", style=style)
    return text
