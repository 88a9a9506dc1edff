"""Editable static menu and label configuration."""

from __future__ import annotations

RESTAURANT_NAME = "Hotel Vasa Restaurant"
RESTAURANT_TAGLINE = "Order delicious food to your room"

# Prices are whole Rupiah.
CURRENCY_SYMBOL = "Rp"
CURRENCY_SYMBOL_SEPARATOR = "\u00a0"  # no-break space, as the id-ID locale renders it
THOUSANDS_SEPARATOR = "."

PLACEHOLDER_IMAGE = "/placeholder.svg?height=200&width=300"

# Canonical catalog values consumed by hotel_order.data (which wraps these into MenuItem instances).
MENU_ITEMS: list[dict[str, str | int]] = [
    {
        "item_id": 1,
        "name": "Nasi Goreng Vasa",
        "description": "Special fried rice with chicken and egg topping",
        "price": 45000,
        "image": PLACEHOLDER_IMAGE,
    },
    {
        "item_id": 2,
        "name": "Mie Godog Jawa",
        "description": "Javanese-style noodle soup with egg and fresh vegetables",
        "price": 40000,
        "image": PLACEHOLDER_IMAGE,
    },
]

PAYMENT_METHOD_LABELS: dict[str, str] = {
    "qris": "QRIS",
    "charge-to-room": "Charge to Room",
}

ROOM_PLACEHOLDER = "e.g., Room 205 or Table 12"
EMPTY_CART_MESSAGE = "Your cart is empty"
