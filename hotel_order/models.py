"""Domain models for hotel-order."""

from __future__ import annotations

from dataclasses import dataclass

PAYMENT_QRIS = "qris"
PAYMENT_CHARGE_TO_ROOM = "charge-to-room"
PAYMENT_METHODS: tuple[str, ...] = (PAYMENT_QRIS, PAYMENT_CHARGE_TO_ROOM)


@dataclass(frozen=True)
class MenuItem:
    """An orderable catalog item. Price is in whole Rupiah."""

    item_id: int
    name: str
    description: str
    price: int
    image: str = ""


@dataclass(frozen=True)
class CartEntry:
    """One menu item in the cart with its quantity (always >= 1)."""

    item: MenuItem
    quantity: int = 1

    @property
    def item_id(self) -> int:
        return self.item.item_id

    @property
    def line_total(self) -> int:
        return self.item.price * self.quantity


@dataclass(frozen=True)
class OrderDraft:
    """Snapshot of a cart plus the fields needed to place it."""

    entries: tuple[CartEntry, ...]
    room: str
    payment_method: str
    total: int
