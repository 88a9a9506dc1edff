"""Static menu catalog."""

from __future__ import annotations

from typing import Iterable, Mapping

from hotel_order.constant import MENU_ITEMS, PAYMENT_METHOD_LABELS
from hotel_order.models import MenuItem


def build_catalog(raw_items: Iterable[Mapping[str, str | int]]) -> list[MenuItem]:
    """Wrap raw catalog dicts into MenuItem records, rejecting duplicate ids and negative prices."""
    catalog: list[MenuItem] = []
    seen: set[int] = set()
    for raw in raw_items:
        item = MenuItem(
            item_id=int(raw["item_id"]),
            name=str(raw["name"]),
            description=str(raw.get("description", "")),
            price=int(raw["price"]),
            image=str(raw.get("image", "")),
        )
        if item.item_id in seen:
            raise ValueError(f"Duplicate menu item id: {item.item_id}")
        if item.price < 0:
            raise ValueError(f"Menu item {item.item_id} has a negative price")
        seen.add(item.item_id)
        catalog.append(item)
    return catalog


MENU: list[MenuItem] = build_catalog(MENU_ITEMS)

MENU_BY_ID: dict[int, MenuItem] = {item.item_id: item for item in MENU}


def menu_item_by_id(item_id: int) -> MenuItem | None:
    """Get a catalog item by id."""
    return MENU_BY_ID.get(item_id)


def payment_label(method: str | None) -> str:
    """Get the display label for a payment method id."""
    if not method:
        return ""
    return PAYMENT_METHOD_LABELS.get(method, method)
