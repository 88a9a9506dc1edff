"""Cart state and its transitions."""

from __future__ import annotations

from dataclasses import dataclass, replace

from hotel_order.models import PAYMENT_METHODS, CartEntry, MenuItem, OrderDraft


@dataclass(frozen=True)
class CartState:
    """Everything one ordering session holds: entries in first-added order plus the order fields."""

    entries: tuple[CartEntry, ...] = ()
    room: str = ""
    payment_method: str | None = None


@dataclass(frozen=True)
class AddItem:
    item: MenuItem


@dataclass(frozen=True)
class RemoveItem:
    item_id: int


@dataclass(frozen=True)
class SetRoom:
    room: str


@dataclass(frozen=True)
class SetPaymentMethod:
    payment_method: str | None


@dataclass(frozen=True)
class ClearCart:
    pass


CartAction = AddItem | RemoveItem | SetRoom | SetPaymentMethod | ClearCart


def add_item(state: CartState, item: MenuItem) -> CartState:
    """Add one of an item: bump an existing entry in place or append a new one."""
    entries: list[CartEntry] = []
    found = False
    for entry in state.entries:
        if entry.item_id == item.item_id:
            entries.append(replace(entry, quantity=entry.quantity + 1))
            found = True
        else:
            entries.append(entry)
    if not found:
        entries.append(CartEntry(item=item, quantity=1))
    return replace(state, entries=tuple(entries))


def remove_item(state: CartState, item_id: int) -> CartState:
    """Take one of an item out; an entry at quantity 1 is dropped. Unknown ids are ignored."""
    entries: list[CartEntry] = []
    for entry in state.entries:
        if entry.item_id != item_id:
            entries.append(entry)
        elif entry.quantity > 1:
            entries.append(replace(entry, quantity=entry.quantity - 1))
    return replace(state, entries=tuple(entries))


def set_room(state: CartState, room: str) -> CartState:
    return replace(state, room=room)


def set_payment_method(state: CartState, payment_method: str | None) -> CartState:
    """Select a payment method; None or "" clears the selection."""
    if not payment_method:
        return replace(state, payment_method=None)
    if payment_method not in PAYMENT_METHODS:
        raise ValueError(f"Unknown payment method: {payment_method!r}")
    return replace(state, payment_method=payment_method)


def total_price(state: CartState) -> int:
    return sum(entry.line_total for entry in state.entries)


def item_count(state: CartState) -> int:
    return sum(entry.quantity for entry in state.entries)


def quantity_of(state: CartState, item_id: int) -> int:
    for entry in state.entries:
        if entry.item_id == item_id:
            return entry.quantity
    return 0


def can_submit(state: CartState) -> bool:
    """
    Whether the order may be placed.

    Requires a non-empty cart, a room/table identifier that is not blank
    after trimming, and one of the known payment methods.
    """
    return (
        bool(state.entries)
        and bool(state.room.strip())
        and state.payment_method in PAYMENT_METHODS
    )


def build_order_draft(state: CartState) -> OrderDraft:
    """Snapshot the state into an OrderDraft."""
    if not can_submit(state):
        raise ValueError("Cannot build order draft: cart, room and payment method are all required")
    assert state.payment_method is not None
    return OrderDraft(
        entries=state.entries,
        room=state.room.strip(),
        payment_method=state.payment_method,
        total=total_price(state),
    )


def reduce(state: CartState, action: CartAction) -> CartState:
    """Apply one user action and return the resulting state."""
    if isinstance(action, AddItem):
        return add_item(state, action.item)
    if isinstance(action, RemoveItem):
        return remove_item(state, action.item_id)
    if isinstance(action, SetRoom):
        return set_room(state, action.room)
    if isinstance(action, SetPaymentMethod):
        return set_payment_method(state, action.payment_method)
    if isinstance(action, ClearCart):
        return CartState()
    raise TypeError(f"Unsupported cart action: {action!r}")


class CartController:
    """Owns the cart state for one ordering session."""

    def __init__(self, state: CartState | None = None) -> None:
        self.state = state if state is not None else CartState()

    def dispatch(self, action: CartAction) -> CartState:
        self.state = reduce(self.state, action)
        return self.state

    @property
    def entries(self) -> tuple[CartEntry, ...]:
        return self.state.entries

    @property
    def room(self) -> str:
        return self.state.room

    @property
    def payment_method(self) -> str | None:
        return self.state.payment_method

    def add_item(self, item: MenuItem) -> None:
        self.dispatch(AddItem(item))

    def remove_item(self, item_id: int) -> None:
        self.dispatch(RemoveItem(item_id))

    def set_room(self, room: str) -> None:
        self.dispatch(SetRoom(room))

    def set_payment_method(self, payment_method: str | None) -> None:
        self.dispatch(SetPaymentMethod(payment_method))

    def clear(self) -> None:
        self.dispatch(ClearCart())

    def total_price(self) -> int:
        return total_price(self.state)

    def item_count(self) -> int:
        return item_count(self.state)

    def quantity_of(self, item_id: int) -> int:
        return quantity_of(self.state, item_id)

    def can_submit(self) -> bool:
        return can_submit(self.state)

    def build_order_draft(self) -> OrderDraft:
        return build_order_draft(self.state)
