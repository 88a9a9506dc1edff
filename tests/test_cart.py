"""Cart state transitions and derived values."""

from __future__ import annotations

import random

import pytest

from hotel_order.cart import (
    AddItem,
    CartController,
    CartState,
    ClearCart,
    RemoveItem,
    SetPaymentMethod,
    SetRoom,
    add_item,
    reduce,
    remove_item,
)
from hotel_order.models import MenuItem, OrderDraft

NASI = MenuItem(item_id=1, name="Nasi Goreng Vasa", description="Fried rice", price=45000)
MIE = MenuItem(item_id=2, name="Mie Godog Jawa", description="Noodle soup", price=40000)
TEH = MenuItem(item_id=3, name="Es Teh", description="Iced tea", price=0)


def _snapshot(cart: CartController) -> list[tuple[int, int]]:
    return [(entry.item_id, entry.quantity) for entry in cart.entries]


def test_empty_cart_has_zero_total_and_count():
    cart = CartController()
    assert cart.entries == ()
    assert cart.total_price() == 0
    assert cart.item_count() == 0


def test_walkthrough_two_items():
    cart = CartController()

    cart.add_item(NASI)
    assert _snapshot(cart) == [(1, 1)]
    assert cart.total_price() == 45000
    assert cart.item_count() == 1

    cart.add_item(NASI)
    assert _snapshot(cart) == [(1, 2)]
    assert cart.total_price() == 90000

    cart.add_item(MIE)
    assert _snapshot(cart) == [(1, 2), (2, 1)]
    assert cart.total_price() == 130000
    assert cart.item_count() == 3

    cart.remove_item(1)
    assert _snapshot(cart) == [(1, 1), (2, 1)]
    assert cart.total_price() == 85000


def test_adding_same_item_keeps_single_entry():
    cart = CartController()
    for _ in range(7):
        cart.add_item(MIE)
    assert _snapshot(cart) == [(2, 7)]
    assert cart.quantity_of(2) == 7
    assert cart.quantity_of(1) == 0


def test_remove_last_unit_drops_entry_without_reordering():
    cart = CartController()
    cart.add_item(NASI)
    cart.add_item(MIE)
    cart.add_item(TEH)

    cart.remove_item(2)
    assert _snapshot(cart) == [(1, 1), (3, 1)]


def test_decrement_keeps_position():
    cart = CartController()
    cart.add_item(NASI)
    cart.add_item(MIE)
    cart.add_item(NASI)
    cart.add_item(TEH)

    cart.remove_item(1)
    assert _snapshot(cart) == [(1, 1), (2, 1), (3, 1)]


def test_remove_from_empty_cart_is_noop():
    cart = CartController()
    cart.remove_item(1)
    assert cart.entries == ()
    assert cart.item_count() == 0


def test_remove_unknown_item_is_noop():
    cart = CartController()
    cart.add_item(NASI)
    cart.remove_item(99)
    assert _snapshot(cart) == [(1, 1)]


def test_readding_removed_item_appends_at_end():
    cart = CartController()
    cart.add_item(NASI)
    cart.add_item(MIE)
    cart.remove_item(1)
    cart.add_item(NASI)
    assert _snapshot(cart) == [(2, 1), (1, 1)]


def test_total_changes_by_exactly_one_unit_price():
    cart = CartController()
    cart.add_item(MIE)
    before = cart.total_price()
    cart.add_item(NASI)
    assert cart.total_price() - before == NASI.price
    cart.remove_item(NASI.item_id)
    assert cart.total_price() == before


def test_random_sequences_keep_count_consistent():
    rng = random.Random(20261019)
    items = [NASI, MIE, TEH]
    cart = CartController()
    expected: dict[int, int] = {}

    for _ in range(500):
        item = rng.choice(items)
        if rng.random() < 0.55:
            cart.add_item(item)
            expected[item.item_id] = expected.get(item.item_id, 0) + 1
        else:
            cart.remove_item(item.item_id)
            if expected.get(item.item_id, 0) > 1:
                expected[item.item_id] -= 1
            else:
                expected.pop(item.item_id, None)

        assert cart.item_count() == sum(entry.quantity for entry in cart.entries)
        assert cart.item_count() >= 0
        assert all(entry.quantity >= 1 for entry in cart.entries)
        assert len({entry.item_id for entry in cart.entries}) == len(cart.entries)
        assert {entry.item_id: entry.quantity for entry in cart.entries} == expected
        assert cart.total_price() == sum(
            item.price * expected.get(item.item_id, 0) for item in items
        )


def test_transitions_do_not_mutate_previous_state():
    start = CartState()
    one = add_item(start, NASI)
    two = add_item(one, NASI)
    back = remove_item(two, NASI.item_id)

    assert start.entries == ()
    assert one.entries[0].quantity == 1
    assert two.entries[0].quantity == 2
    assert back == one


def test_reduce_applies_each_action():
    state = CartState()
    state = reduce(state, AddItem(NASI))
    state = reduce(state, AddItem(MIE))
    state = reduce(state, RemoveItem(MIE.item_id))
    state = reduce(state, SetRoom("Table 12"))
    state = reduce(state, SetPaymentMethod("charge-to-room"))

    assert [(e.item_id, e.quantity) for e in state.entries] == [(1, 1)]
    assert state.room == "Table 12"
    assert state.payment_method == "charge-to-room"

    assert reduce(state, ClearCart()) == CartState()


def test_reduce_rejects_unknown_action():
    with pytest.raises(TypeError):
        reduce(CartState(), "add")  # type: ignore[arg-type]


def test_can_submit_false_for_empty_cart_regardless_of_fields():
    cart = CartController()
    cart.set_room("Room 205")
    cart.set_payment_method("qris")
    assert cart.can_submit() is False


@pytest.mark.parametrize(
    "room, payment",
    [
        ("", "qris"),
        ("Room 205", None),
        ("", None),
        ("   ", "charge-to-room"),
    ],
)
def test_can_submit_false_when_a_field_is_missing(room, payment):
    cart = CartController()
    cart.add_item(NASI)
    cart.set_room(room)
    cart.set_payment_method(payment)
    assert cart.can_submit() is False


def test_can_submit_true_when_everything_is_set():
    cart = CartController()
    cart.add_item(NASI)
    cart.add_item(MIE)
    cart.set_room("Room 205")
    cart.set_payment_method("qris")
    assert cart.can_submit() is True


def test_clearing_payment_method():
    cart = CartController()
    cart.set_payment_method("qris")
    cart.set_payment_method("")
    assert cart.payment_method is None


def test_unknown_payment_method_is_rejected():
    cart = CartController()
    with pytest.raises(ValueError):
        cart.set_payment_method("cash")
    assert cart.payment_method is None


def test_build_order_draft_snapshots_state():
    cart = CartController()
    cart.add_item(NASI)
    cart.add_item(NASI)
    cart.add_item(MIE)
    cart.set_room("  Room 205 ")
    cart.set_payment_method("qris")

    draft = cart.build_order_draft()
    assert isinstance(draft, OrderDraft)
    assert [(e.item_id, e.quantity) for e in draft.entries] == [(1, 2), (2, 1)]
    assert draft.room == "Room 205"
    assert draft.payment_method == "qris"
    assert draft.total == 130000

    cart.add_item(MIE)
    assert draft.total == 130000
    assert len(draft.entries) == 2


def test_build_order_draft_refuses_unsubmittable_cart():
    cart = CartController()
    cart.set_room("Room 205")
    cart.set_payment_method("qris")
    with pytest.raises(ValueError):
        cart.build_order_draft()


def test_clear_resets_everything():
    cart = CartController()
    cart.add_item(NASI)
    cart.set_room("Room 205")
    cart.set_payment_method("qris")
    cart.clear()
    assert cart.state == CartState()


def test_line_total():
    cart = CartController()
    cart.add_item(MIE)
    cart.add_item(MIE)
    assert cart.entries[0].line_total == 80000
