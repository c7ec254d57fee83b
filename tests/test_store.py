from datetime import date
from decimal import Decimal

import pytest

from statement_tracker.core.models import Category, Transaction, ValidationError
from statement_tracker.core.store import TransactionStore


def _tx(description, category="expense", amount="10"):
    return Transaction.create(date(2025, 1, 1), description, category, amount)


def test_append_preserves_insertion_order():
    store = TransactionStore()
    for name in ("a", "b", "c"):
        store.append(_tx(name))
    assert [tx.description for tx in store.all()] == ["a", "b", "c"]
    assert len(store) == 3


def test_append_accepts_mapping():
    store = TransactionStore()
    tx = store.append({"date": "2025-06-30", "description": "Sale", "category": "revenue", "amount": 99})
    assert store.all() == (tx,)


def test_append_invalid_record_leaves_store_unchanged():
    store = TransactionStore([_tx("keep")])
    with pytest.raises(ValidationError):
        store.append({"date": "", "description": "x", "category": "revenue", "amount": 10})
    assert [tx.description for tx in store.all()] == ["keep"]


def test_remove_at_keeps_relative_order():
    store = TransactionStore([_tx(name) for name in "abcde"])
    removed = store.remove_at(1)
    assert removed.description == "b"
    store.remove_at(2)
    assert [tx.description for tx in store.all()] == ["a", "c", "e"]


@pytest.mark.parametrize("index", [3, -1, 100])
def test_remove_at_out_of_range(index):
    store = TransactionStore([_tx(name) for name in "abc"])
    with pytest.raises(IndexError):
        store.remove_at(index)
    assert [tx.description for tx in store.all()] == ["a", "b", "c"]


def test_remove_from_empty_store():
    store = TransactionStore()
    with pytest.raises(IndexError):
        store.remove_at(0)
    assert not store


def test_length_tracks_appends_minus_removals():
    store = TransactionStore()
    expected = []
    operations = ["add", "add", "remove0", "add", "add", "remove9", "remove1", "add"]
    for step, op in enumerate(operations):
        if op == "add":
            store.append(_tx(str(step)))
            expected.append(str(step))
        else:
            idx = int(op[-1])
            try:
                store.remove_at(idx)
            except IndexError:
                continue
            expected.pop(idx)
    assert len(store) == len(expected)
    assert [tx.description for tx in store.all()] == expected


def test_all_is_a_snapshot():
    store = TransactionStore([_tx("a")])
    snapshot = store.all()
    store.append(_tx("b"))
    assert len(snapshot) == 1
    assert isinstance(snapshot, tuple)


def test_extend_is_all_or_nothing():
    store = TransactionStore()
    records = [
        {"date": "2025-01-01", "description": "ok", "category": "asset", "amount": 5},
        {"date": "2025-01-02", "description": "bad", "category": "asset", "amount": 0},
    ]
    with pytest.raises(ValidationError):
        store.extend(records)
    assert len(store) == 0


@pytest.mark.parametrize(
    "fields, bad_field",
    [
        (("", "Sale", Category.REVENUE, Decimal("5")), "date"),
        ((date(2025, 1, 1), "", Category.REVENUE, Decimal("5")), "description"),
        ((date(2025, 1, 1), "Sale", "bogus", Decimal("5")), "category"),
        ((date(2025, 1, 1), "Sale", Category.REVENUE, Decimal("-5")), "amount"),
    ],
)
def test_append_revalidates_directly_built_transactions(fields, bad_field):
    store = TransactionStore([_tx("keep")])
    with pytest.raises(ValidationError) as info:
        store.append(Transaction(*fields))
    assert info.value.field == bad_field
    assert [tx.description for tx in store.all()] == ["keep"]


def test_constructor_rejects_directly_built_invalid_transaction():
    bad = Transaction(date="", description="", category="bogus", amount=Decimal("-5"))
    with pytest.raises(ValidationError):
        TransactionStore([_tx("ok"), bad])


def test_append_rejects_oversized_amount():
    store = TransactionStore()
    with pytest.raises(ValidationError) as info:
        store.append({"date": "2025-01-01", "description": "Huge", "category": "asset", "amount": "1e30"})
    assert info.value.field == "amount"
    assert len(store) == 0
