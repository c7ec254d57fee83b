from datetime import date
from decimal import Decimal
from types import SimpleNamespace

from statement_tracker.core.aggregator import StatementTotals, compute, statements
from statement_tracker.core.models import Transaction


def _tx(category, amount):
    return Transaction.create(date(2025, 5, 1), f"{category} entry", category, amount)


def test_compute_empty_is_all_zero():
    totals = compute([])
    assert totals == StatementTotals()
    assert all(value == 0 for value in vars(totals).values())


def test_net_income_from_revenue_and_expense():
    txs = [_tx("revenue", 700), _tx("revenue", 300), _tx("expense", 150), _tx("expense", 250)]
    totals = compute(txs)
    assert totals.revenue == Decimal("1000")
    assert totals.expense == Decimal("400")
    assert totals.net_income == Decimal("600")


def test_every_category_has_its_bucket():
    txs = [
        _tx("asset", "1"),
        _tx("liability", "2"),
        _tx("equity", "3"),
        _tx("cash-inflow", "40"),
        _tx("cash-outflow", "55.5"),
    ]
    totals = compute(txs)
    assert totals.assets == Decimal("1")
    assert totals.liabilities == Decimal("2")
    assert totals.equity == Decimal("3")
    assert totals.cash_inflow == Decimal("40")
    assert totals.cash_outflow == Decimal("55.5")
    assert totals.net_cash_flow == Decimal("-15.5")
    assert totals.revenue == totals.expense == totals.net_income == 0


def test_compute_is_order_independent_but_amount_sensitive():
    txs = [_tx("revenue", "10.10"), _tx("expense", "3.03"), _tx("revenue", "20.20")]
    assert compute(txs) == compute(list(reversed(txs)))
    assert compute(txs) != compute([_tx("revenue", "10.11"), txs[1], txs[2]])


def test_accumulation_keeps_full_precision():
    txs = [_tx("revenue", "0.1")] * 3 + [_tx("expense", "0.004")] * 3
    totals = compute(txs)
    assert totals.revenue == Decimal("0.3")
    assert totals.expense == Decimal("0.012")
    assert totals.net_income == Decimal("0.288")


def test_unknown_category_is_ignored():
    stray = SimpleNamespace(category="misc", amount=Decimal("99"))
    totals = compute([stray, _tx("revenue", 5)])
    assert totals.revenue == Decimal("5")
    assert totals.net_income == Decimal("5")


def test_statement_views_order_and_labels():
    totals = compute([_tx("revenue", 10), _tx("cash-outflow", 4)])
    views = statements(totals)
    assert [s.title for s in views] == ["Income Statement", "Balance Sheet", "Cash Flow Statement"]
    assert [label for label, _ in views[0].rows] == ["Revenue", "Expenses", "Net Income"]
    assert [label for label, _ in views[1].rows] == ["Assets", "Liabilities", "Equity"]
    assert views[2].rows == [
        ("Cash Inflows", Decimal("0")),
        ("Cash Outflows", Decimal("4")),
        ("Net Cash Flow", Decimal("-4")),
    ]
