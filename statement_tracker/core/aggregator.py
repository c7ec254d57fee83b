# statement_tracker/core/aggregator.py

"""Fold a transaction sequence into the totals behind the three statements.

Totals are accumulated as full-precision ``Decimal`` values; rounding to
two places happens only when a figure is formatted for display.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, NamedTuple, Tuple

from statement_tracker.core.models import Category

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

_BUCKETS = {
    Category.REVENUE: "revenue",
    Category.EXPENSE: "expense",
    Category.ASSET: "assets",
    Category.LIABILITY: "liabilities",
    Category.EQUITY: "equity",
    Category.CASH_INFLOW: "cash_inflow",
    Category.CASH_OUTFLOW: "cash_outflow",
}


@dataclass(frozen=True)
class StatementTotals:
    revenue: Decimal = ZERO
    expense: Decimal = ZERO
    net_income: Decimal = ZERO
    assets: Decimal = ZERO
    liabilities: Decimal = ZERO
    equity: Decimal = ZERO
    cash_inflow: Decimal = ZERO
    cash_outflow: Decimal = ZERO
    net_cash_flow: Decimal = ZERO


class Statement(NamedTuple):
    title: str
    rows: List[Tuple[str, Decimal]]


def compute(transactions: Iterable) -> StatementTotals:
    sums = {name: ZERO for name in _BUCKETS.values()}
    for tx in transactions:
        bucket = _BUCKETS.get(tx.category)
        if bucket is None:
            # unreachable through TransactionStore, which enforces Category
            logger.warning("Ignoring transaction with unknown category %r", tx.category)
            continue
        sums[bucket] += Decimal(tx.amount)

    return StatementTotals(
        net_income=sums["revenue"] - sums["expense"],
        net_cash_flow=sums["cash_inflow"] - sums["cash_outflow"],
        **sums,
    )


def income_statement(totals: StatementTotals) -> List[Tuple[str, Decimal]]:
    return [
        ("Revenue", totals.revenue),
        ("Expenses", totals.expense),
        ("Net Income", totals.net_income),
    ]


def balance_sheet(totals: StatementTotals) -> List[Tuple[str, Decimal]]:
    return [
        ("Assets", totals.assets),
        ("Liabilities", totals.liabilities),
        ("Equity", totals.equity),
    ]


def cash_flow_statement(totals: StatementTotals) -> List[Tuple[str, Decimal]]:
    return [
        ("Cash Inflows", totals.cash_inflow),
        ("Cash Outflows", totals.cash_outflow),
        ("Net Cash Flow", totals.net_cash_flow),
    ]


def statements(totals: StatementTotals) -> List[Statement]:
    """The three statements in display and export order."""
    return [
        Statement("Income Statement", income_statement(totals)),
        Statement("Balance Sheet", balance_sheet(totals)),
        Statement("Cash Flow Statement", cash_flow_statement(totals)),
    ]
