from statement_tracker.core.models import Category, Transaction, ValidationError
from statement_tracker.core.store import TransactionStore
from statement_tracker.core.aggregator import StatementTotals, compute, statements

__all__ = [
    "Category",
    "StatementTotals",
    "Transaction",
    "TransactionStore",
    "ValidationError",
    "compute",
    "statements",
]
