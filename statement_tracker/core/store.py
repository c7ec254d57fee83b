# statement_tracker/core/store.py
from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Mapping, Tuple, Union

from statement_tracker.core.models import Transaction, ValidationError

logger = logging.getLogger(__name__)

Record = Union[Transaction, Mapping[str, object]]


def _to_transaction(record: Record) -> Transaction:
    if isinstance(record, Transaction):
        # instances built directly bypass create(), so check them again
        return Transaction.create(record.date, record.description, record.category, record.amount)
    if isinstance(record, Mapping):
        return Transaction.from_mapping(record)
    raise ValidationError(f"Cannot build a transaction from {type(record).__name__}")


class TransactionStore:
    """Ordered, in-memory list of transactions for one session.

    The store is the single source of truth: tables, statements and
    exports are always recomputed from :meth:`all` and never hold their
    own mutable copies.
    """

    def __init__(self, transactions: Iterable[Record] = ()):
        self._transactions: List[Transaction] = []
        self.extend(transactions)

    def append(self, record: Record) -> Transaction:
        try:
            tx = _to_transaction(record)
        except ValidationError as exc:
            logger.info("Rejected transaction (%s): %s", exc.field or "record", exc)
            raise
        self._transactions.append(tx)
        logger.debug("Appended transaction #%d: %s", len(self._transactions) - 1, tx)
        return tx

    def extend(self, records: Iterable[Record]) -> List[Transaction]:
        """Append several records; none are stored if any one is invalid."""
        txs = []
        for pos, record in enumerate(records):
            try:
                txs.append(_to_transaction(record))
            except ValidationError as exc:
                logger.info("Rejected batch at entry %d: %s", pos, exc)
                raise
        self._transactions.extend(txs)
        if txs:
            logger.debug("Appended %d transaction(s)", len(txs))
        return txs

    def remove_at(self, index: int) -> Transaction:
        # negative indices are rejected rather than wrapped
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < len(self._transactions):
            logger.info("Rejected removal of index %r (size %d)", index, len(self._transactions))
            raise IndexError(f"Transaction index out of range: {index}")
        tx = self._transactions.pop(index)
        logger.debug("Removed transaction #%d: %s", index, tx)
        return tx

    def all(self) -> Tuple[Transaction, ...]:
        return tuple(self._transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.all())

    def __bool__(self) -> bool:
        return bool(self._transactions)
