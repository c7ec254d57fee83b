# statement_tracker/core/models.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum

from statement_tracker.utils import capitalize

DATE_FORMAT = "%Y-%m-%d"
# keeps every total well inside the 28-digit default Decimal context
MAX_AMOUNT = Decimal("1e15")


class ValidationError(ValueError):
    """Raised when a transaction field violates its invariant."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class Category(str, Enum):
    REVENUE = "revenue"
    EXPENSE = "expense"
    ASSET = "asset"
    LIABILITY = "liability"
    EQUITY = "equity"
    CASH_INFLOW = "cash-inflow"
    CASH_OUTFLOW = "cash-outflow"

    @classmethod
    def from_str(cls, value) -> "Category":
        """Coerce arbitrary casing into a valid category."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError) as error:
            raise ValidationError(f"Unsupported category: {value!r}", field="category") from error

    @property
    def label(self) -> str:
        return capitalize(self.value)


def _coerce_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value or not isinstance(value, str):
        raise ValidationError("Missing date", field="date")
    text = value.strip()
    try:
        # strptime alone also takes unpadded fields such as 2025-1-5
        if len(text) != 10:
            raise ValueError(text)
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError as error:
        raise ValidationError(f"Invalid date: {value!r}", field="date") from error


def _coerce_amount(value) -> Decimal:
    # bool is an int subclass; True would otherwise become 1
    if value is None or isinstance(value, bool):
        raise ValidationError("Missing amount", field="amount")
    try:
        amount = Decimal(str(value).strip()) if not isinstance(value, Decimal) else value
    except (InvalidOperation, ValueError) as error:
        raise ValidationError(f"Amount is not a number: {value!r}", field="amount") from error
    if not amount.is_finite():
        raise ValidationError(f"Amount must be finite: {value!r}", field="amount")
    if amount <= 0:
        raise ValidationError(f"Amount must be positive: {value!r}", field="amount")
    if amount >= MAX_AMOUNT:
        raise ValidationError(f"Amount is too large: {value!r}", field="amount")
    return amount


@dataclass(frozen=True)
class Transaction:
    date: date
    description: str
    category: Category
    amount: Decimal

    @classmethod
    def create(cls, date, description, category, amount) -> "Transaction":
        """Validate raw field values and build a transaction.

        Fields are checked in form order (date, description, category,
        amount); the first failure raises :class:`ValidationError` with
        ``field`` set to the offending name.
        """
        tx_date = _coerce_date(date)
        desc = description.strip() if isinstance(description, str) else ""
        if not desc:
            raise ValidationError("Description is required", field="description")
        if category is None or category == "":
            raise ValidationError("Category is required", field="category")
        cat = Category.from_str(category)
        return cls(date=tx_date, description=desc, category=cat, amount=_coerce_amount(amount))

    @classmethod
    def from_mapping(cls, data) -> "Transaction":
        return cls.create(
            data.get("date"),
            data.get("description"),
            data.get("category"),
            data.get("amount"),
        )

    def as_row(self) -> list:
        """Spreadsheet row: ISO date, description, capitalised category, raw amount."""
        return [self.date.isoformat(), self.description, self.category.label, float(self.amount)]
