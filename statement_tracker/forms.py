"""Collect and validate the add-transaction form."""

from __future__ import annotations

from typing import Mapping

from statement_tracker.core.models import Transaction, ValidationError

FORM_FIELDS = ("date", "description", "category", "amount")
INVALID_FORM_NOTICE = "Please fill out all fields with valid data."


def parse_transaction_form(data: Mapping[str, object]) -> Transaction:
    """Build a transaction from raw form strings.

    Any failure is reported with the single user-facing notice; the
    offending field is kept on ``ValidationError.field``.
    """
    values = {}
    for name in FORM_FIELDS:
        raw = data.get(name)
        values[name] = raw.strip() if isinstance(raw, str) else raw
        if values[name] in (None, ""):
            raise ValidationError(INVALID_FORM_NOTICE, field=name)
    try:
        return Transaction.create(**values)
    except ValidationError as exc:
        raise ValidationError(INVALID_FORM_NOTICE, field=exc.field) from exc
