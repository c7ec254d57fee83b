# statement_tracker/manual.py
import yaml
from statement_tracker.core.models import Transaction, ValidationError


def load_manual_transactions(path):
    """Load manual transactions from a YAML file."""
    with open(path, encoding='utf-8') as f:
        data = yaml.safe_load(f) or []

    if not isinstance(data, list):
        raise ValidationError(f"Expected a list of transactions in {path}")

    txs = []
    for pos, entry in enumerate(data, start=1):
        if not isinstance(entry, dict):
            raise ValidationError(f"Entry {pos} is not a mapping: {entry!r}")
        try:
            txs.append(Transaction.from_mapping(entry))
        except ValidationError as exc:
            raise ValidationError(f"Entry {pos}: {exc}", field=exc.field) from exc
    return txs
