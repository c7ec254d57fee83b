# statement_tracker/utils.py
from decimal import Decimal, ROUND_HALF_UP, localcontext

CURRENCY_SYMBOL = "₱"
_CENTS = Decimal("0.01")


def to_cents(amount):
    """
    Round half-up to two fraction digits; 2.005 -> 2.01.
    """
    value = Decimal(str(amount))
    with localcontext() as ctx:
        # quantize fails once the result has more digits than the context precision
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return value.quantize(_CENTS, rounding=ROUND_HALF_UP)


def format_peso(amount):
    """
    Peso-prefixed amount with exactly two fraction digits, e.g. 1234.5 -> ₱1234.50.
    """
    return f"{CURRENCY_SYMBOL}{to_cents(amount)}"


def capitalize(text):
    return text[:1].upper() + text[1:]
