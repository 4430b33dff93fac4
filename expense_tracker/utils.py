# expense_tracker/utils.py
import math
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, localcontext

from expense_tracker.errors import InvalidExpenseError

_CENTS = Decimal("0.01")


def parse_amount(value):
    """
    Turn user-supplied amount text into a non-negative finite float.
    Raises InvalidExpenseError instead of letting NaN into the ledger.
    """
    if value is None:
        raise InvalidExpenseError("Amount is required")
    if isinstance(value, bool):
        raise InvalidExpenseError(f"Invalid amount: {value!r}")
    if isinstance(value, (int, float)):
        amount = float(value)
    else:
        text = str(value).strip()
        if not text:
            raise InvalidExpenseError("Amount is required")
        try:
            amount = float(text)
        except ValueError:
            raise InvalidExpenseError(f"Invalid amount: {text!r}") from None
    if not math.isfinite(amount):
        raise InvalidExpenseError(f"Invalid amount: {value!r}")
    if amount < 0:
        raise InvalidExpenseError("Amount cannot be negative")
    return amount


def format_money(value, symbol="$"):
    """Two decimal places with a currency prefix, e.g. $4.50."""
    amount = Decimal(str(value))
    if not amount.is_finite():
        return f"{symbol}{value}"
    # the default context stops at 28 significant digits
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        cents = amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
    return f"{symbol}{cents}"


def today_iso(today=None):
    return (today or date.today()).isoformat()
