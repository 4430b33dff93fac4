# expense_tracker/core/summary.py
from typing import Dict, Iterable

from expense_tracker.core.models import ExpenseRecord


def total(records: Iterable[ExpenseRecord]) -> float:
    """Sum of every record's amount; 0 for an empty sequence."""
    return sum((r.amount for r in records), 0.0)


def totals_by_category(records: Iterable[ExpenseRecord]) -> Dict[str, float]:
    """
    Per-category subtotals.

    Only categories that occur get a bucket, and buckets are ordered by the
    first record of that category in *records*.
    """
    buckets: Dict[str, float] = {}
    for r in records:
        buckets[r.category] = buckets.get(r.category, 0.0) + r.amount
    return buckets
