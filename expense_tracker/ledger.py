# expense_tracker/ledger.py
from __future__ import annotations

import logging
import threading
import uuid
from datetime import date
from typing import Callable, Dict, Iterator, Optional, Tuple

from expense_tracker.core import summary
from expense_tracker.core.models import CATEGORIES, DEFAULT_CATEGORY, ExpenseRecord
from expense_tracker.errors import InvalidExpenseError
from expense_tracker.persistence import LedgerPersistence
from expense_tracker.utils import parse_amount, today_iso

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex


class ExpenseLedger:
    """
    Owns the newest-first list of expenses.

    The stored sequence is loaded once here, and every add or delete writes the
    full sequence back through *persistence*, the empty sequence included.
    """

    def __init__(
        self,
        persistence: LedgerPersistence,
        today: Optional[Callable[[], date]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        self.persistence = persistence
        self._today = today or date.today
        self._id_factory = id_factory or _new_id
        self._lock = threading.Lock()
        self._expenses: Tuple[ExpenseRecord, ...] = tuple(persistence.load())
        logger.debug("Loaded %d expense(s)", len(self._expenses))

    @property
    def expenses(self) -> Tuple[ExpenseRecord, ...]:
        return self._expenses

    def __len__(self) -> int:
        return len(self._expenses)

    def __iter__(self) -> Iterator[ExpenseRecord]:
        return iter(self._expenses)

    def add_expense(
        self,
        description: Optional[str],
        amount,
        category: str = DEFAULT_CATEGORY,
        strict: bool = False,
    ) -> Optional[ExpenseRecord]:
        """Prepend a new expense dated today and persist.

        Invalid input leaves the ledger untouched and returns None, unless
        *strict* is set, in which case InvalidExpenseError propagates.
        """
        try:
            clean_description, clean_amount = _validate(description, amount, category)
        except InvalidExpenseError as exc:
            if strict:
                raise
            logger.debug("Rejected expense: %s", exc)
            return None

        with self._lock:
            existing = {r.id for r in self._expenses}
            expense_id = self._id_factory()
            while expense_id in existing:
                expense_id = self._id_factory()
            record = ExpenseRecord(
                id=expense_id,
                description=clean_description,
                amount=clean_amount,
                category=category,
                date=today_iso(self._today()),
            )
            updated = (record,) + self._expenses
            self.persistence.save(updated)
            self._expenses = updated
        logger.info("Added %s expense %s", category, record.id)
        return record

    def delete_expense(self, expense_id: str) -> bool:
        """Remove the expense with *expense_id*; False when there is none."""
        with self._lock:
            remaining = tuple(r for r in self._expenses if r.id != expense_id)
            if len(remaining) == len(self._expenses):
                logger.debug("No expense with id %s", expense_id)
                return False
            self.persistence.save(remaining)
            self._expenses = remaining
        logger.info("Deleted expense %s", expense_id)
        return True

    def total(self) -> float:
        return summary.total(self._expenses)

    def totals_by_category(self) -> Dict[str, float]:
        return summary.totals_by_category(self._expenses)


def _validate(description, amount, category):
    if description is None or not str(description).strip():
        raise InvalidExpenseError("Description is required")
    if category not in CATEGORIES:
        raise InvalidExpenseError(f"Unknown category {category!r}")
    return str(description).strip(), parse_amount(amount)
