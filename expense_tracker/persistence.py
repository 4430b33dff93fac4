# expense_tracker/persistence.py
from __future__ import annotations

import json
import logging
from typing import Iterable, List

from expense_tracker.core.models import ExpenseRecord
from expense_tracker.errors import InvalidExpenseError
from expense_tracker.storage.base import BaseStore

logger = logging.getLogger(__name__)

DEFAULT_KEY = "expenses"


class LedgerPersistence:
    """Reads and writes the whole expense sequence under one fixed key."""

    def __init__(self, store: BaseStore, key: str = DEFAULT_KEY) -> None:
        self.store = store
        self.key = key

    def load(self) -> List[ExpenseRecord]:
        """Return the stored sequence in stored order.

        A missing key gives an empty list. So does a malformed value: it is
        logged and discarded rather than raised, so a bad file never stops the
        ledger from starting.
        """
        raw = self.store.get(self.key)
        if raw is None:
            return []
        try:
            return _decode(raw)
        except (json.JSONDecodeError, InvalidExpenseError) as exc:
            logger.warning("Discarding malformed data under %r: %s", self.key, exc)
            return []

    def save(self, records: Iterable[ExpenseRecord]) -> None:
        """Overwrite the key with the full sequence."""
        payload = json.dumps([r.to_dict() for r in records])
        self.store.set(self.key, payload)


def _decode(raw: str) -> List[ExpenseRecord]:
    data = json.loads(raw)
    if not isinstance(data, list):
        raise InvalidExpenseError(f"Expected a list of expenses, got {type(data).__name__}")
    records = [ExpenseRecord.from_dict(entry) for entry in data]
    seen = set()
    for r in records:
        if r.id in seen:
            raise InvalidExpenseError(f"Duplicate expense id {r.id!r}")
        seen.add(r.id)
    return records
