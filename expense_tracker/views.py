# expense_tracker/views.py
from dataclasses import dataclass
from typing import List, Sequence

from expense_tracker.core.models import CATEGORIES, DEFAULT_CATEGORY, ExpenseRecord
from expense_tracker.core.summary import total, totals_by_category
from expense_tracker.utils import format_money

EMPTY_MESSAGE = "No expenses yet. Add one above!"


@dataclass
class CategoryRow:
    category: str
    amount: str


@dataclass
class ExpenseRow:
    id: str
    description: str
    category: str
    date: str
    amount: str


@dataclass
class PageView:
    total: str
    categories: List[CategoryRow]
    expenses: List[ExpenseRow]
    category_options: Sequence[str]
    selected_category: str
    empty_message: str

    @property
    def is_empty(self):
        return not self.expenses


def build_page(records, currency_symbol="$", selected_category=None):
    """Everything the page shows, derived from *records* alone."""
    records = tuple(records)
    if selected_category not in CATEGORIES:
        selected_category = DEFAULT_CATEGORY
    return PageView(
        total=format_money(total(records), currency_symbol),
        categories=[
            CategoryRow(category=cat, amount=format_money(amt, currency_symbol))
            for cat, amt in totals_by_category(records).items()
        ],
        expenses=[_expense_row(r, currency_symbol) for r in records],
        category_options=CATEGORIES,
        selected_category=selected_category,
        empty_message=EMPTY_MESSAGE,
    )


def _expense_row(record: ExpenseRecord, currency_symbol):
    return ExpenseRow(
        id=record.id,
        description=record.description,
        category=record.category,
        date=record.date,
        amount=format_money(record.amount, currency_symbol),
    )
