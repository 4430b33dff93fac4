# expense_tracker/core/models.py
import math
from dataclasses import asdict, dataclass

from expense_tracker.errors import InvalidExpenseError

CATEGORIES = ("Food", "Transport", "Entertainment", "Bills", "Shopping", "Other")
DEFAULT_CATEGORY = "Food"

FIELDS = ("id", "description", "amount", "category", "date")


@dataclass(frozen=True)
class ExpenseRecord:
    id: str
    description: str
    amount: float
    category: str
    date: str

    def to_dict(self):
        return asdict(self)

    @classmethod
    def from_dict(cls, data):
        """Build a record from its stored form, rejecting anything malformed."""
        if not isinstance(data, dict):
            raise InvalidExpenseError(f"Expected an object, got {type(data).__name__}")
        missing = [name for name in FIELDS if name not in data]
        if missing:
            raise InvalidExpenseError(f"Missing field(s) {', '.join(missing)} in {data}")

        expense_id = data['id']
        description = data['description']
        amount = data['amount']
        category = data['category']
        date_str = data['date']

        if not isinstance(expense_id, str) or not expense_id:
            raise InvalidExpenseError(f"Invalid id in {data}")
        if not isinstance(description, str) or not description:
            raise InvalidExpenseError(f"Invalid description in {data}")
        # bool is an int subclass
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            raise InvalidExpenseError(f"Invalid amount in {data}")
        if not math.isfinite(amount) or amount < 0:
            raise InvalidExpenseError(f"Amount out of range in {data}")
        if category not in CATEGORIES:
            raise InvalidExpenseError(f"Unknown category {category!r}")
        if not isinstance(date_str, str) or not date_str:
            raise InvalidExpenseError(f"Invalid date in {data}")

        return cls(
            id=expense_id,
            description=description,
            amount=float(amount),
            category=category,
            date=date_str,
        )
