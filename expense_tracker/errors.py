# expense_tracker/errors.py


class ExpenseError(Exception):
    """Base class for errors raised by expense_tracker."""


class InvalidExpenseError(ExpenseError, ValueError):
    """User input or a stored record failed validation."""


class StorageError(ExpenseError):
    """A key-value backend could not read or write its data."""
