"""Mini README: Observable data model for the expense tracker.

The package is divided into ``transaction`` for the immutable value type,
``listener`` for the observer interface, and ``expense_tracker_model`` for
the model that owns the ledger and notifies registered listeners.
"""

from .expense_tracker_model import ExpenseTrackerModel
from .listener import ExpenseTrackerModelListener
from .transaction import Transaction, TransactionCategory

__all__ = [
    "ExpenseTrackerModel",
    "ExpenseTrackerModelListener",
    "Transaction",
    "TransactionCategory",
]
