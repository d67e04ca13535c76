"""Mini README: Core package initializer for the expense tracker model.

This module exposes convenience imports so callers can reach the observable
model, its listener interface, and the transaction value type without
needing to know the exact module structure. Logging helpers are re-exported
for applications embedding the model.
"""

from .logging_utils import get_logger
from .model import (
    ExpenseTrackerModel,
    ExpenseTrackerModelListener,
    Transaction,
    TransactionCategory,
)

__all__ = [
    "ExpenseTrackerModel",
    "ExpenseTrackerModelListener",
    "Transaction",
    "TransactionCategory",
    "get_logger",
]
