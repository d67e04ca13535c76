"""Mini README: Immutable transaction value used by the expense tracker.

Structure:
    * TransactionCategory - enum of the supported spending categories.
    * Transaction - frozen dataclass validated on construction.

Transactions are plain values: two entries with the same amount, category
and timestamp compare equal, which is what the model relies on when
removing an entry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from numbers import Real
from typing import Dict

MAX_AMOUNT = 1000.0


class TransactionCategory(str, Enum):
    """Enumerate the supported transaction categories."""

    FOOD = "food"
    TRAVEL = "travel"
    BILLS = "bills"
    ENTERTAINMENT = "entertainment"
    OTHER = "other"

    @classmethod
    def from_str(cls, value: str) -> "TransactionCategory":
        """Coerce arbitrary casing into a valid category."""

        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported transaction category: {value}") from error


@dataclass(frozen=True, slots=True)
class Transaction:
    """A single expense entry."""

    amount: float
    category: TransactionCategory
    timestamp: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, Real):
            raise ValueError(f"Transaction amount must be a number, got {self.amount!r}")
        if not 0 < self.amount < MAX_AMOUNT:
            raise ValueError(
                f"Transaction amount must be greater than 0 and less than {MAX_AMOUNT:g}."
            )
        if not isinstance(self.category, TransactionCategory):
            object.__setattr__(self, "category", TransactionCategory.from_str(self.category))
        object.__setattr__(self, "amount", float(self.amount))

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction with serialisable values."""

        return {
            "amount": self.amount,
            "category": self.category.value,
            "timestamp": self.timestamp.isoformat(),
        }
