"""Mini README: Tests for the transaction value type.

Covers category coercion, amount validation and value equality, which the
model relies on when removing entries.
"""

from __future__ import annotations

from datetime import datetime

import pytest

from expensetracker import Transaction, TransactionCategory


def test_category_parsing_ignores_case() -> None:
    transaction = Transaction(amount=12.5, category="  Travel ", timestamp=datetime(2024, 1, 2))

    assert transaction.category is TransactionCategory.TRAVEL
    assert transaction.as_dict() == {
        "amount": 12.5,
        "category": "travel",
        "timestamp": "2024-01-02T00:00:00",
    }


@pytest.mark.parametrize("category", ["groceries", "", None])
def test_unknown_category_is_rejected(category) -> None:
    with pytest.raises(ValueError):
        Transaction(amount=10.0, category=category)


@pytest.mark.parametrize("amount", [0, -5.0, 1000, 2500.0, True, "10"])
def test_invalid_amount_is_rejected(amount) -> None:
    with pytest.raises(ValueError):
        Transaction(amount=amount, category=TransactionCategory.FOOD)


def test_transactions_compare_by_value() -> None:
    moment = datetime(2024, 3, 4, 5, 6)

    assert Transaction(40, "bills", moment) == Transaction(40.0, TransactionCategory.BILLS, moment)
    assert Transaction(40, "bills", moment) != Transaction(41, "bills", moment)


def test_transaction_is_immutable() -> None:
    transaction = Transaction(amount=5.0, category="other")

    with pytest.raises(AttributeError):
        transaction.amount = 6.0  # type: ignore[misc]
