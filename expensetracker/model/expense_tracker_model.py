"""Mini README: Observable model holding the ledger and filter results.

Structure:
    * ExpenseTrackerModel - owns the ordered transactions, the indices of
      transactions matched by the most recent filter, and the registered
      listeners notified after every mutation.

Every mutator validates its input before touching state, applies the change,
and then calls ``update(model)`` on each listener. Any change to the ledger
clears the matched indices because positions are no longer trustworthy.
Callers only ever receive copies of the internal collections.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from ..logging_utils import get_logger
from .listener import ExpenseTrackerModelListener
from .transaction import Transaction

LOGGER = get_logger(__name__)


class ExpenseTrackerModel:
    """In-memory ledger of transactions that notifies listeners on change."""

    def __init__(self) -> None:
        self._transactions: List[Transaction] = []
        self._matched_filter_indices: List[int] = []
        # Kept in a list so listeners need not be hashable.
        self._listeners: List[ExpenseTrackerModelListener] = []

    def __len__(self) -> int:
        return len(self._transactions)

    def add_transaction(self, transaction: Optional[Transaction]) -> None:
        """Append a transaction and invalidate the previous filter result.

        Raises:
            ValueError: if ``transaction`` is ``None``.
        """

        if transaction is None:
            LOGGER.warning("Rejected attempt to add an empty transaction")
            raise ValueError("The new transaction must be non-null.")
        self._transactions.append(transaction)
        self._matched_filter_indices.clear()
        LOGGER.debug("Added transaction; ledger now holds %s", len(self._transactions))
        self._state_changed()

    def remove_transaction(self, transaction: Optional[Transaction]) -> None:
        """Remove the first transaction equal to ``transaction`` if present.

        The matched indices are cleared and listeners notified even when no
        entry was removed.
        """

        try:
            self._transactions.remove(transaction)
            LOGGER.debug("Removed transaction; ledger now holds %s", len(self._transactions))
        except ValueError:
            LOGGER.debug("Transaction to remove was not in the ledger")
        self._matched_filter_indices.clear()
        self._state_changed()

    def get_transactions(self) -> Tuple[Transaction, ...]:
        """Return a read-only snapshot of the transactions in insertion order."""

        return tuple(self._transactions)

    def set_matched_filter_indices(self, indices: Optional[Iterable[int]]) -> None:
        """Replace the indices of transactions matched by the current filter.

        Raises:
            ValueError: if ``indices`` is ``None`` or holds anything other than
                positions of existing transactions.
        """

        if indices is None:
            LOGGER.warning("Rejected empty matched filter indices")
            raise ValueError("The matched filter indices list must be non-null.")
        candidates = list(indices)
        count = len(self._transactions)
        for index in candidates:
            if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < count:
                LOGGER.warning("Rejected matched filter index %r for %s transactions", index, count)
                raise ValueError(
                    "Each matched filter index must be between 0 (inclusive) "
                    "and the number of transactions (exclusive)."
                )
        self._matched_filter_indices = candidates
        LOGGER.debug("Matched filter indices set to %s", candidates)
        self._state_changed()

    def get_matched_filter_indices(self) -> List[int]:
        """Return a copy of the matched filter indices."""

        return list(self._matched_filter_indices)

    def register(self, listener: Optional[ExpenseTrackerModelListener]) -> bool:
        """Register ``listener`` for state change events.

        Returns ``True`` when the listener was added, ``False`` when it is
        ``None`` or already registered.
        """

        if listener is None or self.contains_listener(listener):
            LOGGER.debug("Listener %r not registered", listener)
            return False
        self._listeners.append(listener)
        LOGGER.info("Registered listener %s", type(listener).__name__)
        return True

    def number_of_listeners(self) -> int:
        return len(self._listeners)

    def contains_listener(self, listener: Optional[ExpenseTrackerModelListener]) -> bool:
        return any(existing is listener or existing == listener for existing in self._listeners)

    def _state_changed(self) -> None:
        """Notify every registered listener about a state change."""

        # Listeners registered during this pass are picked up next time.
        for listener in list(self._listeners):
            listener.update(self)
