"""Mini README: Observer interface notified by the expense tracker model.

Structure:
    * ExpenseTrackerModelListener - abstract interface implemented by views
      or any collaborator interested in model updates.

Listeners are registered on a model and receive the model itself after
every successful mutation, so they can pull whatever state they render.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .expense_tracker_model import ExpenseTrackerModel


class ExpenseTrackerModelListener(ABC):
    """Base interface for collaborators observing an expense tracker model."""

    @abstractmethod
    def update(self, model: "ExpenseTrackerModel") -> None:
        """React to a state change of ``model``."""
