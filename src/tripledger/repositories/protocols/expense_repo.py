"""Expense repository protocol."""

from typing import Protocol, Optional

from tripledger.domain.models import Expense


class ExpenseRepository(Protocol):
    """Interface for expense (ledger) data access."""

    def create(self, expense: Expense) -> Expense:
        """Persist a new expense together with its splits, atomically."""
        ...

    def get_by_id(self, expense_id: str) -> Optional[Expense]:
        """Retrieve expense (with splits) by ID."""
        ...

    def list_by_trip(self, trip_id: str) -> list[Expense]:
        """List all expenses of a trip with splits, newest first."""
        ...
