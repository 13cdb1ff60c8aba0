"""Repository protocol definitions (interfaces)."""

from tripledger.repositories.protocols.trip_repo import TripRepository
from tripledger.repositories.protocols.expense_repo import ExpenseRepository
from tripledger.repositories.protocols.rate_repo import RateRepository

__all__ = [
    "TripRepository",
    "ExpenseRepository",
    "RateRepository",
]
