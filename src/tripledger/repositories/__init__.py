"""Repository layer - data access abstractions and implementations."""

from tripledger.repositories.protocols import (
    TripRepository,
    ExpenseRepository,
    RateRepository,
)

__all__ = [
    "TripRepository",
    "ExpenseRepository",
    "RateRepository",
]
