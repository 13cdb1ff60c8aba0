"""Domain models package."""

from tripledger.domain.models.enums import SplitPolicy
from tripledger.domain.models.trip import Trip, TripMember
from tripledger.domain.models.expense import Expense, Split
from tripledger.domain.models.rate import RateCacheEntry

__all__ = [
    "SplitPolicy",
    "Trip",
    "TripMember",
    "Expense",
    "Split",
    "RateCacheEntry",
]
