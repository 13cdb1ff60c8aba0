"""Domain layer - pure business models with no external dependencies."""

from tripledger.domain.models import (
    SplitPolicy,
    Trip,
    TripMember,
    Expense,
    Split,
    RateCacheEntry,
)

__all__ = [
    "SplitPolicy",
    "Trip",
    "TripMember",
    "Expense",
    "Split",
    "RateCacheEntry",
]
