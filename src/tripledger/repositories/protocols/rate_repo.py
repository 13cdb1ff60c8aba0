"""Rate cache repository protocol."""

from typing import Protocol, Optional

from tripledger.domain.models import RateCacheEntry


class RateRepository(Protocol):
    """Interface for exchange rate cache storage (unique by currency)."""

    def get(self, currency: str) -> Optional[RateCacheEntry]:
        """Get the cached entry for a currency."""
        ...

    def list_all(self) -> list[RateCacheEntry]:
        """List all cached entries ordered by currency."""
        ...

    def upsert_many(self, entries: list[RateCacheEntry]) -> None:
        """Insert or overwrite entries by currency in a single transaction."""
        ...
