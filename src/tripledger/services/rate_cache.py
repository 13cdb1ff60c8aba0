"""Exchange rate cache backed by persistent storage."""

import logging
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

from tripledger.core.exceptions import RateProviderUnavailableError, ValidationError
from tripledger.core.money import normalize_currency, is_currency_code
from tripledger.core.timezone import now_utc, to_utc
from tripledger.domain.models import RateCacheEntry
from tripledger.providers.rate_provider import RateProvider, RateProviderError
from tripledger.repositories.protocols import RateRepository

logger = logging.getLogger(__name__)

DEFAULT_MAX_AGE_HOURS = 24


class RateCache:
    """
    Cache of currency -> accounting-currency rates.

    Wraps a rate provider with persistent storage and a freshness policy.
    A refresh is one provider call whose whole table overwrites the cached
    entries (last write wins), so concurrent refreshes need no locking.
    The accounting currency itself is never stored.
    """

    def __init__(
        self,
        provider: RateProvider,
        rate_repo: RateRepository,
        accounting_currency: str,
        max_age_hours: int = DEFAULT_MAX_AGE_HOURS,
    ):
        self._provider = provider
        self._rate_repo = rate_repo
        self._accounting_currency = normalize_currency(accounting_currency)
        self._max_age = timedelta(hours=max_age_hours)

    @property
    def accounting_currency(self) -> str:
        return self._accounting_currency

    def get(self, currency: str) -> Optional[Decimal]:
        """Cached rate for a currency, or None when absent."""
        entry = self.get_entry(currency)
        return entry.rate if entry else None

    def get_entry(self, currency: str) -> Optional[RateCacheEntry]:
        """Cached entry for a currency, or None when absent."""
        return self._rate_repo.get(normalize_currency(currency))

    def is_stale(self, entry: RateCacheEntry, now: Optional[datetime] = None) -> bool:
        """Check whether an entry is older than the max age."""
        now = to_utc(now) if now else now_utc()
        return now - to_utc(entry.last_updated) > self._max_age

    def refresh_all(self, base_currency: Optional[str] = None) -> None:
        """
        Replace cached rates with a fresh table from the provider.

        Cached rates are quoted per accounting unit, so the only accepted
        base is the accounting currency. Raises RateProviderUnavailableError
        when the provider fails; the existing entries are left as they were.
        """
        base = normalize_currency(base_currency) if base_currency else self._accounting_currency
        if base != self._accounting_currency:
            raise ValidationError(
                f"Rates must be refreshed against {self._accounting_currency}, got {base}"
            )

        try:
            table = self._provider.get_latest_rates(base)
        except RateProviderError as exc:
            raise RateProviderUnavailableError(str(exc)) from exc

        refreshed_at = now_utc()
        entries = []
        for code, rate in table.rates.items():
            code = normalize_currency(code)
            if code == self._accounting_currency or not is_currency_code(code):
                continue
            if rate is None or not rate.is_finite() or rate <= 0:
                logger.warning("Ignoring non-positive rate for %s: %s", code, rate)
                continue
            entries.append(RateCacheEntry(currency=code, rate=rate, last_updated=refreshed_at))

        self._rate_repo.upsert_many(entries)
        logger.info(
            "Refreshed %d exchange rates against %s (provider as of %s)",
            len(entries),
            base,
            table.as_of.isoformat() if table.as_of else "unknown",
        )

    def list_currencies(self) -> list[str]:
        """Currency codes available for conversion, sorted."""
        codes = {entry.currency for entry in self._rate_repo.list_all()}
        codes.add(self._accounting_currency)
        return sorted(codes)
