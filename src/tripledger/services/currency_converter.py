"""Currency conversion into the accounting currency."""

import logging
from decimal import Decimal

from tripledger.core.exceptions import (
    ValidationError,
    UnsupportedCurrencyError,
    RateProviderUnavailableError,
)
from tripledger.core.money import (
    to_decimal,
    round_money,
    has_cent_precision,
    round_rate,
    normalize_currency,
    is_currency_code,
    MAX_MONEY,
)
from tripledger.domain.models import RateCacheEntry
from tripledger.domain.views import ConversionResult
from tripledger.services.rate_cache import RateCache

logger = logging.getLogger(__name__)


class CurrencyConverter:
    """
    Converts amounts into the accounting currency.

    Rates are "units of foreign currency per accounting unit", so the
    canonical amount is amount / rate (not amount * rate).
    """

    def __init__(self, rate_cache: RateCache):
        self._rate_cache = rate_cache

    @property
    def accounting_currency(self) -> str:
        return self._rate_cache.accounting_currency

    def convert_to_accounting(self, amount: Decimal, from_currency: str) -> ConversionResult:
        """
        Convert a positive amount into the accounting currency.

        The accounting currency converts at rate 1 without touching the cache.
        Other currencies refresh the cache once on miss or staleness.
        """
        amount = self._validate_amount(amount)
        currency = self._validate_currency(from_currency)

        if currency == self.accounting_currency:
            return ConversionResult(
                canonical_amount=round_money(amount),
                rate=Decimal("1"),
                original_amount=amount,
                original_currency=currency,
            )

        entry = self._resolve(currency)
        canonical = amount / entry.rate
        if canonical > MAX_MONEY:
            raise ValidationError(
                f"Converted amount must not exceed {MAX_MONEY} {self.accounting_currency}"
            )
        return ConversionResult(
            canonical_amount=round_money(canonical),
            rate=round_rate(entry.rate),
            original_amount=amount,
            original_currency=currency,
        )

    def get_rate(self, currency: str) -> Decimal:
        """Rate for a currency (6 decimal places), refreshing like a conversion."""
        currency = self._validate_currency(currency)
        if currency == self.accounting_currency:
            return Decimal("1")
        return round_rate(self._resolve(currency).rate)

    def list_currencies(self) -> list[str]:
        """Currencies that can currently be converted, sorted."""
        return self._rate_cache.list_currencies()

    def _resolve(self, currency: str) -> RateCacheEntry:
        """Cached entry, refreshed once when missing or stale."""
        entry = self._rate_cache.get_entry(currency)
        if entry is None or self._rate_cache.is_stale(entry):
            try:
                self._rate_cache.refresh_all()
            except RateProviderUnavailableError as exc:
                # Keep serving the last known rate if there is one
                logger.warning("Rate refresh failed, continuing with cached rates: %s", exc.message)
            entry = self._rate_cache.get_entry(currency)

        if entry is None:
            raise UnsupportedCurrencyError(currency)
        return entry

    @staticmethod
    def _validate_amount(amount: Decimal) -> Decimal:
        try:
            amount = to_decimal(amount)
        except ValueError as exc:
            raise ValidationError(str(exc)) from exc
        if not amount.is_finite() or amount <= 0:
            raise ValidationError("Amount must be greater than 0")
        if amount > MAX_MONEY:
            raise ValidationError(f"Amount must not exceed {MAX_MONEY}")
        if not has_cent_precision(amount):
            raise ValidationError("Amount must have at most 2 decimal places")
        return amount

    @staticmethod
    def _validate_currency(currency: str) -> str:
        code = normalize_currency(currency)
        if not is_currency_code(code):
            raise ValidationError(f"Invalid currency code: {currency!r}")
        return code
