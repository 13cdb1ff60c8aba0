"""Stub exchange rate provider for offline/testing use."""

from decimal import Decimal
from typing import Optional

from tripledger.core.timezone import now_utc
from tripledger.domain.views import RateTable
from tripledger.providers.rate_provider import RateProviderError


# Units per 1 CAD
_STUB_RATES_CAD: dict[str, Decimal] = {
    "CAD": Decimal("1"),
    "USD": Decimal("0.730000"),
    "EUR": Decimal("0.675000"),
    "GBP": Decimal("0.580000"),
    "JPY": Decimal("108.250000"),
    "MXN": Decimal("12.450000"),
    "AUD": Decimal("1.110000"),
    "CHF": Decimal("0.645000"),
    "INR": Decimal("61.300000"),
    "THB": Decimal("26.400000"),
}


class StubRateProvider:
    """
    Stub provider with a fixed rate table for offline operation.

    Rates are stored against CAD and re-based for other base currencies.
    Bases outside the table raise RateProviderError like a real provider.
    """

    def __init__(self, rates: Optional[dict[str, Decimal]] = None):
        self._rates = dict(rates) if rates is not None else dict(_STUB_RATES_CAD)

    def get_latest_rates(self, base_currency: str) -> RateTable:
        """Return the stub table quoted against base_currency."""
        base = base_currency.upper()
        if base not in self._rates:
            raise RateProviderError(f"Unsupported base currency: {base}")

        base_rate = self._rates[base]
        rates = {code: rate / base_rate for code, rate in self._rates.items()}
        return RateTable(base_currency=base, rates=rates, as_of=now_utc())
