"""Exchange rate provider protocol and base types."""

from typing import Protocol

from tripledger.domain.views import RateTable


class RateProviderError(Exception):
    """Raised by providers when a rate table cannot be fetched."""


class RateProvider(Protocol):
    """
    Protocol for exchange rate providers.

    A single call must return the complete table for the requested base:
    rates[code] is how many units of code equal one unit of base.
    """

    def get_latest_rates(self, base_currency: str) -> RateTable:
        """
        Fetch the latest rate table quoted against base_currency.

        Raises RateProviderError on any transport or payload failure.
        """
        ...
