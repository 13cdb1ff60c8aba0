"""Exchange rate providers module."""

from tripledger.providers.rate_provider import RateProvider, RateProviderError
from tripledger.providers.stub_provider import StubRateProvider
from tripledger.providers.exchangerate_api import ExchangeRateApiProvider

__all__ = [
    "RateProvider",
    "RateProviderError",
    "StubRateProvider",
    "ExchangeRateApiProvider",
]
