"""exchangerate-api.com (v6) rate provider."""

import logging
from decimal import Decimal, InvalidOperation
from typing import Optional

import httpx

from tripledger.core.timezone import parse_datetime_utc
from tripledger.domain.views import RateTable
from tripledger.providers.rate_provider import RateProviderError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://v6.exchangerate-api.com/v6"
DEFAULT_TIMEOUT_SECONDS = 10.0


class ExchangeRateApiProvider:
    """
    Fetches the latest rate table from exchangerate-api.com.

    GET {api_url}/{api_key}/latest/{base} answers with
    {"result": "success", "conversion_rates": {...}, "time_last_update_utc": ...}
    or {"result": "error", "error-type": ...}.
    """

    def __init__(
        self,
        api_key: str,
        api_url: str = DEFAULT_API_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        if not api_key:
            raise ValueError("exchangerate-api.com requires an API key")
        self._api_key = api_key
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout_seconds
        self._transport = transport

    def get_latest_rates(self, base_currency: str) -> RateTable:
        """Fetch the full rate table quoted against base_currency."""
        base = base_currency.upper()
        url = f"{self._api_url}/{self._api_key}/latest/{base}"

        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.get(url)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise RateProviderError(
                f"Exchange rate API error: HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise RateProviderError(f"Exchange rate API request failed: {exc}") from exc
        except ValueError as exc:
            raise RateProviderError("Exchange rate API returned invalid JSON") from exc

        if not isinstance(payload, dict):
            raise RateProviderError("Exchange rate API returned an unexpected payload")
        if payload.get("result") == "error":
            raise RateProviderError(f"Exchange rate API error: {payload.get('error-type', 'unknown')}")

        raw_rates = payload.get("conversion_rates")
        if not isinstance(raw_rates, dict) or not raw_rates:
            raise RateProviderError("Exchange rate API response has no conversion_rates")

        rates: dict[str, Decimal] = {}
        for code, value in raw_rates.items():
            try:
                rates[str(code).upper()] = Decimal(str(value))
            except InvalidOperation:
                logger.warning("Skipping malformed rate for %s: %r", code, value)

        as_of = None
        updated = payload.get("time_last_update_utc")
        if updated:
            try:
                as_of = parse_datetime_utc(updated)
            except (ValueError, OverflowError):
                logger.warning("Unparseable time_last_update_utc: %r", updated)

        return RateTable(base_currency=base, rates=rates, as_of=as_of)
