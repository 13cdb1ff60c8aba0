"""Pydantic schemas for exchange rate endpoints."""

from decimal import Decimal

from pydantic import BaseModel


class RateResponse(BaseModel):
    """Rate of a currency against the accounting currency."""

    currency: str
    accounting_currency: str
    rate: Decimal


class CurrencyListResponse(BaseModel):
    """Currencies that expenses can be recorded in."""

    currencies: list[str]
    accounting_currency: str
