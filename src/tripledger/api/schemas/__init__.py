"""Pydantic schemas for API request/response."""

from tripledger.api.schemas.expense import (
    ExpenseCreateRequest,
    SplitResponse,
    ExpenseResponse,
    ExpenseListResponse,
)
from tripledger.api.schemas.balance import (
    BalancesResponse,
    BalanceLineResponse,
    BalanceSummaryResponse,
)
from tripledger.api.schemas.rate import (
    RateResponse,
    CurrencyListResponse,
)

__all__ = [
    "ExpenseCreateRequest",
    "SplitResponse",
    "ExpenseResponse",
    "ExpenseListResponse",
    "BalancesResponse",
    "BalanceLineResponse",
    "BalanceSummaryResponse",
    "RateResponse",
    "CurrencyListResponse",
]
