"""Pydantic schemas for balance endpoints."""

from decimal import Decimal

from pydantic import BaseModel


class BalancesResponse(BaseModel):
    """Net balance per member of a trip."""

    trip_id: str
    currency: str
    balances: dict[str, Decimal]


class BalanceLineResponse(BaseModel):
    """Another member's position within a summary."""

    model_config = {"from_attributes": True}

    member_id: str
    name: str
    amount: Decimal


class BalanceSummaryResponse(BaseModel):
    """One member's view of the trip balances."""

    model_config = {"from_attributes": True}

    member_id: str
    currency: str
    net_balance: Decimal
    creditors: list[BalanceLineResponse]
    debtors: list[BalanceLineResponse]
