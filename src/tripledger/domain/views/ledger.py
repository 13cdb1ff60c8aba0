"""View models for conversion and balance outputs."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass
class RateTable:
    """Full rate table returned by a rate provider in one response."""

    base_currency: str
    rates: dict[str, Decimal]
    as_of: Optional[datetime] = None


@dataclass
class ConversionResult:
    """Result of converting an amount into the accounting currency."""

    canonical_amount: Decimal
    rate: Decimal
    original_amount: Decimal
    original_currency: str


@dataclass
class BalanceLine:
    """Another member's position as seen from one member's summary."""

    member_id: str
    name: str
    amount: Decimal


@dataclass
class BalanceSummary:
    """
    One member's view of the trip balances.

    creditors have a positive net balance (the group owes them),
    debtors a negative one. Amounts are absolute values.
    """

    member_id: str
    net_balance: Decimal
    creditors: list[BalanceLine] = field(default_factory=list)
    debtors: list[BalanceLine] = field(default_factory=list)
