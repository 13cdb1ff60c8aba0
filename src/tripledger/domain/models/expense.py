"""Expense and Split domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from tripledger.domain.models.enums import SplitPolicy


@dataclass
class Split:
    """
    One member's share of an expense, in the accounting currency.

    ratio is only set for RATIO splits and records the member's weight.
    """

    member_id: str
    amount: Decimal
    policy: SplitPolicy
    ratio: Optional[Decimal] = None
    split_id: Optional[str] = None
    expense_id: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.policy, str):
            self.policy = SplitPolicy(self.policy)


@dataclass
class Expense:
    """
    A shared expense (source of truth for balances).

    - canonical_amount is in the accounting currency, 2 decimal places
    - exchange_rate is units of original_currency per accounting unit
    - Immutable once created
    """

    expense_id: str
    trip_id: str
    payer_id: str
    description: str
    canonical_amount: Decimal
    original_amount: Decimal
    original_currency: str
    exchange_rate: Decimal
    splits: list[Split] = field(default_factory=list)
    created_at: Optional[datetime] = field(default=None)

    @property
    def split_total(self) -> Decimal:
        """Sum of all split amounts."""
        return sum((s.amount for s in self.splits), Decimal("0.00"))
