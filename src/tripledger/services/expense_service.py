"""Expense service: records expenses and derives trip balances."""

import logging
import uuid
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from tripledger.core.exceptions import ValidationError, NotFoundError
from tripledger.core.timezone import now_utc
from tripledger.domain.models import Expense, SplitPolicy, Trip, TripMember
from tripledger.domain.views import BalanceSummary
from tripledger.repositories.protocols import ExpenseRepository, TripRepository
from tripledger.services.balance_ledger import compute_balances, summarize_balances
from tripledger.services.currency_converter import CurrencyConverter
from tripledger.services.split_allocator import SplitAllocator

logger = logging.getLogger(__name__)


@dataclass
class ExpenseCreate:
    """Input data for adding an expense to a trip."""

    trip_id: str
    payer_id: str
    description: str
    original_amount: Decimal
    original_currency: str
    split_policy: SplitPolicy = SplitPolicy.EQUAL
    # Weights (RATIO) or exact accounting-currency shares (FIXED_AMOUNT)
    split_inputs: dict[str, Decimal] = field(default_factory=dict)
    # Members sharing the expense; defaults to the whole roster
    participants: Optional[list[str]] = None


class ExpenseService:
    """
    Service for the trip expense ledger.

    Adding an expense converts it to the accounting currency, allocates the
    canonical total across members and persists expense and splits together.
    Balances are always recomputed from the stored expenses.
    """

    def __init__(
        self,
        trip_repo: TripRepository,
        expense_repo: ExpenseRepository,
        converter: CurrencyConverter,
        allocator: Optional[SplitAllocator] = None,
    ):
        self._trip_repo = trip_repo
        self._expense_repo = expense_repo
        self._converter = converter
        self._allocator = allocator or SplitAllocator()

    def add_expense(self, data: ExpenseCreate) -> Expense:
        """
        Add a new expense to a trip.

        All validation, conversion and allocation happens before anything
        is written, so a rejected expense leaves no trace.
        """
        self._get_trip(data.trip_id)
        roster = [m.member_id for m in self._trip_repo.list_members(data.trip_id)]

        description = (data.description or "").strip()
        if not description:
            raise ValidationError("Description is required")
        if data.payer_id not in roster:
            raise ValidationError(f"Payer {data.payer_id} is not a member of trip {data.trip_id}")

        participants = self._resolve_participants(data.participants, roster)

        conversion = self._converter.convert_to_accounting(
            data.original_amount,
            data.original_currency,
        )
        splits = self._allocator.allocate(
            conversion.canonical_amount,
            data.split_policy,
            participants,
            data.split_inputs,
        )

        expense_id = str(uuid.uuid4())
        for split in splits:
            split.split_id = str(uuid.uuid4())
            split.expense_id = expense_id

        expense = Expense(
            expense_id=expense_id,
            trip_id=data.trip_id,
            payer_id=data.payer_id,
            description=description,
            canonical_amount=conversion.canonical_amount,
            original_amount=conversion.original_amount,
            original_currency=conversion.original_currency,
            exchange_rate=conversion.rate,
            splits=splits,
            created_at=now_utc(),
        )
        created = self._expense_repo.create(expense)
        logger.info(
            "Added expense %s to trip %s: %s %s -> %s %s",
            created.expense_id,
            created.trip_id,
            created.original_amount,
            created.original_currency,
            created.canonical_amount,
            self._converter.accounting_currency,
        )
        return created

    def list_expenses(self, trip_id: str) -> list[Expense]:
        """List a trip's expenses, newest first."""
        self._get_trip(trip_id)
        return self._expense_repo.list_by_trip(trip_id)

    def get_balances(self, trip_id: str) -> dict[str, Decimal]:
        """Net balance per member of a trip, in roster order."""
        self._get_trip(trip_id)
        members = [m.member_id for m in self._trip_repo.list_members(trip_id)]
        return compute_balances(members, self._expense_repo.list_by_trip(trip_id))

    def get_balance_summary(self, trip_id: str, member_id: str) -> BalanceSummary:
        """One member's view of who is owed and who owes within a trip."""
        self._get_trip(trip_id)
        roster = self._trip_repo.list_members(trip_id)
        if member_id not in {m.member_id for m in roster}:
            raise NotFoundError("Member", member_id)

        balances = compute_balances(
            [m.member_id for m in roster],
            self._expense_repo.list_by_trip(trip_id),
        )
        return summarize_balances(balances, member_id, self._display_names(roster))

    def get_rate(self, currency: str) -> Decimal:
        """Current rate for a currency against the accounting currency."""
        return self._converter.get_rate(currency)

    def list_currencies(self) -> list[str]:
        """Currencies available for new expenses."""
        return self._converter.list_currencies()

    def _get_trip(self, trip_id: str) -> Trip:
        trip = self._trip_repo.get_by_id(trip_id)
        if not trip:
            raise NotFoundError("Trip", trip_id)
        return trip

    @staticmethod
    def _resolve_participants(participants: Optional[list[str]], roster: list[str]) -> list[str]:
        """Participants in roster order; the whole roster when not given."""
        if not participants:
            return list(roster)
        outsiders = sorted(set(participants) - set(roster))
        if outsiders:
            raise ValidationError(f"Not members of this trip: {', '.join(outsiders)}")
        chosen = set(participants)
        return [member_id for member_id in roster if member_id in chosen]

    @staticmethod
    def _display_names(roster: list[TripMember]) -> dict[str, str]:
        return {m.member_id: m.display_name for m in roster if m.display_name}
