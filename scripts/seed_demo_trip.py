#!/usr/bin/env python3
"""
Seed a demo trip with a roster and a few multi-currency expenses.

Trips and rosters are managed outside the ledger API, so this writes the
trip through the repository layer and then records expenses through
ExpenseService exactly as the API would.

Usage (from project root, after `pip install -e .`):
  python scripts/seed_demo_trip.py
"""

import random
import sys
import uuid
from decimal import Decimal

from tripledger.config.settings import get_settings
from tripledger.config.logging_config import setup_logging
from tripledger.domain.models import SplitPolicy, Trip, TripMember
from tripledger.providers import StubRateProvider
from tripledger.repositories.sqlalchemy import (
    SqlAlchemyTripRepository,
    SqlAlchemyExpenseRepository,
    SqlAlchemyRateRepository,
    init_db,
    session_scope,
)
from tripledger.services import RateCache, CurrencyConverter, ExpenseService, ExpenseCreate


MEMBERS = [
    ("alice", "Alice"),
    ("bob", "Bob"),
    ("carol", "Carol"),
    ("dan", "Dan"),
]

# (description, currency, low, high)
EXPENSE_TEMPLATES = [
    ("Airport taxi", "MXN", 350, 900),
    ("Tacos", "MXN", 180, 600),
    ("Museum tickets", "MXN", 200, 400),
    ("Hotel night", "USD", 120, 260),
    ("Groceries", "CAD", 40, 140),
    ("Boat tour", "USD", 60, 180),
]


def seed_demo_trip(expense_count: int = 12) -> str:
    """Create a trip and record expense_count random expenses. Returns the trip ID."""
    setup_logging()
    init_db()
    settings = get_settings()

    with session_scope() as session:
        trip_repo = SqlAlchemyTripRepository(session)
        trip = trip_repo.create(
            Trip(trip_id=str(uuid.uuid4()), name="Oaxaca", description="Demo trip")
        )
        for member_id, display_name in MEMBERS:
            trip_repo.add_member(
                TripMember(trip_id=trip.trip_id, member_id=member_id, display_name=display_name)
            )
        print(f"✓ Trip '{trip.name}' created: {trip.trip_id}")

        rate_cache = RateCache(
            provider=StubRateProvider(),
            rate_repo=SqlAlchemyRateRepository(session),
            accounting_currency=settings.get_accounting_currency(),
            max_age_hours=settings.rate_cache_max_age_hours,
        )
        service = ExpenseService(
            trip_repo=trip_repo,
            expense_repo=SqlAlchemyExpenseRepository(session),
            converter=CurrencyConverter(rate_cache),
        )

        member_ids = [m for m, _ in MEMBERS]
        for _ in range(expense_count):
            description, currency, low, high = random.choice(EXPENSE_TEMPLATES)
            amount = Decimal(random.randint(low * 100, high * 100)) / 100
            policy = random.choice(list(SplitPolicy)[:2])
            inputs = {}
            if policy == SplitPolicy.RATIO:
                inputs = {m: Decimal(random.randint(1, 3)) for m in member_ids}

            expense = service.add_expense(
                ExpenseCreate(
                    trip_id=trip.trip_id,
                    payer_id=random.choice(member_ids),
                    description=description,
                    original_amount=amount,
                    original_currency=currency,
                    split_policy=policy,
                    split_inputs=inputs,
                )
            )
            print(
                f"  {expense.payer_id:>6} paid {expense.original_amount} {expense.original_currency}"
                f" -> {expense.canonical_amount} ({description}, {policy.value})"
            )

        print("\n" + "=" * 60)
        print(f"BALANCES ({settings.get_accounting_currency()})")
        print("=" * 60)
        for member_id, balance in service.get_balances(trip.trip_id).items():
            print(f"  {member_id:>6}: {balance:>10}")

        print("\nYou can now:")
        print(f"  - View expenses: GET /trips/{trip.trip_id}/expenses")
        print(f"  - View balances: GET /trips/{trip.trip_id}/balances")
        return trip.trip_id


if __name__ == "__main__":
    try:
        seed_demo_trip()
    except Exception as e:
        print(f"\n✗ Error: {e}", file=sys.stderr)
        sys.exit(1)
