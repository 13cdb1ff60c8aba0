"""
Pytest configuration and fixtures for trip ledger tests.

This module provides:
- In-memory SQLite database fixtures
- Deterministic, counting and failing exchange rate providers
- Service and repository fixtures
- Factory helpers for trips, rosters and expenses
- FastAPI test client wired to the test database
"""

import uuid
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Callable, Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from tripledger.main import app
from tripledger.api.deps import get_rate_provider
from tripledger.config.settings import Settings, set_settings, reset_settings
from tripledger.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from tripledger.repositories.sqlalchemy import orm_models  # noqa: F401
from tripledger.repositories.sqlalchemy import (
    SqlAlchemyTripRepository,
    SqlAlchemyExpenseRepository,
    SqlAlchemyRateRepository,
)
from tripledger.providers import RateProviderError
from tripledger.services import (
    RateCache,
    CurrencyConverter,
    SplitAllocator,
    ExpenseService,
)
from tripledger.domain.models import (
    Expense,
    Split,
    SplitPolicy,
    Trip,
    TripMember,
    RateCacheEntry,
)
from tripledger.domain.views import RateTable
from tripledger.core.timezone import UTC


ACCOUNTING_CURRENCY = "CAD"


# =============================================================================
# TIME HELPERS
# =============================================================================


def utc_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create an aware UTC datetime."""
    return UTC.localize(datetime(year, month, day, hour, minute, second))


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests."""
    return utc_datetime(2024, 6, 15, 14, 30, 0)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    # Reset settings for clean state
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def trip_repo(test_session) -> SqlAlchemyTripRepository:
    """Provide test TripRepository."""
    return SqlAlchemyTripRepository(test_session)


@pytest.fixture
def expense_repo(test_session) -> SqlAlchemyExpenseRepository:
    """Provide test ExpenseRepository."""
    return SqlAlchemyExpenseRepository(test_session)


@pytest.fixture
def rate_repo(test_session) -> SqlAlchemyRateRepository:
    """Provide test RateRepository."""
    return SqlAlchemyRateRepository(test_session)


# =============================================================================
# RATE PROVIDER FIXTURES
# =============================================================================


class DeterministicRateProvider:
    """
    Deterministic rate provider for testing.

    Quotes a fixed table against CAD (units per 1 CAD) and records
    every requested base currency in `calls`.
    """

    FIXED_RATES = {
        "CAD": Decimal("1"),
        "USD": Decimal("0.73"),
        "EUR": Decimal("0.675"),
        "MXN": Decimal("18.5"),
        "JPY": Decimal("108.25"),
    }

    def __init__(self, rates: Optional[dict[str, Decimal]] = None):
        self.rates = dict(rates) if rates is not None else dict(self.FIXED_RATES)
        self.calls: list[str] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def get_latest_rates(self, base_currency: str) -> RateTable:
        self.calls.append(base_currency)
        return RateTable(
            base_currency=base_currency,
            rates=dict(self.rates),
            as_of=utc_datetime(2024, 6, 15, 0, 0, 0),
        )


class FailingRateProvider:
    """Rate provider that always fails, counting attempts."""

    def __init__(self):
        self.calls: list[str] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def get_latest_rates(self, base_currency: str) -> RateTable:
        self.calls.append(base_currency)
        raise RateProviderError("Network unavailable")


@pytest.fixture
def deterministic_provider() -> DeterministicRateProvider:
    """Provide deterministic rate provider."""
    return DeterministicRateProvider()


@pytest.fixture
def failing_provider() -> FailingRateProvider:
    """Provide a rate provider that always fails."""
    return FailingRateProvider()


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def rate_cache(deterministic_provider, rate_repo) -> RateCache:
    """Provide test RateCache backed by the deterministic provider."""
    return RateCache(
        provider=deterministic_provider,
        rate_repo=rate_repo,
        accounting_currency=ACCOUNTING_CURRENCY,
        max_age_hours=24,
    )


@pytest.fixture
def converter(rate_cache) -> CurrencyConverter:
    """Provide test CurrencyConverter."""
    return CurrencyConverter(rate_cache=rate_cache)


@pytest.fixture
def allocator() -> SplitAllocator:
    """Provide SplitAllocator."""
    return SplitAllocator()


@pytest.fixture
def expense_service(trip_repo, expense_repo, converter, allocator) -> ExpenseService:
    """Provide test ExpenseService."""
    return ExpenseService(
        trip_repo=trip_repo,
        expense_repo=expense_repo,
        converter=converter,
        allocator=allocator,
    )


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def trip_factory(trip_repo) -> Callable[..., Trip]:
    """Factory for creating trips with a roster."""

    def _create_trip(
        members: Optional[list[tuple[str, str]]] = None,
        name: Optional[str] = None,
    ) -> Trip:
        if name is None:
            name = f"Test Trip {uuid.uuid4().hex[:8]}"
        trip = trip_repo.create(Trip(trip_id=str(uuid.uuid4()), name=name))
        for member_id, display_name in members or []:
            trip_repo.add_member(
                TripMember(
                    trip_id=trip.trip_id,
                    member_id=member_id,
                    display_name=display_name,
                )
            )
        return trip

    return _create_trip


@pytest.fixture
def sample_trip(trip_factory) -> Trip:
    """A trip with three members: alice, bob and carol (in join order)."""
    return trip_factory(
        members=[("alice", "Alice"), ("bob", "Bob"), ("carol", "Carol")],
        name="Lisbon",
    )


@pytest.fixture
def seed_rate(rate_repo) -> Callable[..., RateCacheEntry]:
    """Write a rate cache entry directly, with a chosen age."""

    def _seed(
        currency: str,
        rate: Decimal,
        age: timedelta = timedelta(hours=1),
    ) -> RateCacheEntry:
        entry = RateCacheEntry(
            currency=currency,
            rate=rate,
            last_updated=datetime.now(UTC) - age,
        )
        rate_repo.upsert_many([entry])
        return entry

    return _seed


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(test_engine, deterministic_provider) -> TestClient:
    """Provide FastAPI test client with test database and deterministic rates."""
    set_settings(Settings(database_url="sqlite://", accounting_currency=ACCOUNTING_CURRENCY))
    reset_database()
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_rate_provider] = lambda: deterministic_provider
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_database()
    reset_settings()


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def assert_decimal_equal(
    actual: Decimal,
    expected: Decimal,
    tolerance: Decimal = Decimal("0.01"),
) -> None:
    """Assert two Decimals are equal within tolerance."""
    diff = abs(actual - expected)
    assert diff <= tolerance, f"Expected {expected}, got {actual} (diff={diff})"


def build_expense(
    payer_id: str,
    amount: str,
    shares: dict[str, str],
    policy: SplitPolicy = SplitPolicy.EQUAL,
    expense_id: Optional[str] = None,
) -> Expense:
    """Build an in-memory Expense in the accounting currency."""
    canonical = Decimal(amount)
    return Expense(
        expense_id=expense_id or str(uuid.uuid4()),
        trip_id="trip-1",
        payer_id=payer_id,
        description="Test expense",
        canonical_amount=canonical,
        original_amount=canonical,
        original_currency=ACCOUNTING_CURRENCY,
        exchange_rate=Decimal("1"),
        splits=[
            Split(member_id=member_id, amount=Decimal(share), policy=policy)
            for member_id, share in shares.items()
        ],
    )
