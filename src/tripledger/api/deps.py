"""Dependency injection for FastAPI."""

from fastapi import Depends
from sqlalchemy.orm import Session

from tripledger.config.settings import get_settings
from tripledger.providers import ExchangeRateApiProvider, RateProvider, StubRateProvider
from tripledger.repositories.sqlalchemy.database import get_db
from tripledger.repositories.sqlalchemy import (
    SqlAlchemyTripRepository,
    SqlAlchemyExpenseRepository,
    SqlAlchemyRateRepository,
)
from tripledger.services import (
    RateCache,
    CurrencyConverter,
    ExpenseService,
)


def get_trip_repo(db: Session = Depends(get_db)) -> SqlAlchemyTripRepository:
    """Provide TripRepository instance."""
    return SqlAlchemyTripRepository(db)


def get_expense_repo(db: Session = Depends(get_db)) -> SqlAlchemyExpenseRepository:
    """Provide ExpenseRepository instance."""
    return SqlAlchemyExpenseRepository(db)


def get_rate_repo(db: Session = Depends(get_db)) -> SqlAlchemyRateRepository:
    """Provide RateRepository instance."""
    return SqlAlchemyRateRepository(db)


def get_rate_provider() -> RateProvider:
    """Provide RateProvider instance (stub for offline operation when no API key is set)."""
    settings = get_settings()
    if settings.exchange_rate_api_key:
        return ExchangeRateApiProvider(
            api_key=settings.exchange_rate_api_key,
            api_url=settings.exchange_rate_api_url,
            timeout_seconds=settings.rate_provider_timeout_seconds,
        )
    return StubRateProvider()


def get_rate_cache(
    provider: RateProvider = Depends(get_rate_provider),
    rate_repo: SqlAlchemyRateRepository = Depends(get_rate_repo),
) -> RateCache:
    """Provide RateCache instance."""
    settings = get_settings()
    return RateCache(
        provider=provider,
        rate_repo=rate_repo,
        accounting_currency=settings.get_accounting_currency(),
        max_age_hours=settings.rate_cache_max_age_hours,
    )


def get_currency_converter(
    rate_cache: RateCache = Depends(get_rate_cache),
) -> CurrencyConverter:
    """Provide CurrencyConverter instance."""
    return CurrencyConverter(rate_cache=rate_cache)


def get_expense_service(
    trip_repo: SqlAlchemyTripRepository = Depends(get_trip_repo),
    expense_repo: SqlAlchemyExpenseRepository = Depends(get_expense_repo),
    converter: CurrencyConverter = Depends(get_currency_converter),
) -> ExpenseService:
    """Provide ExpenseService instance."""
    return ExpenseService(
        trip_repo=trip_repo,
        expense_repo=expense_repo,
        converter=converter,
    )
