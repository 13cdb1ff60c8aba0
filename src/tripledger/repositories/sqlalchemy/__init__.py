"""SQLAlchemy repository implementations."""

from tripledger.repositories.sqlalchemy.database import (
    create_ledger_engine,
    get_engine,
    get_session_factory,
    get_db,
    session_scope,
    init_db,
    reset_database,
    Base,
)
from tripledger.repositories.sqlalchemy.trip_repo import SqlAlchemyTripRepository
from tripledger.repositories.sqlalchemy.expense_repo import SqlAlchemyExpenseRepository
from tripledger.repositories.sqlalchemy.rate_repo import SqlAlchemyRateRepository

__all__ = [
    "create_ledger_engine",
    "get_engine",
    "get_session_factory",
    "get_db",
    "session_scope",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyTripRepository",
    "SqlAlchemyExpenseRepository",
    "SqlAlchemyRateRepository",
]
