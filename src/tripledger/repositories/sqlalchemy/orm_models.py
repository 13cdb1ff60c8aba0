"""SQLAlchemy ORM model definitions."""

from decimal import Decimal

from sqlalchemy import (
    Column,
    String,
    DateTime,
    Integer,
    Text,
    ForeignKey,
    Numeric,
    Enum as SqlEnum,
)
from sqlalchemy.orm import relationship

from tripledger.core.timezone import now_utc
from tripledger.repositories.sqlalchemy.database import Base
from tripledger.domain.models.enums import SplitPolicy


class TripORM(Base):
    """SQLAlchemy model for Trip."""

    __tablename__ = "trips"

    trip_id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_utc)

    members = relationship("TripMemberORM", back_populates="trip", cascade="all, delete-orphan")
    expenses = relationship("ExpenseORM", back_populates="trip", cascade="all, delete-orphan")


class TripMemberORM(Base):
    """SQLAlchemy model for a roster entry."""

    __tablename__ = "trip_members"

    trip_id = Column(String(36), ForeignKey("trips.trip_id"), primary_key=True)
    member_id = Column(String(36), primary_key=True)
    display_name = Column(String(255), nullable=True)
    joined_at = Column(DateTime, nullable=False, default=now_utc)
    # Join order within the roster
    position = Column(Integer, nullable=False, default=0)

    trip = relationship("TripORM", back_populates="members")


class ExpenseORM(Base):
    """SQLAlchemy model for Expense (ledger entry)."""

    __tablename__ = "expenses"

    expense_id = Column(String(36), primary_key=True)
    trip_id = Column(String(36), ForeignKey("trips.trip_id"), nullable=False, index=True)
    payer_id = Column(String(36), nullable=False)
    description = Column(Text, nullable=False)
    canonical_amount = Column(Numeric(precision=18, scale=2), nullable=False)
    original_amount = Column(Numeric(precision=18, scale=2), nullable=False)
    original_currency = Column(String(3), nullable=False)
    exchange_rate = Column(Numeric(precision=18, scale=6), nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_utc)

    trip = relationship("TripORM", back_populates="expenses")
    splits = relationship(
        "ExpenseSplitORM",
        back_populates="expense",
        cascade="all, delete-orphan",
        order_by="ExpenseSplitORM.position",
    )


class ExpenseSplitORM(Base):
    """SQLAlchemy model for one member's share of an expense."""

    __tablename__ = "expense_splits"

    split_id = Column(String(36), primary_key=True)
    expense_id = Column(String(36), ForeignKey("expenses.expense_id"), nullable=False, index=True)
    member_id = Column(String(36), nullable=False)
    amount = Column(Numeric(precision=18, scale=2), nullable=False, default=Decimal("0"))
    policy = Column(SqlEnum(SplitPolicy), nullable=False)
    ratio = Column(Numeric(precision=18, scale=6), nullable=True)
    # Roster order within the expense
    position = Column(Integer, nullable=False, default=0)

    expense = relationship("ExpenseORM", back_populates="splits")


class ExchangeRateCacheORM(Base):
    """SQLAlchemy model for RateCacheEntry (one row per currency)."""

    __tablename__ = "exchange_rate_cache"

    currency = Column(String(3), primary_key=True)
    rate = Column(Numeric(precision=24, scale=10), nullable=False)
    last_updated = Column(DateTime, nullable=False)
