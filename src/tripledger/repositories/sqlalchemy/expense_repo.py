"""SQLAlchemy implementation of ExpenseRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from tripledger.core.timezone import to_utc
from tripledger.domain.models import Expense, Split
from tripledger.repositories.sqlalchemy.orm_models import ExpenseORM, ExpenseSplitORM


class SqlAlchemyExpenseRepository:
    """SQLAlchemy-backed expense repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, expense: Expense) -> Expense:
        """Persist a new expense and all of its splits in one commit."""
        orm_expense = self._to_orm(expense)
        self._db.add(orm_expense)
        try:
            self._db.commit()
        except SQLAlchemyError:
            self._db.rollback()
            raise
        self._db.refresh(orm_expense)
        return self._to_domain(orm_expense)

    def get_by_id(self, expense_id: str) -> Optional[Expense]:
        """Retrieve expense (with splits) by ID."""
        orm_expense = (
            self._db.query(ExpenseORM)
            .options(selectinload(ExpenseORM.splits))
            .filter(ExpenseORM.expense_id == expense_id)
            .first()
        )
        return self._to_domain(orm_expense) if orm_expense else None

    def list_by_trip(self, trip_id: str) -> list[Expense]:
        """List all expenses of a trip with splits, newest first."""
        orm_expenses = (
            self._db.query(ExpenseORM)
            .options(selectinload(ExpenseORM.splits))
            .filter(ExpenseORM.trip_id == trip_id)
            .order_by(ExpenseORM.created_at.desc(), ExpenseORM.expense_id)
            .all()
        )
        return [self._to_domain(e) for e in orm_expenses]

    def _to_orm(self, expense: Expense) -> ExpenseORM:
        """Convert domain model to ORM model."""
        return ExpenseORM(
            expense_id=expense.expense_id,
            trip_id=expense.trip_id,
            payer_id=expense.payer_id,
            description=expense.description,
            canonical_amount=expense.canonical_amount,
            original_amount=expense.original_amount,
            original_currency=expense.original_currency,
            exchange_rate=expense.exchange_rate,
            created_at=expense.created_at,
            splits=[
                ExpenseSplitORM(
                    split_id=split.split_id,
                    expense_id=expense.expense_id,
                    member_id=split.member_id,
                    amount=split.amount,
                    policy=split.policy,
                    ratio=split.ratio,
                    position=position,
                )
                for position, split in enumerate(expense.splits)
            ],
        )

    @staticmethod
    def _to_domain(orm: ExpenseORM) -> Expense:
        """Convert ORM model to domain model."""
        return Expense(
            expense_id=orm.expense_id,
            trip_id=orm.trip_id,
            payer_id=orm.payer_id,
            description=orm.description,
            canonical_amount=Decimal(str(orm.canonical_amount)),
            original_amount=Decimal(str(orm.original_amount)),
            original_currency=orm.original_currency,
            exchange_rate=Decimal(str(orm.exchange_rate)),
            splits=[SqlAlchemyExpenseRepository._split_to_domain(s) for s in orm.splits],
            created_at=to_utc(orm.created_at) if orm.created_at else None,
        )

    @staticmethod
    def _split_to_domain(orm: ExpenseSplitORM) -> Split:
        """Convert ORM split to domain model."""
        return Split(
            member_id=orm.member_id,
            amount=Decimal(str(orm.amount)) if orm.amount else Decimal("0.00"),
            policy=orm.policy,
            ratio=Decimal(str(orm.ratio)) if orm.ratio is not None else None,
            split_id=orm.split_id,
            expense_id=orm.expense_id,
        )
