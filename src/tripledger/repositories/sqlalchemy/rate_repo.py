"""SQLAlchemy implementation of RateRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tripledger.core.timezone import to_utc
from tripledger.domain.models import RateCacheEntry
from tripledger.repositories.sqlalchemy.orm_models import ExchangeRateCacheORM


class SqlAlchemyRateRepository:
    """SQLAlchemy-backed exchange rate cache."""

    def __init__(self, db: Session):
        self._db = db

    def get(self, currency: str) -> Optional[RateCacheEntry]:
        """Get the cached entry for a currency."""
        orm_rate = (
            self._db.query(ExchangeRateCacheORM)
            .filter(ExchangeRateCacheORM.currency == currency)
            .first()
        )
        return self._to_domain(orm_rate) if orm_rate else None

    def list_all(self) -> list[RateCacheEntry]:
        """List all cached entries ordered by currency."""
        orm_rates = (
            self._db.query(ExchangeRateCacheORM)
            .order_by(ExchangeRateCacheORM.currency)
            .all()
        )
        return [self._to_domain(r) for r in orm_rates]

    def upsert_many(self, entries: list[RateCacheEntry]) -> None:
        """
        Insert or overwrite entries by currency in a single transaction.

        All rows go out in one INSERT .. ON CONFLICT DO UPDATE statement, so
        rows committed meanwhile by another session are overwritten instead
        of colliding on the primary key (last write wins).
        """
        if not entries:
            return

        rows = [
            {"currency": e.currency, "rate": e.rate, "last_updated": e.last_updated}
            for e in entries
        ]

        try:
            if self._db.get_bind().dialect.name == "sqlite":
                stmt = sqlite_insert(ExchangeRateCacheORM).values(rows)
                stmt = stmt.on_conflict_do_update(
                    index_elements=[ExchangeRateCacheORM.currency],
                    set_={
                        "rate": stmt.excluded.rate,
                        "last_updated": stmt.excluded.last_updated,
                    },
                )
                self._db.execute(stmt)
            else:
                for row in rows:
                    self._db.merge(ExchangeRateCacheORM(**row))
            self._db.commit()
        except SQLAlchemyError:
            self._db.rollback()
            raise

    @staticmethod
    def _to_domain(orm: ExchangeRateCacheORM) -> RateCacheEntry:
        """Convert ORM model to domain model."""
        return RateCacheEntry(
            currency=orm.currency,
            rate=Decimal(str(orm.rate)),
            last_updated=to_utc(orm.last_updated),
        )
