"""SQLAlchemy implementation of TripRepository."""

from typing import Optional

from sqlalchemy.orm import Session

from tripledger.core.timezone import to_utc
from tripledger.domain.models import Trip, TripMember
from tripledger.repositories.sqlalchemy.orm_models import TripORM, TripMemberORM


class SqlAlchemyTripRepository:
    """SQLAlchemy-backed trip and roster repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, trip: Trip) -> Trip:
        """Persist a new trip."""
        orm_trip = TripORM(
            trip_id=trip.trip_id,
            name=trip.name,
            description=trip.description,
            created_at=trip.created_at,
        )
        self._db.add(orm_trip)
        self._db.commit()
        self._db.refresh(orm_trip)
        return self._to_domain(orm_trip)

    def get_by_id(self, trip_id: str) -> Optional[Trip]:
        """Retrieve trip by ID."""
        orm_trip = self._db.query(TripORM).filter(TripORM.trip_id == trip_id).first()
        return self._to_domain(orm_trip) if orm_trip else None

    def add_member(self, member: TripMember) -> TripMember:
        """Add a member to a trip roster (appended in join order)."""
        position = (
            self._db.query(TripMemberORM)
            .filter(TripMemberORM.trip_id == member.trip_id)
            .count()
        )
        orm_member = TripMemberORM(
            trip_id=member.trip_id,
            member_id=member.member_id,
            display_name=member.display_name,
            joined_at=member.joined_at,
            position=position,
        )
        self._db.add(orm_member)
        self._db.commit()
        self._db.refresh(orm_member)
        return self._member_to_domain(orm_member)

    def list_members(self, trip_id: str) -> list[TripMember]:
        """List the roster of a trip, in join order."""
        orm_members = (
            self._db.query(TripMemberORM)
            .filter(TripMemberORM.trip_id == trip_id)
            .order_by(TripMemberORM.position)
            .all()
        )
        return [self._member_to_domain(m) for m in orm_members]

    @staticmethod
    def _to_domain(orm: TripORM) -> Trip:
        """Convert ORM model to domain model."""
        return Trip(
            trip_id=orm.trip_id,
            name=orm.name,
            description=orm.description,
            created_at=to_utc(orm.created_at) if orm.created_at else None,
        )

    @staticmethod
    def _member_to_domain(orm: TripMemberORM) -> TripMember:
        """Convert ORM roster entry to domain model."""
        return TripMember(
            trip_id=orm.trip_id,
            member_id=orm.member_id,
            display_name=orm.display_name,
            joined_at=to_utc(orm.joined_at) if orm.joined_at else None,
        )
