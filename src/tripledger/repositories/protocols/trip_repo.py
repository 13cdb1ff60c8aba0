"""Trip repository protocol."""

from typing import Protocol, Optional

from tripledger.domain.models import Trip, TripMember


class TripRepository(Protocol):
    """Interface for trip and roster data access."""

    def create(self, trip: Trip) -> Trip:
        """Persist a new trip."""
        ...

    def get_by_id(self, trip_id: str) -> Optional[Trip]:
        """Retrieve trip by ID."""
        ...

    def add_member(self, member: TripMember) -> TripMember:
        """Add a member to a trip roster."""
        ...

    def list_members(self, trip_id: str) -> list[TripMember]:
        """List the roster of a trip, in join order."""
        ...
