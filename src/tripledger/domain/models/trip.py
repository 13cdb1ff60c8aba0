"""Trip and roster domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class Trip:
    """
    A trip groups members and the expenses they share.

    Trip lifecycle is owned by the surrounding application; the ledger
    only reads trips and their rosters.
    """

    trip_id: str
    name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = field(default=None)


@dataclass
class TripMember:
    """A member of a trip roster, identified by an opaque member_id."""

    trip_id: str
    member_id: str
    display_name: Optional[str] = None
    joined_at: Optional[datetime] = field(default=None)
