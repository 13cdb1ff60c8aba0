"""Exchange rate cache model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass
class RateCacheEntry:
    """
    Cached conversion rate for one currency.

    rate is how many units of currency buy one unit of the accounting
    currency. Each refresh overwrites the entry; no history is kept.
    """

    currency: str
    rate: Decimal
    last_updated: datetime
