"""Core utilities and shared functionality."""

from tripledger.core.timezone import (
    now_utc,
    to_utc,
    parse_datetime_utc,
    UTC,
)
from tripledger.core.money import (
    CENT,
    MONEY_TOLERANCE,
    round_money,
    round_rate,
    normalize_currency,
)
from tripledger.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    UnsupportedCurrencyError,
    InvalidSplitError,
    SplitMismatchError,
    UnknownMemberError,
    RateProviderUnavailableError,
)

__all__ = [
    "now_utc",
    "to_utc",
    "parse_datetime_utc",
    "UTC",
    "CENT",
    "MONEY_TOLERANCE",
    "round_money",
    "round_rate",
    "normalize_currency",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "UnsupportedCurrencyError",
    "InvalidSplitError",
    "SplitMismatchError",
    "UnknownMemberError",
    "RateProviderUnavailableError",
]
