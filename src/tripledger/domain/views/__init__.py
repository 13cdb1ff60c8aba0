"""View models for service outputs."""

from tripledger.domain.views.ledger import (
    RateTable,
    ConversionResult,
    BalanceLine,
    BalanceSummary,
)

__all__ = [
    "RateTable",
    "ConversionResult",
    "BalanceLine",
    "BalanceSummary",
]
