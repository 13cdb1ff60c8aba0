"""Trip Ledger: shared trip expenses, currency normalization and balances."""

__version__ = "0.1.0"
