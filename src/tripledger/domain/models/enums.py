"""Enumerations for domain models."""

from enum import Enum


class SplitPolicy(str, Enum):
    """Rules for dividing an expense across members."""

    EQUAL = "equal"
    RATIO = "ratio"
    FIXED_AMOUNT = "fixed_amount"
