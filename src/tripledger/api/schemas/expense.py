"""Pydantic schemas for expense endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, Field, field_validator

from tripledger.domain.models.enums import SplitPolicy


class ExpenseCreateRequest(BaseModel):
    """Request schema for adding an expense."""

    payer_id: str = Field(..., min_length=1, description="Member who paid")
    description: str = Field(..., min_length=1, max_length=500, description="What was paid for")
    original_amount: Decimal = Field(
        ..., gt=0, max_digits=18, description="Amount in the original currency"
    )
    original_currency: str = Field(..., min_length=3, max_length=3, description="ISO currency code")
    split_policy: SplitPolicy = Field(default=SplitPolicy.EQUAL, description="How to split the total")
    split_inputs: dict[str, Annotated[Decimal, Field(max_digits=18)]] = Field(
        default_factory=dict,
        description="Weights (ratio) or accounting-currency shares (fixed_amount) by member",
    )
    participants: Optional[list[str]] = Field(
        default=None,
        description="Members sharing the expense (whole roster if empty)",
    )

    @field_validator("original_currency")
    @classmethod
    def uppercase_currency(cls, v: str) -> str:
        return v.strip().upper()


class SplitResponse(BaseModel):
    """Response schema for one split."""

    model_config = {"from_attributes": True}

    split_id: Optional[str] = None
    member_id: str
    amount: Decimal
    policy: SplitPolicy
    ratio: Optional[Decimal] = None


class ExpenseResponse(BaseModel):
    """Response schema for a single expense."""

    model_config = {"from_attributes": True}

    expense_id: str
    trip_id: str
    payer_id: str
    description: str
    canonical_amount: Decimal
    original_amount: Decimal
    original_currency: str
    exchange_rate: Decimal
    splits: list[SplitResponse]
    created_at: Optional[datetime] = None


class ExpenseListResponse(BaseModel):
    """Response schema for listing expenses."""

    expenses: list[ExpenseResponse]
    count: int
