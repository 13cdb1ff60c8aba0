"""Trip expense endpoints."""

from fastapi import APIRouter, Depends

from tripledger.api.deps import get_expense_service
from tripledger.api.schemas import (
    ExpenseCreateRequest,
    ExpenseResponse,
    ExpenseListResponse,
)
from tripledger.services import ExpenseService, ExpenseCreate

router = APIRouter(prefix="/trips/{trip_id}/expenses", tags=["expenses"])


@router.post("", response_model=ExpenseResponse, status_code=201)
def add_expense(
    trip_id: str,
    request: ExpenseCreateRequest,
    service: ExpenseService = Depends(get_expense_service),
) -> ExpenseResponse:
    """Add an expense; it is converted to the accounting currency and split."""
    expense = service.add_expense(
        ExpenseCreate(
            trip_id=trip_id,
            payer_id=request.payer_id,
            description=request.description,
            original_amount=request.original_amount,
            original_currency=request.original_currency,
            split_policy=request.split_policy,
            split_inputs=request.split_inputs,
            participants=request.participants,
        )
    )
    return ExpenseResponse.model_validate(expense)


@router.get("", response_model=ExpenseListResponse)
def list_expenses(
    trip_id: str,
    service: ExpenseService = Depends(get_expense_service),
) -> ExpenseListResponse:
    """List a trip's expenses, newest first."""
    expenses = service.list_expenses(trip_id)
    return ExpenseListResponse(
        expenses=[ExpenseResponse.model_validate(e) for e in expenses],
        count=len(expenses),
    )
