"""Trip balance endpoints."""

from fastapi import APIRouter, Depends

from tripledger.api.deps import get_expense_service
from tripledger.api.schemas import (
    BalancesResponse,
    BalanceLineResponse,
    BalanceSummaryResponse,
)
from tripledger.config.settings import get_settings
from tripledger.services import ExpenseService

router = APIRouter(prefix="/trips/{trip_id}/balances", tags=["balances"])


@router.get("", response_model=BalancesResponse)
def get_balances(
    trip_id: str,
    service: ExpenseService = Depends(get_expense_service),
) -> BalancesResponse:
    """Net balance of every member: positive is owed, negative owes."""
    return BalancesResponse(
        trip_id=trip_id,
        currency=get_settings().get_accounting_currency(),
        balances=service.get_balances(trip_id),
    )


@router.get("/{member_id}", response_model=BalanceSummaryResponse)
def get_balance_summary(
    trip_id: str,
    member_id: str,
    service: ExpenseService = Depends(get_expense_service),
) -> BalanceSummaryResponse:
    """One member's view of who is owed and who owes."""
    summary = service.get_balance_summary(trip_id, member_id)
    return BalanceSummaryResponse(
        member_id=summary.member_id,
        currency=get_settings().get_accounting_currency(),
        net_balance=summary.net_balance,
        creditors=[BalanceLineResponse.model_validate(line) for line in summary.creditors],
        debtors=[BalanceLineResponse.model_validate(line) for line in summary.debtors],
    )
