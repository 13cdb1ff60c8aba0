"""Exchange rate endpoints."""

from fastapi import APIRouter, Depends

from tripledger.api.deps import get_expense_service
from tripledger.api.schemas import RateResponse, CurrencyListResponse
from tripledger.config.settings import get_settings
from tripledger.services import ExpenseService

router = APIRouter(prefix="/rates", tags=["rates"])


@router.get("", response_model=CurrencyListResponse)
def list_currencies(
    service: ExpenseService = Depends(get_expense_service),
) -> CurrencyListResponse:
    """Currencies expenses can be recorded in."""
    return CurrencyListResponse(
        currencies=service.list_currencies(),
        accounting_currency=get_settings().get_accounting_currency(),
    )


@router.get("/{currency}", response_model=RateResponse)
def get_rate(
    currency: str,
    service: ExpenseService = Depends(get_expense_service),
) -> RateResponse:
    """Units of currency per one unit of the accounting currency."""
    rate = service.get_rate(currency)
    return RateResponse(
        currency=currency.strip().upper(),
        accounting_currency=get_settings().get_accounting_currency(),
        rate=rate,
    )
