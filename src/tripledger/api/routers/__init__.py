"""API routers package."""

from tripledger.api.routers.expenses import router as expenses_router
from tripledger.api.routers.balances import router as balances_router
from tripledger.api.routers.rates import router as rates_router

__all__ = [
    "expenses_router",
    "balances_router",
    "rates_router",
]
