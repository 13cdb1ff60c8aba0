"""Service layer - business logic orchestration."""

from tripledger.services.rate_cache import RateCache
from tripledger.services.currency_converter import CurrencyConverter
from tripledger.services.split_allocator import SplitAllocator
from tripledger.services.balance_ledger import compute_balances, summarize_balances
from tripledger.services.expense_service import ExpenseService, ExpenseCreate

__all__ = [
    "RateCache",
    "CurrencyConverter",
    "SplitAllocator",
    "compute_balances",
    "summarize_balances",
    "ExpenseService",
    "ExpenseCreate",
]
