"""Balance ledger: net balances derived from expense history."""

from decimal import Decimal
from typing import Iterable, Mapping, Optional

from tripledger.core.exceptions import UnknownMemberError
from tripledger.core.money import ZERO
from tripledger.domain.models import Expense
from tripledger.domain.views import BalanceLine, BalanceSummary


def compute_balances(members: Iterable[str], expenses: Iterable[Expense]) -> dict[str, Decimal]:
    """
    Compute each member's signed net balance.

    The payer is credited the full expense amount and every split member,
    the payer included, is debited their share. A payer who shares the
    expense therefore nets canonical_amount minus their own share.
    Positive = owed by the group, negative = owes.

    Never persisted; re-derive whenever needed. Decimal addition is exact,
    so the result does not depend on expense order.

    Raises:
        UnknownMemberError: a payer or split member is outside the roster
    """
    balances: dict[str, Decimal] = {member_id: ZERO for member_id in members}

    for expense in expenses:
        payer = expense.payer_id
        if payer not in balances:
            raise UnknownMemberError(payer, expense.expense_id)
        balances[payer] += expense.canonical_amount

        for split in expense.splits:
            if split.member_id not in balances:
                raise UnknownMemberError(split.member_id, expense.expense_id)
            balances[split.member_id] -= split.amount

    return balances


def summarize_balances(
    balances: Mapping[str, Decimal],
    member_id: str,
    names: Optional[Mapping[str, str]] = None,
) -> BalanceSummary:
    """
    Partition the other members into creditors and debtors for one member.

    Members with a zero balance are left out.
    """
    names = names or {}
    summary = BalanceSummary(member_id=member_id, net_balance=balances.get(member_id, ZERO))

    for other_id, balance in balances.items():
        if other_id == member_id:
            continue
        line = BalanceLine(
            member_id=other_id,
            name=names.get(other_id) or other_id,
            amount=abs(balance),
        )
        if balance > 0:
            summary.creditors.append(line)
        elif balance < 0:
            summary.debtors.append(line)

    return summary
