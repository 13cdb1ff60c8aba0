"""Split allocation of an expense total across members."""

from decimal import Decimal
from typing import Mapping, Optional, Sequence, Union

from tripledger.core.exceptions import InvalidSplitError, SplitMismatchError
from tripledger.core.money import (
    CENT,
    MONEY_TOLERANCE,
    MAX_MONEY,
    ZERO,
    to_decimal,
    round_money,
    has_cent_precision,
)
from tripledger.domain.models import Split, SplitPolicy


class SplitAllocator:
    """
    Divides a canonical total into per-member splits.

    - EQUAL: total / n per member
    - RATIO: total * weight / sum(weights) per member
    - FIXED_AMOUNT: caller-supplied shares, validated against the total

    EQUAL and RATIO shares are rounded to cents, then the residual is
    handed out one cent at a time in roster order, starting with the
    first member, so the splits always sum to the total exactly.
    FIXED_AMOUNT shares are never redistributed.

    Pure computation: nothing is persisted here.
    """

    def allocate(
        self,
        total: Decimal,
        policy: Union[SplitPolicy, str],
        members: Sequence[str],
        inputs: Optional[Mapping[str, Decimal]] = None,
    ) -> list[Split]:
        """
        Allocate total across members under policy.

        Args:
            total: Positive canonical amount with at most 2 decimal places
            policy: EQUAL, RATIO or FIXED_AMOUNT
            members: Participating member IDs, in roster order
            inputs: Weights (RATIO) or exact shares (FIXED_AMOUNT) by member

        Returns:
            Splits in roster order
        """
        total = self._validate_total(total)
        members = self._validate_members(members)
        try:
            policy = SplitPolicy(policy)
        except ValueError as exc:
            raise InvalidSplitError(f"Unknown split policy: {policy!r}") from exc

        if policy == SplitPolicy.EQUAL:
            return self._allocate_equal(total, members)
        if policy == SplitPolicy.RATIO:
            return self._allocate_ratio(total, members, inputs or {})
        return self._allocate_fixed(total, members, inputs or {})

    def _allocate_equal(self, total: Decimal, members: list[str]) -> list[Split]:
        share = round_money(total / len(members))
        shares = [share] * len(members)
        self._reconcile(total, shares, eligible=range(len(members)))
        return [
            Split(member_id=member_id, amount=amount, policy=SplitPolicy.EQUAL)
            for member_id, amount in zip(members, shares)
        ]

    def _allocate_ratio(
        self,
        total: Decimal,
        members: list[str],
        inputs: Mapping[str, Decimal],
    ) -> list[Split]:
        self._check_input_members(inputs, members)

        weights = []
        for member_id in members:
            weight = self._to_number(inputs.get(member_id, ZERO), member_id, "ratio")
            if weight < 0:
                raise InvalidSplitError(f"Ratio for member {member_id} cannot be negative")
            if weight > MAX_MONEY:
                raise InvalidSplitError(f"Ratio for member {member_id} is too large")
            weights.append(weight)

        total_weight = sum(weights, Decimal("0"))
        if total_weight == 0:
            raise InvalidSplitError("Ratio weights must not all be zero")

        shares = [round_money(total * weight / total_weight) for weight in weights]
        self._reconcile(
            total,
            shares,
            eligible=[i for i, weight in enumerate(weights) if weight > 0],
        )
        return [
            Split(member_id=member_id, amount=amount, policy=SplitPolicy.RATIO, ratio=weight)
            for member_id, amount, weight in zip(members, shares, weights)
        ]

    def _allocate_fixed(
        self,
        total: Decimal,
        members: list[str],
        inputs: Mapping[str, Decimal],
    ) -> list[Split]:
        if not inputs:
            raise InvalidSplitError("Fixed-amount split requires an amount per member")
        self._check_input_members(inputs, members)

        splits = []
        for member_id in members:
            if member_id not in inputs:
                continue
            amount = self._to_number(inputs[member_id], member_id, "amount")
            if amount < 0:
                raise InvalidSplitError(f"Amount for member {member_id} cannot be negative")
            if amount > MAX_MONEY:
                raise InvalidSplitError(
                    f"Amount for member {member_id} must not exceed {MAX_MONEY}"
                )
            if not has_cent_precision(amount):
                raise InvalidSplitError(
                    f"Amount for member {member_id} must have at most 2 decimal places"
                )
            if amount > 0:
                splits.append(
                    Split(
                        member_id=member_id,
                        amount=round_money(amount),
                        policy=SplitPolicy.FIXED_AMOUNT,
                    )
                )

        if not splits:
            raise InvalidSplitError("Fixed-amount split requires at least one positive amount")

        allocated = sum((s.amount for s in splits), ZERO)
        if abs(allocated - total) > MONEY_TOLERANCE:
            raise SplitMismatchError(str(total), str(allocated))
        return splits

    @staticmethod
    def _reconcile(total: Decimal, shares: list[Decimal], eligible: Sequence[int]) -> None:
        """Spread the rounding residual over eligible shares, one cent each, in order."""
        residual = total - sum(shares, ZERO)
        if residual == 0:
            return

        step = CENT if residual > 0 else -CENT
        remaining = int(abs(residual) / CENT)
        while remaining:
            progressed = False
            for i in eligible:
                if remaining == 0:
                    break
                if shares[i] + step < 0:
                    continue
                shares[i] += step
                remaining -= 1
                progressed = True
            if not progressed:
                raise InvalidSplitError(f"Cannot reconcile split residual of {residual}")

    @staticmethod
    def _validate_total(total: Decimal) -> Decimal:
        try:
            total = to_decimal(total)
        except ValueError as exc:
            raise InvalidSplitError(str(exc)) from exc
        if not total.is_finite() or total <= 0:
            raise InvalidSplitError("Split total must be greater than 0")
        if total > MAX_MONEY:
            raise InvalidSplitError(f"Split total must not exceed {MAX_MONEY}")
        if not has_cent_precision(total):
            raise InvalidSplitError("Split total must have at most 2 decimal places")
        return round_money(total)

    @staticmethod
    def _validate_members(members: Sequence[str]) -> list[str]:
        members = list(members)
        if not members:
            raise InvalidSplitError("At least one member is required to split an expense")
        if any(not m for m in members):
            raise InvalidSplitError("Member IDs must not be empty")
        if len(set(members)) != len(members):
            raise InvalidSplitError("Members must not be listed more than once")
        return members

    @staticmethod
    def _check_input_members(inputs: Mapping[str, Decimal], members: list[str]) -> None:
        unknown = sorted(set(inputs) - set(members))
        if unknown:
            raise InvalidSplitError(f"Split input for non-participants: {', '.join(unknown)}")

    @staticmethod
    def _to_number(value: Decimal, member_id: str, field_name: str) -> Decimal:
        try:
            number = to_decimal(value)
        except ValueError as exc:
            raise InvalidSplitError(f"Invalid {field_name} for member {member_id}") from exc
        if not number.is_finite():
            raise InvalidSplitError(f"Invalid {field_name} for member {member_id}")
        return number
