"""Balance calculations for transfers and reallocations.

Every function here is pure: it reads the balance set it is given and
returns a new list. Entries are frozen dataclasses, so "updating" an entry
means swapping in a replacement at the same position.
"""

import logging
import math
from typing import Optional, Sequence

from fundflow.domain.entities import AllocationMap, Balance, Fund, TransferRequest
from fundflow.domain.errors import BalanceContractError

logger = logging.getLogger(__name__)


def find_balance(
    balances: Sequence[Balance], fund_id: int, type_id: int
) -> Optional[Balance]:
    """Return the entry for a fund/contribution type pair, or None."""
    for entry in balances:
        if entry.fund_id == fund_id and entry.contribution_type_id == type_id:
            return entry
    return None


def get_balance(balances: Sequence[Balance], fund_id: int, type_id: int) -> float:
    """Return the monetary balance for a fund/contribution type pair (0 if absent)."""
    entry = find_balance(balances, fund_id, type_id)
    return entry.balance if entry is not None else 0.0


def get_fund_total(balances: Sequence[Balance], fund_id: int) -> float:
    """Total balance of one fund across all contribution types."""
    return sum(b.balance for b in balances if b.fund_id == fund_id)


def get_type_total(balances: Sequence[Balance], type_id: int) -> float:
    """Total balance of one contribution type across all funds."""
    return sum(b.balance for b in balances if b.contribution_type_id == type_id)


def get_grand_total(balances: Sequence[Balance]) -> float:
    """Total balance across every fund and contribution type."""
    return sum(b.balance for b in balances)


def units_from_amount(amount: float, nav: float) -> float:
    """Convert a dollar amount into units at the given NAV."""
    return amount / nav


def _require_positive(value: float, what: str) -> None:
    if not math.isfinite(value) or value <= 0:
        raise BalanceContractError(f"{what} must be a positive number, got {value!r}")


def compute_transfer(request: TransferRequest, balances: Sequence[Balance]) -> list[Balance]:
    """Compute the balance set after moving money between two funds.

    The money stays in the source contribution type: units are sold from
    (source fund, type) and bought in (target fund, same type). If the target
    entry does not exist yet it is created at the end of the set, priced at
    the source NAV.

    Args:
        request: Transfer already accepted by ``validate_transfer``
        balances: Current balance set (not modified)

    Returns:
        New balance set. An unchanged copy if there is no source entry.

    Raises:
        BalanceContractError: If the amount or a NAV involved is not a
            positive finite number
    """
    updated = list(balances)
    source_fund_id = request.source_fund_id
    type_id = request.source_type_id
    target_fund_id = request.target_fund_id

    source_index = next(
        (
            i
            for i, b in enumerate(updated)
            if b.fund_id == source_fund_id and b.contribution_type_id == type_id
        ),
        None,
    )
    if source_index is None:
        return updated

    if request.amount is None:
        raise BalanceContractError("Transfer amount is required")
    amount = float(request.amount)
    _require_positive(amount, "Transfer amount")

    source = updated[source_index]
    _require_positive(source.nav, f"NAV of fund {source.fund_id}")

    target_index = next(
        (
            i
            for i, b in enumerate(updated)
            if b.fund_id == target_fund_id and b.contribution_type_id == type_id
        ),
        None,
    )
    target_nav = updated[target_index].nav if target_index is not None else source.nav
    _require_positive(target_nav, f"NAV of fund {target_fund_id}")

    units_out = units_from_amount(amount, source.nav)
    updated[source_index] = Balance.from_units(
        source.fund_id, source.contribution_type_id, source.units - units_out, source.nav
    )

    if target_index is None:
        updated.append(Balance.from_units(target_fund_id, type_id, 0.0, target_nav))
        target_index = len(updated) - 1

    target = updated[target_index]
    units_in = units_from_amount(amount, target.nav)
    updated[target_index] = Balance.from_units(
        target.fund_id, target.contribution_type_id, target.units + units_in, target.nav
    )
    return updated


def compute_reallocation(
    allocations: AllocationMap, balances: Sequence[Balance], funds: Sequence[Fund]
) -> list[Balance]:
    """Compute the balance set after redistributing holdings by percentage.

    Each fund with a percentage receives that share of the grand total, split
    across its contribution types in proportion to what each currently holds
    (evenly when the fund holds nothing). Funds without a percentage keep
    their balances as they are; the remaining funds are not renormalized.

    Args:
        allocations: Fund ID -> percentage, already accepted by
            ``validate_reallocation``
        balances: Current balance set (not modified)
        funds: Fund reference list; determines processing order

    Returns:
        New balance set

    Raises:
        BalanceContractError: If an entry of a reallocated fund has a NAV that
            is not a positive finite number
    """
    updated = list(balances)
    total_balance = get_grand_total(updated)

    for fund in funds:
        percentage = allocations.get(fund.id)
        if percentage is None:
            continue

        target_amount = total_balance * float(percentage) / 100
        positions = [i for i, b in enumerate(updated) if b.fund_id == fund.id]
        if not positions:
            if target_amount:
                logger.warning(
                    "Fund %s has no balance entries; %.2f of the reallocation is not placed",
                    fund.id,
                    target_amount,
                )
            continue

        fund_total = sum(updated[i].balance for i in positions)
        for i in positions:
            entry = updated[i]
            _require_positive(entry.nav, f"NAV of fund {entry.fund_id}")
            if fund_total > 0:
                proportion = entry.balance / fund_total
            else:
                proportion = 1 / len(positions)
            new_balance = target_amount * proportion
            updated[i] = Balance.from_units(
                entry.fund_id,
                entry.contribution_type_id,
                units_from_amount(new_balance, entry.nav),
                entry.nav,
            )

    return updated
