"""Validation of proposed transfers and reallocations.

Validators never raise for bad input and never compute balances; they
return a :class:`ValidationResult` carrying a user-facing message.
"""

import math
from typing import AbstractSet, Sequence

from fundflow.domain import errors
from fundflow.domain.calculator import find_balance, get_balance
from fundflow.domain.entities import AllocationMap, Balance, TransferRequest, ValidationResult
from fundflow.domain.errors import RejectionReason
from fundflow.utils.amount_parser import format_currency

# Allowed distance of a reallocation total from 100%
ALLOCATION_TOLERANCE = 0.01


def _has_usable_nav(entry: Balance) -> bool:
    return math.isfinite(entry.nav) and entry.nav > 0


def validate_transfer(
    request: TransferRequest,
    balances: Sequence[Balance],
    excluded_type_ids: AbstractSet[int] = frozenset(),
) -> ValidationResult:
    """Validate a transfer against the current balances.

    Checks run in order and stop at the first failure: required fields,
    positive amount, distinct funds, sufficient balance. Then the source
    contribution type is checked against ``excluded_type_ids`` and both
    entries involved must carry a positive NAV.

    Args:
        request: Proposed transfer
        balances: Current balance set
        excluded_type_ids: Contribution types that may not be used as a source

    Returns:
        ValidationResult
    """
    if (
        request.source_fund_id is None
        or request.source_type_id is None
        or request.target_fund_id is None
        or request.amount is None
    ):
        return ValidationResult.reject(RejectionReason.MISSING_FIELD, errors.missing_transfer_fields())

    amount = request.amount
    if not math.isfinite(amount) or amount <= 0:
        return ValidationResult.reject(RejectionReason.INVALID_AMOUNT, errors.invalid_transfer_amount())

    if request.source_fund_id == request.target_fund_id:
        return ValidationResult.reject(RejectionReason.SAME_FUND_TRANSFER, errors.same_fund_transfer())

    available = get_balance(balances, request.source_fund_id, request.source_type_id)
    if amount > available:
        return ValidationResult.reject(
            RejectionReason.INSUFFICIENT_BALANCE,
            errors.insufficient_balance(format_currency(available)),
        )

    if request.source_type_id in excluded_type_ids:
        return ValidationResult.reject(
            RejectionReason.INELIGIBLE_SOURCE, errors.ineligible_source(request.source_type_id)
        )

    # A positive available balance implies a source entry exists
    for fund_id in (request.source_fund_id, request.target_fund_id):
        entry = find_balance(balances, fund_id, request.source_type_id)
        if entry is not None and not _has_usable_nav(entry):
            return ValidationResult.reject(
                RejectionReason.INVALID_NAV, errors.invalid_nav(fund_id, request.source_type_id)
            )

    return ValidationResult.ok()


def validate_reallocation(allocations: AllocationMap) -> ValidationResult:
    """Validate reallocation percentages.

    Every set percentage must lie in [0, 100] and all of them together must
    add up to 100% (within ``ALLOCATION_TOLERANCE``). ``None`` entries count
    as 0.

    Args:
        allocations: Fund ID -> percentage

    Returns:
        ValidationResult
    """
    for fund_id, percentage in allocations.items():
        if percentage is None:
            continue
        if not math.isfinite(percentage) or percentage < 0 or percentage > 100:
            return ValidationResult.reject(
                RejectionReason.INVALID_PERCENTAGE, errors.invalid_allocation(fund_id)
            )

    total = sum(p for p in allocations.values() if p is not None)
    if abs(total - 100) > ALLOCATION_TOLERANCE:
        return ValidationResult.reject(
            RejectionReason.ALLOCATION_NOT_FULL, errors.allocation_not_full(total)
        )

    return ValidationResult.ok()
