"""Coerce form-style string input into typed requests.

Identifiers and amounts typically arrive as strings (command line options,
form fields). Blank values become ``None`` so the validator can report them
as missing; anything that is present but not numeric fails here, explicitly,
instead of leaking a NaN into the calculation.
"""

from typing import Iterable, Mapping, Optional, Union

from fundflow.domain import errors
from fundflow.domain.entities import AllocationMap, TransferRequest
from fundflow.domain.errors import RejectionReason, ValidationError
from fundflow.utils.amount_parser import parse_amount, parse_percentage

RawValue = Union[str, int, float, None]


def _is_blank(value: RawValue) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_identifier(value: RawValue, field: str) -> Optional[int]:
    """Parse a fund or contribution type ID.

    Args:
        value: Raw ID (string or int)
        field: Field name used in the error message

    Returns:
        Integer ID, or None when blank

    Raises:
        ValidationError: If the value is not a whole number
    """
    if _is_blank(value):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValidationError(
            errors.invalid_identifier(field, str(value)), RejectionReason.MISSING_FIELD
        )


def parse_transfer_request(
    source_fund: RawValue,
    source_type: RawValue,
    target_fund: RawValue,
    amount: RawValue,
) -> TransferRequest:
    """Build a TransferRequest from raw form values.

    Raises:
        ValidationError: If an ID or the amount is present but not numeric
    """
    parsed_amount: Optional[float]
    if _is_blank(amount):
        parsed_amount = None
    elif isinstance(amount, (int, float)) and not isinstance(amount, bool):
        parsed_amount = float(amount)
    else:
        try:
            parsed_amount = parse_amount(str(amount))
        except ValueError:
            raise ValidationError(errors.invalid_transfer_amount(), RejectionReason.INVALID_AMOUNT)

    return TransferRequest(
        source_fund_id=parse_identifier(source_fund, "source fund"),
        source_type_id=parse_identifier(source_type, "contribution type"),
        target_fund_id=parse_identifier(target_fund, "target fund"),
        amount=parsed_amount,
    )


def parse_allocations(
    raw: Mapping[RawValue, RawValue], fund_ids: Optional[Iterable[int]] = None
) -> AllocationMap:
    """Build an allocation map from raw ``fund -> percentage`` values.

    Args:
        raw: Mapping of fund ID to percentage, both possibly strings
        fund_ids: When given, every listed fund gets an entry and blank or
            unmentioned funds are set to 0%, and a fund outside the list is
            rejected. Without it, blank entries stay ``None`` and the
            calculator leaves those funds untouched.

    Returns:
        Mapping of int fund ID to float percentage (or None)

    Raises:
        ValidationError: If a fund ID or percentage is not numeric, or a fund
            is not among ``fund_ids``
    """
    allocations: dict[int, Optional[float]] = {}
    for raw_fund, raw_pct in raw.items():
        fund_id = parse_identifier(raw_fund, "fund")
        if fund_id is None:
            raise ValidationError(errors.invalid_identifier("fund", ""), RejectionReason.MISSING_FIELD)
        if _is_blank(raw_pct):
            allocations[fund_id] = None
        elif isinstance(raw_pct, (int, float)) and not isinstance(raw_pct, bool):
            allocations[fund_id] = float(raw_pct)
        else:
            try:
                allocations[fund_id] = parse_percentage(str(raw_pct))
            except ValueError:
                raise ValidationError(
                    errors.invalid_allocation(fund_id), RejectionReason.INVALID_PERCENTAGE
                )

    if fund_ids is not None:
        complete: dict[int, Optional[float]] = {}
        for fund_id in fund_ids:
            value = allocations.pop(fund_id, None)
            complete[fund_id] = 0.0 if value is None else value
        if allocations:
            unknown = next(iter(allocations))
            raise ValidationError(errors.unknown_fund(unknown), RejectionReason.UNKNOWN_REFERENCE)
        allocations = complete

    return allocations
