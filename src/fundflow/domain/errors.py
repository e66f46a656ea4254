"""Shared domain error messages and error types."""

from enum import Enum
from typing import Optional


class RejectionReason(str, Enum):
    """Machine-readable kind of a rejected transfer or reallocation."""

    MISSING_FIELD = "missing_field"
    INVALID_AMOUNT = "invalid_amount"
    SAME_FUND_TRANSFER = "same_fund_transfer"
    INSUFFICIENT_BALANCE = "insufficient_balance"
    INVALID_PERCENTAGE = "invalid_percentage"
    ALLOCATION_NOT_FULL = "allocation_not_full"
    INELIGIBLE_SOURCE = "ineligible_source"
    INVALID_NAV = "invalid_nav"
    UNKNOWN_REFERENCE = "unknown_reference"


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""

    def __init__(self, message: str, reason: Optional[RejectionReason] = None):
        super().__init__(message)
        self.reason = reason


class BalanceContractError(DomainError):
    """Calculator called with input that breaks its preconditions.

    Raised for programming-contract violations such as a non-positive NAV,
    never for ordinary user mistakes (those are rejected by the validator).
    """


def missing_transfer_fields() -> str:
    """Return message for an incomplete transfer request."""
    return "All transfer fields are required"


def invalid_transfer_amount() -> str:
    """Return message for a zero, negative or non-numeric amount."""
    return "Transfer amount must be greater than zero"


def same_fund_transfer() -> str:
    """Return message when source and target fund are identical."""
    return "Source and target funds must be different"


def insufficient_balance(available: str) -> str:
    """Return message for a transfer larger than the source balance.

    Args:
        available: Already formatted available amount (e.g. "$500")
    """
    return f"Insufficient balance. Available: {available}"


def invalid_allocation(fund_id: object) -> str:
    """Return message for a percentage outside 0-100 or not a number."""
    return f"Invalid allocation for fund ID {fund_id}. Must be between 0 and 100%"


def allocation_not_full(total: float) -> str:
    """Return message when percentages do not add up to 100."""
    return f"Total allocation must equal 100%. Current total: {total:.2f}%"


def ineligible_source(type_id: int) -> str:
    """Return message for a contribution type that cannot fund a transfer."""
    return f"Contribution type {type_id} is not eligible as a transfer source"


def invalid_nav(fund_id: int, type_id: int) -> str:
    """Return message for a balance entry without a usable unit price."""
    return f"Fund {fund_id} has no valid unit price for contribution type {type_id}"


def invalid_identifier(field: str, value: str) -> str:
    """Return message for an id field that is not an integer."""
    return f"Invalid {field} '{value}': must be a whole number"


def unknown_fund(fund_id: object) -> str:
    """Return message for a fund ID that is not in the portfolio."""
    return f"Unknown fund ID {fund_id}"


def unknown_contribution_type(type_id: object) -> str:
    """Return message for a contribution type ID that is not in the portfolio."""
    return f"Unknown contribution type ID {type_id}"
