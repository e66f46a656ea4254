"""Domain model entities for fundflow.

These are pure data classes representing business concepts, independent of
database schema. Validation and balance calculation only ever see these
types, so the same functions work whether the caller keeps balances in
memory or loads them from storage.
"""

from dataclasses import dataclass
from typing import Mapping, Optional

from fundflow.domain.errors import RejectionReason


@dataclass(frozen=True)
class Fund:
    """Investment option domain entity."""

    id: int
    name: str
    category: str


@dataclass(frozen=True)
class ContributionType:
    """Contribution source ("bucket") domain entity."""

    id: int
    name: str


@dataclass(frozen=True)
class Balance:
    """Holding of one fund within one contribution type.

    ``balance`` is always ``units * nav``; use :meth:`from_units` to build an
    entry with the identity already restored.
    """

    fund_id: int
    contribution_type_id: int
    units: float
    nav: float
    balance: float

    @classmethod
    def from_units(
        cls, fund_id: int, contribution_type_id: int, units: float, nav: float
    ) -> "Balance":
        """Build a balance entry whose monetary amount is derived from units and NAV."""
        return cls(
            fund_id=fund_id,
            contribution_type_id=contribution_type_id,
            units=units,
            nav=nav,
            balance=units * nav,
        )

    @property
    def key(self) -> tuple[int, int]:
        return (self.fund_id, self.contribution_type_id)


@dataclass(frozen=True)
class TransferRequest:
    """Move ``amount`` dollars from one fund to another within one bucket.

    Fields are ``None`` when the caller did not supply them.
    """

    source_fund_id: Optional[int]
    source_type_id: Optional[int]
    target_fund_id: Optional[int]
    amount: Optional[float]


# Fund ID -> target percentage; None marks an unset entry.
AllocationMap = Mapping[int, Optional[float]]


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a transfer or reallocation."""

    valid: bool
    error: Optional[str] = None
    reason: Optional[RejectionReason] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def reject(cls, reason: RejectionReason, error: str) -> "ValidationResult":
        return cls(valid=False, error=error, reason=reason)


@dataclass(frozen=True)
class PreviewResult:
    """Validation outcome plus the balances a change would produce."""

    valid: bool
    error: Optional[str] = None
    reason: Optional[RejectionReason] = None
    projected_balances: Optional[list[Balance]] = None
