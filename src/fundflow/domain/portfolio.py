"""Portfolio domain service."""

import logging
from typing import Callable

from fundflow.database.base import Database
from fundflow.domain import errors
from fundflow.domain.calculator import compute_reallocation, compute_transfer
from fundflow.domain.errors import RejectionReason
from fundflow.domain.entities import (
    AllocationMap,
    Balance,
    ContributionType,
    Fund,
    PreviewResult,
    TransferRequest,
    ValidationResult,
)
from fundflow.domain.seed import (
    INITIAL_BALANCES,
    INITIAL_CONTRIBUTION_TYPES,
    INITIAL_FUNDS,
    LOAN_FUND_NAME,
)
from fundflow.domain.validation import validate_reallocation, validate_transfer

logger = logging.getLogger(__name__)


class PortfolioService:
    """Service owning the authoritative balance set.

    Every operation reads the stored balances, validates, computes, and (for
    committing operations) writes the result back before returning. The
    validator and calculator only ever see the balances passed to them.
    """

    def __init__(self, db: Database):
        """Initialize portfolio service.

        Args:
            db: Database instance
        """
        self.db = db

    def ensure_initialized(self) -> bool:
        """Load the demo data if the database is empty.

        Returns:
            True if data was seeded, False if it already existed
        """
        if self.db.is_seeded():
            return False
        self.db.seed(INITIAL_FUNDS, INITIAL_CONTRIBUTION_TYPES, INITIAL_BALANCES)
        logger.info("Initialized portfolio with demo data")
        return True

    def reset_to_initial(self) -> None:
        """Discard all changes and restore the demo data."""
        self.db.seed(INITIAL_FUNDS, INITIAL_CONTRIBUTION_TYPES, INITIAL_BALANCES)
        logger.info("Portfolio reset to initial balances")

    def list_funds(self) -> list[Fund]:
        return self.db.list_funds()

    def list_contribution_types(self) -> list[ContributionType]:
        return self.db.list_contribution_types()

    def get_balances(self) -> list[Balance]:
        return self.db.list_balances()

    def eligible_source_types(self) -> list[ContributionType]:
        """Contribution types money may be transferred out of."""
        return [t for t in self.list_contribution_types() if t.name != LOAN_FUND_NAME]

    def _excluded_source_type_ids(self) -> frozenset[int]:
        return frozenset(t.id for t in self.list_contribution_types() if t.name == LOAN_FUND_NAME)

    def _preview(
        self,
        validation: ValidationResult,
        compute: Callable[[], list[Balance]],
    ) -> PreviewResult:
        if not validation.valid:
            return PreviewResult(valid=False, error=validation.error, reason=validation.reason)
        return PreviewResult(valid=True, projected_balances=compute())

    # Transfers
    def _check_transfer_references(self, request: TransferRequest) -> ValidationResult:
        fund_ids = {fund.id for fund in self.list_funds()}
        for fund_id in (request.source_fund_id, request.target_fund_id):
            if fund_id is not None and fund_id not in fund_ids:
                return ValidationResult.reject(
                    RejectionReason.UNKNOWN_REFERENCE, errors.unknown_fund(fund_id)
                )
        type_id = request.source_type_id
        if type_id is not None and type_id not in {t.id for t in self.list_contribution_types()}:
            return ValidationResult.reject(
                RejectionReason.UNKNOWN_REFERENCE, errors.unknown_contribution_type(type_id)
            )
        return ValidationResult.ok()

    def preview_transfer(self, request: TransferRequest) -> PreviewResult:
        """Validate a transfer and project the resulting balances without saving.

        Fund and contribution type IDs must name rows of the portfolio.
        Blank IDs are left to the validator, which reports them as missing.

        Args:
            request: Proposed transfer

        Returns:
            PreviewResult with projected balances, or the rejection reason
        """
        balances = self.get_balances()
        validation = self._check_transfer_references(request)
        if validation.valid:
            validation = validate_transfer(request, balances, self._excluded_source_type_ids())
        return self._preview(validation, lambda: compute_transfer(request, balances))

    def transfer_funds(self, request: TransferRequest) -> ValidationResult:
        """Validate and commit a transfer.

        Stored balances are left untouched when the transfer is rejected.

        Args:
            request: Proposed transfer

        Returns:
            ValidationResult
        """
        preview = self.preview_transfer(request)
        if not preview.valid:
            logger.info("Transfer rejected: %s", preview.error)
            return ValidationResult.reject(preview.reason, preview.error)

        self.db.replace_balances(preview.projected_balances)
        logger.info(
            "Transferred %.2f from fund %s to fund %s (contribution type %s)",
            request.amount,
            request.source_fund_id,
            request.target_fund_id,
            request.source_type_id,
        )
        return ValidationResult.ok()

    # Reallocations
    def _check_allocation_references(
        self, allocations: AllocationMap, funds: list[Fund]
    ) -> ValidationResult:
        fund_ids = {fund.id for fund in funds}
        for fund_id in allocations:
            if fund_id not in fund_ids:
                return ValidationResult.reject(
                    RejectionReason.UNKNOWN_REFERENCE, errors.unknown_fund(fund_id)
                )
        return ValidationResult.ok()

    def preview_reallocation(self, allocations: AllocationMap) -> PreviewResult:
        """Validate a reallocation and project the resulting balances without saving.

        Every key must be a fund of the portfolio.

        Args:
            allocations: Fund ID -> percentage; None leaves a fund untouched

        Returns:
            PreviewResult with projected balances, or the rejection reason
        """
        funds = self.list_funds()
        balances = self.get_balances()
        validation = self._check_allocation_references(allocations, funds)
        if validation.valid:
            validation = validate_reallocation(allocations)
        return self._preview(
            validation,
            lambda: compute_reallocation(allocations, balances, funds),
        )

    def reallocate_funds(self, allocations: AllocationMap) -> ValidationResult:
        """Validate and commit a reallocation.

        Args:
            allocations: Fund ID -> percentage; None leaves a fund untouched

        Returns:
            ValidationResult
        """
        preview = self.preview_reallocation(allocations)
        if not preview.valid:
            logger.info("Reallocation rejected: %s", preview.error)
            return ValidationResult.reject(preview.reason, preview.error)

        self.db.replace_balances(preview.projected_balances)
        logger.info(
            "Reallocated portfolio: %s",
            ", ".join(f"fund {k}={v}%" for k, v in allocations.items() if v is not None),
        )
        return ValidationResult.ok()
