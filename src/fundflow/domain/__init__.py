"""Domain layer for fundflow application.

PortfolioService lives in fundflow.domain.portfolio; it is not re-exported
here because it depends on the database layer, which imports these entities.
"""

from fundflow.domain.calculator import compute_reallocation, compute_transfer
from fundflow.domain.validation import validate_reallocation, validate_transfer

__all__ = [
    "compute_transfer",
    "compute_reallocation",
    "validate_transfer",
    "validate_reallocation",
]
