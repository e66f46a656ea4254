"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Sequence

# Import entities directly to avoid circular import through domain/__init__.py
from fundflow.domain.entities import Balance, ContributionType, Fund


class Database(ABC):
    """Abstract database interface for fundflow."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def is_seeded(self) -> bool:
        """Return True if reference data has been loaded."""
        pass

    @abstractmethod
    def seed(
        self,
        funds: Sequence[Fund],
        contribution_types: Sequence[ContributionType],
        balances: Sequence[Balance],
    ) -> None:
        """Replace all funds, contribution types and balances."""
        pass

    # Reference data
    @abstractmethod
    def list_funds(self) -> list[Fund]:
        """List all funds ordered by ID."""
        pass

    @abstractmethod
    def list_contribution_types(self) -> list[ContributionType]:
        """List all contribution types ordered by ID."""
        pass

    # Balance operations
    @abstractmethod
    def list_balances(self) -> list[Balance]:
        """List the balance set in stored order."""
        pass

    @abstractmethod
    def replace_balances(self, balances: Sequence[Balance]) -> None:
        """Replace the whole balance set in one transaction, keeping its order."""
        pass
