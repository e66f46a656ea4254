"""Generic SQLAlchemy database implementation."""

import logging
from typing import Optional, Sequence

from sqlalchemy.orm import Session

from fundflow.database.base import Database
from fundflow.database.models import (
    Balance,
    ContributionType,
    Fund,
    create_session_factory,
)
from fundflow.database.mappers import (
    balance_to_domain,
    balance_to_orm,
    contribution_type_to_domain,
    fund_to_domain,
)
from fundflow.domain.entities import (
    Balance as DomainBalance,
    ContributionType as DomainContributionType,
    Fund as DomainFund,
)

logger = logging.getLogger(__name__)


class SQLAlchemyDatabase(Database):
    """SQLAlchemy-based implementation of Database interface."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy database.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db',
                'sqlite://' for an in-memory database)
        """
        self.database_url = database_url
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        # Schema is created automatically by create_session_factory
        pass

    def is_seeded(self) -> bool:
        """Return True if reference data has been loaded."""
        session = self._get_session()
        return session.query(Fund).first() is not None

    def seed(
        self,
        funds: Sequence[DomainFund],
        contribution_types: Sequence[DomainContributionType],
        balances: Sequence[DomainBalance],
    ) -> None:
        """Replace all funds, contribution types and balances."""
        session = self._get_session()
        try:
            session.query(Balance).delete()
            session.query(Fund).delete()
            session.query(ContributionType).delete()
            session.expunge_all()
            session.add_all(Fund(id=f.id, name=f.name, category=f.category) for f in funds)
            session.add_all(ContributionType(id=t.id, name=t.name) for t in contribution_types)
            session.flush()
            session.add_all(balance_to_orm(b, position) for position, b in enumerate(balances))
            session.commit()
        except Exception:
            session.rollback()
            raise
        logger.debug(
            "Seeded %d funds, %d contribution types, %d balances",
            len(funds),
            len(contribution_types),
            len(balances),
        )

    # Reference data
    def list_funds(self) -> list[DomainFund]:
        """List all funds ordered by ID."""
        session = self._get_session()
        funds = session.query(Fund).order_by(Fund.id).all()
        return [fund_to_domain(f) for f in funds]

    def list_contribution_types(self) -> list[DomainContributionType]:
        """List all contribution types ordered by ID."""
        session = self._get_session()
        types = session.query(ContributionType).order_by(ContributionType.id).all()
        return [contribution_type_to_domain(t) for t in types]

    # Balance operations
    def list_balances(self) -> list[DomainBalance]:
        """List the balance set in stored order."""
        session = self._get_session()
        rows = session.query(Balance).order_by(Balance.position).all()
        return [balance_to_domain(row) for row in rows]

    def replace_balances(self, balances: Sequence[DomainBalance]) -> None:
        """Replace the whole balance set in one transaction, keeping its order."""
        session = self._get_session()
        try:
            session.query(Balance).delete()
            # Bulk deletes bypass the identity map; drop the stale rows
            session.expunge_all()
            session.add_all(balance_to_orm(b, position) for position, b in enumerate(balances))
            session.commit()
        except Exception:
            session.rollback()
            raise
