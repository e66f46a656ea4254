"""Shared pytest fixtures for fundflow tests."""

import tempfile
import os
import pytest

from fundflow.database.factories import create_sqlite_database
from fundflow.domain.entities import Balance, ContributionType, Fund
from fundflow.domain.portfolio import PortfolioService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def portfolio_service(temp_db):
    """Create a PortfolioService over a database seeded with the demo data."""
    service = PortfolioService(temp_db)
    service.ensure_initialized()
    return service


@pytest.fixture
def funds():
    """Two funds, as used by the worked examples."""
    return [
        Fund(id=1, name="Growth Fund", category="Equity"),
        Fund(id=2, name="Bond Fund", category="Fixed Income"),
    ]


@pytest.fixture
def contribution_types():
    return [
        ContributionType(id=1, name="Employee Pre-Tax"),
        ContributionType(id=2, name="Employer Match"),
    ]


@pytest.fixture
def balances():
    """Fund 1 and fund 2 each hold $1,000 in contribution type 1."""
    return [
        Balance(fund_id=1, contribution_type_id=1, units=100.0, nav=10.0, balance=1000.0),
        Balance(fund_id=2, contribution_type_id=1, units=50.0, nav=20.0, balance=1000.0),
    ]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
