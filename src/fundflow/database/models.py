"""SQLAlchemy models for fundflow database."""

from sqlalchemy import (
    Column,
    Float,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
    create_engine,
    event,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Fund(Base):
    """Investment option model."""

    __tablename__ = "funds"

    # IDs come from reference data, never autoincremented
    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String, nullable=False)
    category = Column(String, nullable=False)

    # Relationships
    balances = relationship("Balance", back_populates="fund", cascade="all, delete-orphan")


class ContributionType(Base):
    """Contribution type ("bucket") model."""

    __tablename__ = "contribution_types"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String, nullable=False)

    # Relationships
    balances = relationship(
        "Balance", back_populates="contribution_type", cascade="all, delete-orphan"
    )


class Balance(Base):
    """Units held in one fund for one contribution type."""

    __tablename__ = "balances"

    id = Column(Integer, primary_key=True)
    position = Column(Integer, nullable=False)
    fund_id = Column(Integer, ForeignKey("funds.id"), nullable=False)
    contribution_type_id = Column(Integer, ForeignKey("contribution_types.id"), nullable=False)
    units = Column(Float, nullable=False)
    nav = Column(Float, nullable=False)
    balance = Column(Float, nullable=False)

    # One entry per fund/contribution type pair
    __table_args__ = (
        UniqueConstraint("fund_id", "contribution_type_id", name="uq_fund_contribution_type"),
    )

    # Relationships
    fund = relationship("Fund", back_populates="balances")
    contribution_type = relationship("ContributionType", back_populates="balances")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)

    if engine.dialect.name == "sqlite":
        # SQLite leaves foreign keys unchecked unless asked on every connection
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
