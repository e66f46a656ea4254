"""Mapper functions to convert between domain models and SQLAlchemy models."""

from fundflow.domain import entities as domain
from fundflow.database.models import (
    Balance as ORMBalance,
    ContributionType as ORMContributionType,
    Fund as ORMFund,
)


def fund_to_domain(orm_fund: ORMFund) -> domain.Fund:
    """Convert SQLAlchemy Fund model to domain Fund entity."""
    return domain.Fund(
        id=orm_fund.id,
        name=orm_fund.name,
        category=orm_fund.category,
    )


def contribution_type_to_domain(orm_type: ORMContributionType) -> domain.ContributionType:
    """Convert SQLAlchemy ContributionType model to domain ContributionType entity."""
    return domain.ContributionType(
        id=orm_type.id,
        name=orm_type.name,
    )


def balance_to_domain(orm_balance: ORMBalance) -> domain.Balance:
    """Convert SQLAlchemy Balance model to domain Balance entity."""
    return domain.Balance(
        fund_id=orm_balance.fund_id,
        contribution_type_id=orm_balance.contribution_type_id,
        units=orm_balance.units,
        nav=orm_balance.nav,
        balance=orm_balance.balance,
    )


def balance_to_orm(balance: domain.Balance, position: int) -> ORMBalance:
    """Convert a domain Balance entity into a new SQLAlchemy row."""
    return ORMBalance(
        position=position,
        fund_id=balance.fund_id,
        contribution_type_id=balance.contribution_type_id,
        units=balance.units,
        nav=balance.nav,
        balance=balance.balance,
    )
