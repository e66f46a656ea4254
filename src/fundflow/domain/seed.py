"""Demo reference data and starting balances."""

from fundflow.domain.entities import Balance, ContributionType, Fund

LOAN_FUND_NAME = "Loan Fund"

INITIAL_FUNDS = [
    Fund(id=1, name="Target Retirement 2050", category="Target Date"),
    Fund(id=2, name="S&P 500 Index", category="Large Cap Equity"),
    Fund(id=3, name="International Growth", category="International Equity"),
    Fund(id=4, name="Total Bond Market", category="Fixed Income"),
    Fund(id=5, name="Stable Value", category="Capital Preservation"),
]

INITIAL_CONTRIBUTION_TYPES = [
    ContributionType(id=1, name="Employee Pre-Tax"),
    ContributionType(id=2, name="Employee Roth"),
    ContributionType(id=3, name="Employer Match"),
    ContributionType(id=4, name=LOAN_FUND_NAME),
]

# (fund_id, contribution_type_id, units, nav)
_INITIAL_HOLDINGS = [
    (1, 1, 1250.0, 32.40),
    (1, 2, 410.0, 32.40),
    (1, 3, 620.0, 32.40),
    (2, 1, 85.0, 485.20),
    (2, 3, 24.5, 485.20),
    (3, 1, 540.0, 41.75),
    (3, 2, 160.0, 41.75),
    (4, 1, 900.0, 10.85),
    (4, 3, 300.0, 10.85),
    (5, 1, 1500.0, 1.00),
    (5, 4, 2500.0, 1.00),
]

INITIAL_BALANCES = [
    Balance.from_units(fund_id, type_id, units, nav)
    for fund_id, type_id, units, nav in _INITIAL_HOLDINGS
]
