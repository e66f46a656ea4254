"""Tests for balance calculations."""

import pytest

from fundflow.domain.calculator import (
    compute_reallocation,
    compute_transfer,
    find_balance,
    get_balance,
    get_fund_total,
    get_grand_total,
    get_type_total,
    units_from_amount,
)
from fundflow.domain.entities import Balance, Fund, TransferRequest
from fundflow.domain.errors import BalanceContractError


def _transfer(source_fund=1, source_type=1, target_fund=2, amount=200.0):
    return TransferRequest(
        source_fund_id=source_fund,
        source_type_id=source_type,
        target_fund_id=target_fund,
        amount=amount,
    )


def _assert_identity(balances):
    for entry in balances:
        assert entry.balance == pytest.approx(entry.units * entry.nav, abs=1e-9)


class TestBalanceQueries:
    """Tests for balance lookup and aggregate helpers."""

    def test_get_balance(self, balances):
        assert get_balance(balances, 1, 1) == 1000.0
        assert get_balance(balances, 1, 2) == 0.0

    def test_find_balance(self, balances):
        assert find_balance(balances, 2, 1) is balances[1]
        assert find_balance(balances, 3, 1) is None

    def test_totals(self):
        """Test fund, type and grand totals."""
        balances = [
            Balance.from_units(1, 1, 10.0, 10.0),
            Balance.from_units(1, 2, 5.0, 10.0),
            Balance.from_units(2, 1, 20.0, 5.0),
        ]
        assert get_fund_total(balances, 1) == pytest.approx(150.0)
        assert get_fund_total(balances, 3) == 0
        assert get_type_total(balances, 1) == pytest.approx(200.0)
        assert get_grand_total(balances) == pytest.approx(250.0)

    def test_units_from_amount(self):
        assert units_from_amount(200.0, 20.0) == 10.0


class TestComputeTransfer:
    """Tests for compute_transfer."""

    def test_transfer_between_existing_entries(self, balances):
        """Test moving $200 from fund 1 (NAV 10) to fund 2 (NAV 20)."""
        result = compute_transfer(_transfer(), balances)

        fund1 = find_balance(result, 1, 1)
        fund2 = find_balance(result, 2, 1)
        assert fund1.units == pytest.approx(80.0)
        assert fund1.balance == pytest.approx(800.0)
        assert fund2.units == pytest.approx(60.0)
        assert fund2.balance == pytest.approx(1200.0)
        assert len(result) == 2
        _assert_identity(result)

    def test_does_not_mutate_input(self, balances):
        """Test the input balance list is left as it was."""
        snapshot = list(balances)
        result = compute_transfer(_transfer(), balances)
        assert balances == snapshot
        assert result is not balances

    def test_creates_target_entry_at_end(self, balances):
        """Test a missing target bucket is created using the source NAV."""
        result = compute_transfer(_transfer(target_fund=3, amount=250.0), balances)

        assert len(result) == 3
        created = result[-1]
        assert created.fund_id == 3
        assert created.contribution_type_id == 1
        assert created.nav == 10.0
        assert created.units == pytest.approx(25.0)
        assert created.balance == pytest.approx(250.0)
        assert find_balance(result, 1, 1).balance == pytest.approx(750.0)

    def test_money_stays_in_source_bucket(self):
        """Test the target entry uses the source contribution type."""
        balances = [
            Balance.from_units(1, 2, 100.0, 10.0),
            Balance.from_units(2, 1, 100.0, 10.0),
        ]
        result = compute_transfer(_transfer(source_type=2), balances)

        assert find_balance(result, 2, 1).balance == pytest.approx(1000.0)
        assert find_balance(result, 2, 2).balance == pytest.approx(200.0)

    def test_untouched_entries_preserved(self, balances):
        """Test entries not involved in the transfer keep their position and value."""
        other = Balance.from_units(3, 2, 7.0, 3.0)
        result = compute_transfer(_transfer(), balances + [other])
        assert result[2] == other

    def test_missing_source_returns_copy(self, balances):
        """Test a transfer from a non-existent entry changes nothing."""
        result = compute_transfer(_transfer(source_type=9), balances)
        assert result == balances
        assert result is not balances

    def test_same_nav_conserves_money(self):
        """Test money is conserved when both sides share a NAV."""
        balances = [
            Balance.from_units(1, 1, 123.456, 17.31),
            Balance.from_units(2, 1, 45.6, 17.31),
            Balance.from_units(3, 2, 10.0, 99.0),
        ]
        amount = 987.65
        result = compute_transfer(_transfer(amount=amount), balances)

        assert find_balance(result, 1, 1).balance == pytest.approx(
            balances[0].balance - amount, abs=1e-9
        )
        assert find_balance(result, 2, 1).balance == pytest.approx(
            balances[1].balance + amount, abs=1e-9
        )
        assert get_grand_total(result) == pytest.approx(get_grand_total(balances), abs=1e-9)
        _assert_identity(result)

    def test_zero_source_nav_raises(self):
        """Test a zero NAV is a contract violation, not a silent infinity."""
        balances = [Balance(fund_id=1, contribution_type_id=1, units=10.0, nav=0.0, balance=0.0)]
        with pytest.raises(BalanceContractError):
            compute_transfer(_transfer(amount=1.0), balances)

    def test_non_positive_amount_raises(self, balances):
        with pytest.raises(BalanceContractError):
            compute_transfer(_transfer(amount=-5.0), balances)


class TestComputeReallocation:
    """Tests for compute_reallocation."""

    def test_reallocation_scenario(self, balances, funds):
        """Test 25/75 split of a $2,000 portfolio."""
        result = compute_reallocation({1: 25.0, 2: 75.0}, balances, funds)

        fund1 = find_balance(result, 1, 1)
        assert fund1.balance == pytest.approx(500.0)
        assert fund1.units == pytest.approx(50.0)
        assert get_fund_total(result, 2) == pytest.approx(1500.0)
        _assert_identity(result)

    def test_full_reallocation_preserves_total(self, funds):
        """Test redistributing 100% across all funds keeps the grand total."""
        balances = [
            Balance.from_units(1, 1, 310.5, 12.37),
            Balance.from_units(1, 2, 80.25, 12.37),
            Balance.from_units(2, 1, 17.0, 88.1),
            Balance.from_units(2, 3, 3.3, 88.1),
        ]
        result = compute_reallocation({1: 37.5, 2: 62.5}, balances, funds)

        assert get_grand_total(result) == pytest.approx(get_grand_total(balances), abs=1e-6)
        _assert_identity(result)

    def test_split_within_fund_is_proportional(self, funds):
        """Test a fund's buckets keep their relative shares."""
        balances = [
            Balance.from_units(1, 1, 30.0, 10.0),
            Balance.from_units(1, 2, 10.0, 10.0),
            Balance.from_units(2, 1, 60.0, 10.0),
        ]
        result = compute_reallocation({1: 50.0, 2: 50.0}, balances, funds)

        assert find_balance(result, 1, 1).balance == pytest.approx(375.0)
        assert find_balance(result, 1, 2).balance == pytest.approx(125.0)
        assert find_balance(result, 2, 1).balance == pytest.approx(500.0)

    def test_empty_fund_splits_evenly(self, funds):
        """Test a fund holding nothing spreads its share evenly across its buckets."""
        balances = [
            Balance.from_units(1, 1, 0.0, 10.0),
            Balance.from_units(1, 2, 0.0, 5.0),
            Balance.from_units(2, 1, 100.0, 10.0),
        ]
        result = compute_reallocation({1: 40.0, 2: 60.0}, balances, funds)

        assert find_balance(result, 1, 1).balance == pytest.approx(200.0)
        assert find_balance(result, 1, 1).units == pytest.approx(20.0)
        assert find_balance(result, 1, 2).balance == pytest.approx(200.0)
        assert find_balance(result, 1, 2).units == pytest.approx(40.0)
        assert find_balance(result, 2, 1).balance == pytest.approx(600.0)

    def test_unset_funds_are_untouched(self, balances, funds):
        """Test a fund without a percentage keeps its balance (no renormalization)."""
        result = compute_reallocation({1: 100.0, 2: None}, balances, funds)

        assert find_balance(result, 1, 1).balance == pytest.approx(2000.0)
        assert find_balance(result, 2, 1) == balances[1]
        # Partial reallocation can grow the grand total
        assert get_grand_total(result) == pytest.approx(3000.0)

    def test_funds_missing_from_map_are_untouched(self, balances, funds):
        result = compute_reallocation({2: 100.0}, balances, funds)
        assert find_balance(result, 1, 1) == balances[0]
        assert find_balance(result, 2, 1).balance == pytest.approx(2000.0)

    def test_zero_percent_empties_fund(self, balances, funds):
        result = compute_reallocation({1: 0.0, 2: 100.0}, balances, funds)
        assert find_balance(result, 1, 1).units == 0.0
        assert find_balance(result, 1, 1).balance == 0.0

    def test_fund_without_entries_is_skipped(self, balances, funds, caplog):
        """Test a fund with no buckets receives nothing and logs a warning."""
        funds = funds + [Fund(id=3, name="New Fund", category="Equity")]
        with caplog.at_level("WARNING"):
            result = compute_reallocation({1: 50.0, 2: 25.0, 3: 25.0}, balances, funds)

        assert len(result) == 2
        assert "Fund 3 has no balance entries" in caplog.text

    def test_does_not_mutate_input(self, balances, funds):
        snapshot = list(balances)
        compute_reallocation({1: 25.0, 2: 75.0}, balances, funds)
        assert balances == snapshot

    def test_zero_nav_in_reallocated_fund_raises(self, funds):
        balances = [
            Balance(fund_id=1, contribution_type_id=1, units=10.0, nav=0.0, balance=0.0),
            Balance.from_units(2, 1, 10.0, 10.0),
        ]
        with pytest.raises(BalanceContractError):
            compute_reallocation({1: 50.0, 2: 50.0}, balances, funds)
