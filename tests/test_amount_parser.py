"""Tests for amount parsing and formatting."""

import pytest

from fundflow.utils.amount_parser import format_currency, parse_amount, parse_percentage


class TestParseAmount:
    """Tests for parse_amount."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("200", 200.0),
            ("123.45", 123.45),
            ("$1,234.56", 1234.56),
            ("  $ 50 ", 50.0),
            ("-75", -75.0),
            ("(123.45)", -123.45),
        ],
    )
    def test_valid_amounts(self, text, expected):
        assert parse_amount(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", ["", "   ", "abc", "12..3", "nan", "inf", "-Infinity"])
    def test_invalid_amounts(self, text):
        with pytest.raises(ValueError):
            parse_amount(text)


class TestParsePercentage:
    """Tests for parse_percentage."""

    def test_plain_and_percent_sign(self):
        assert parse_percentage("25") == 25.0
        assert parse_percentage("12.5%") == 12.5
        assert parse_percentage(" 40 % ") == 40.0

    @pytest.mark.parametrize("text", ["", "ten", "NaN"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_percentage(text)


class TestFormatCurrency:
    """Tests for whole-dollar formatting."""

    @pytest.mark.parametrize(
        "amount,expected",
        [
            (0, "$0"),
            (500.0, "$500"),
            (1234.4, "$1,234"),
            (1234.5, "$1,235"),
            (173246.4, "$173,246"),
            (-50.0, "-$50"),
            (-0.4, "$0"),
        ],
    )
    def test_format(self, amount, expected):
        assert format_currency(amount) == expected
