"""Tests for amount, piece count and date parsing."""

import pytest
from datetime import date
from decimal import Decimal

from costureira.utils.amount_parser import parse_amount, parse_pieces
from costureira.utils.date_parser import last_days, month_range, parse_date
from costureira.utils.names import is_blank, normalize_name

TODAY = date(2024, 3, 10)  # a Sunday


@pytest.mark.parametrize(
    "text,expected",
    [
        ("120", "120.00"),
        ("120.5", "120.50"),
        ("120,50", "120.50"),
        ("R$ 120,00", "120.00"),
        ("$99.99", "99.99"),
        ("1.234,56", "1234.56"),
        ("1,234.56", "1234.56"),
        ("  35 ", "35.00"),
    ],
)
def test_parse_amount(text, expected):
    """Both Brazilian and US separators are understood."""
    assert parse_amount(text) == Decimal(expected)


@pytest.mark.parametrize("text", ["", "   ", "abc", "R$", "NaN"])
def test_parse_amount_invalid(text):
    """Garbage is rejected."""
    with pytest.raises(ValueError):
        parse_amount(text)


def test_parse_pieces():
    """Signed whole numbers only."""
    assert parse_pieces("10") == 10
    assert parse_pieces("+10") == 10
    assert parse_pieces(" -3 ") == -3

    for bad in ["", "1.5", "ten", "--3"]:
        with pytest.raises(ValueError):
            parse_pieces(bad)


def test_parse_absolute_dates():
    """ISO dates and day-first slash dates."""
    assert parse_date("2024-01-15", today=TODAY) == date(2024, 1, 15)
    assert parse_date("15/01/2024", today=TODAY) == date(2024, 1, 15)
    assert parse_date("05/03/2024", today=TODAY) == date(2024, 3, 5)


def test_parse_relative_dates():
    """Relative dates are resolved against the reference day."""
    assert parse_date("today", today=TODAY) == TODAY
    assert parse_date("Yesterday", today=TODAY) == date(2024, 3, 9)
    assert parse_date("tomorrow", today=TODAY) == date(2024, 3, 11)
    assert parse_date("in 3 days", today=TODAY) == date(2024, 3, 13)
    assert parse_date("in 2 weeks", today=TODAY) == date(2024, 3, 24)
    assert parse_date("in 1 month", today=TODAY) == date(2024, 4, 10)
    assert parse_date("next week", today=TODAY) == date(2024, 3, 11)
    assert parse_date("next month", today=TODAY) == date(2024, 4, 1)


def test_parse_invalid_date():
    """Unparseable dates raise ValueError."""
    with pytest.raises(ValueError):
        parse_date("someday", today=TODAY)


def test_month_range():
    """Leap-year February ends on the 29th."""
    assert month_range(date(2024, 2, 15)) == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_range(date(2024, 12, 31)) == (date(2024, 12, 1), date(2024, 12, 31))


def test_last_days():
    """Oldest first, ending with today."""
    assert last_days(TODAY, 3) == (date(2024, 3, 8), date(2024, 3, 9), TODAY)


def test_name_helpers():
    """Only case is folded; blank means empty or whitespace."""
    assert normalize_name("Ana Maria") == "ana maria"
    assert normalize_name("José ") == "josé "
    assert is_blank(None)
    assert is_blank("  ")
    assert not is_blank("Ana")
