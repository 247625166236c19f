"""Tests for INR display formatting."""

from decimal import Decimal

import pytest

from gst_invoicing.domain.exceptions import InvalidAmountError
from gst_invoicing.domain.services.currency import format_inr


def test_indian_grouping():
    assert format_inr(100300) == "₹1,00,300.00"
    assert format_inr(12345678) == "₹1,23,45,678.00"
    assert format_inr(1000) == "₹1,000.00"


def test_small_amounts():
    assert format_inr(0) == "₹0.00"
    assert format_inr(999) == "₹999.00"
    assert format_inr(Decimal("5.5")) == "₹5.50"


def test_rounds_to_paise():
    assert format_inr(Decimal("1234567.891")) == "₹12,34,567.89"
    assert format_inr(Decimal("0.005")) == "₹0.01"


def test_negative_and_symbol():
    assert format_inr(-1500) == "-₹1,500.00"
    assert format_inr(1180, symbol="Rs ") == "Rs 1,180.00"


@pytest.mark.parametrize("amount", ["1e30", "abc", float("nan"), Decimal("Infinity")])
def test_unformattable_amounts(amount):
    with pytest.raises(InvalidAmountError):
        format_inr(amount)
