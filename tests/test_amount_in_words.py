"""Tests for the Indian-numbering amount-in-words converter."""

from decimal import Decimal

import pytest

from gst_invoicing.domain.exceptions import InvalidAmountError
from gst_invoicing.domain.services.amount_in_words import number_to_words


class TestWholeRupees:

    def test_zero(self):
        assert number_to_words(0) == "Zero Rupees Only"
        assert number_to_words(Decimal("0.00")) == "Zero Rupees Only"

    def test_teens_use_irregular_words(self):
        assert number_to_words(19) == "Nineteen Rupees Only"
        assert number_to_words(10) == "Ten Rupees Only"
        assert number_to_words(13) == "Thirteen Rupees Only"

    def test_under_hundred_has_no_hundred_token(self):
        assert number_to_words(45) == "Forty Five Rupees Only"
        assert number_to_words(90) == "Ninety Rupees Only"

    def test_hundreds(self):
        assert number_to_words(100) == "One Hundred Rupees Only"
        assert number_to_words(515) == "Five Hundred Fifteen Rupees Only"

    def test_thousand(self):
        assert number_to_words(1000).startswith("One Thousand")
        assert number_to_words(1180) == "One Thousand One Hundred Eighty Rupees Only"

    def test_lakh(self):
        assert "Lakh" in number_to_words(100000)
        assert number_to_words(100000) == "One Lakh Rupees Only"
        assert number_to_words(250019) == "Two Lakh Fifty Thousand Nineteen Rupees Only"

    def test_crore(self):
        assert number_to_words(12345678) == (
            "One Crore Twenty Three Lakh Forty Five Thousand "
            "Six Hundred Seventy Eight Rupees Only"
        )

    def test_large_crore_multiplier(self):
        assert number_to_words(10_000_000_000) == "One Thousand Crore Rupees Only"
        assert number_to_words(999_00_00_000) == "Nine Hundred Ninety Nine Crore Rupees Only"


class TestPaise:

    def test_rupees_and_paise(self):
        assert number_to_words(Decimal("1180.50")) == (
            "One Thousand One Hundred Eighty Rupees and Fifty Paise Only"
        )
        assert number_to_words(12.07) == "Twelve Rupees and Seven Paise Only"

    def test_paise_only(self):
        assert number_to_words("0.5") == "Zero Rupees and Fifty Paise Only"

    def test_paise_round_half_up(self):
        assert number_to_words(Decimal("1.005")) == "One Rupees and One Paise Only"

    def test_paise_carry_into_rupees(self):
        assert number_to_words(Decimal("0.999")) == "One Rupees Only"

    def test_no_stray_whitespace(self):
        for amount in (1, 20, 101, 1001, 100100, 10000001, Decimal("40.40")):
            words = number_to_words(amount)
            assert "  " not in words
            assert words == words.strip()


class TestInvalidAmounts:

    @pytest.mark.parametrize(
        "amount", [-1, Decimal("-0.01"), "abc", float("nan"), float("inf"), True, "1e30", Decimal("1e27")]
    )
    def test_rejected(self, amount):
        with pytest.raises(InvalidAmountError):
            number_to_words(amount)

    def test_largest_invoice_total_still_spelled(self):
        words = number_to_words(Decimal("999999999999.99"))
        assert words.startswith("Ninety Nine Thousand Nine Hundred Ninety Nine Crore")
        assert words.endswith("and Ninety Nine Paise Only")
