"""Tests for GSTIN structural validation and state resolution."""

import pytest

from gst_invoicing.domain.services.gstin_validation import (
    get_state_from_gstin,
    normalize_gstin,
    pan_from_gstin,
    validate_gstin,
)


class TestValidateGSTIN:

    def test_documented_example(self):
        assert validate_gstin("27AABCU9603R1ZX") is True

    @pytest.mark.parametrize(
        "value",
        [
            "27AABCU9603R1Z",      # 14 chars
            "27AABCU9603R1ZXX",    # 16 chars
            "",
            None,
            "27aabcu9603r1zx",     # lowercase is not normalised
            " 27AABCU9603R1ZX",    # nor is whitespace
            "27AABCU9603R1AX",     # 14th char must be Z
            "27AABCU9603R0ZX",     # entity code cannot be 0
            "2AAABCU9603R1ZX",     # state code must be 2 digits
            "27AAB1U9603R1ZX",     # PAN letters
            "27AABCU96A3R1ZX",     # PAN digits
            12345678901234,
        ],
    )
    def test_invalid(self, value):
        assert validate_gstin(value) is False

    def test_other_valid_numbers(self):
        assert validate_gstin("36AABCU9603R1ZM")
        assert validate_gstin("29AAECC1206D1ZM")
        assert validate_gstin("07AAACR5055KAZ7")

    def test_checksum_not_verified(self):
        # Same number with every possible check character still passes
        for check in "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ":
            assert validate_gstin("27AABCU9603R1Z" + check)


class TestStateFromGSTIN:

    def test_known_states(self):
        assert get_state_from_gstin("27AABCU9603R1ZX") == "Maharashtra"
        assert get_state_from_gstin("29AAECC1206D1ZM") == "Karnataka"
        assert get_state_from_gstin("37AABCU9603R1ZX") == "Andhra Pradesh"

    def test_code_missing_from_table(self):
        # Chandigarh (04) and Ladakh (38) are not in the reference table
        assert get_state_from_gstin("04AABCU9603R1ZX") is None
        assert get_state_from_gstin("38AABCU9603R1ZX") is None

    def test_invalid_gstin(self):
        assert get_state_from_gstin("27AABCU9603R1Z") is None
        assert get_state_from_gstin(None) is None


class TestHelpers:

    def test_normalize(self):
        assert normalize_gstin("  27aabcu9603r1zx ") == "27AABCU9603R1ZX"
        assert normalize_gstin("   ") is None
        assert normalize_gstin(None) is None

    def test_pan_from_gstin(self):
        assert pan_from_gstin("27AABCU9603R1ZX") == "AABCU9603R"
        assert pan_from_gstin("bad") is None
