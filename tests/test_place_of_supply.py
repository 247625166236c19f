"""Tests for reverse-charge and place-of-supply heuristics."""

from types import SimpleNamespace

import pytest

from gst_invoicing.domain.services.place_of_supply import (
    determine_place_of_supply,
    is_reverse_charge_applicable,
)

REGISTERED = "27AABCU9603R1ZX"


class TestReverseCharge:

    @pytest.mark.parametrize(
        "supplier, customer, expected",
        [
            (None, REGISTERED, True),
            ("", REGISTERED, True),
            ("   ", REGISTERED, True),
            (REGISTERED, REGISTERED, False),
            (REGISTERED, None, False),
            (None, None, False),
            ("", "", False),
        ],
    )
    def test_unregistered_to_registered_only(self, supplier, customer, expected):
        assert is_reverse_charge_applicable(supplier, customer) is expected

    def test_amount_ignored(self):
        assert is_reverse_charge_applicable(None, REGISTERED, amount=1) is True
        assert is_reverse_charge_applicable(REGISTERED, None, amount=10_00_000) is False


class TestPlaceOfSupply:

    billing = {"state": "Karnataka", "city": "Bengaluru"}
    shipping = {"state": "Kerala", "city": "Kochi"}

    def test_b2b_uses_billing(self):
        assert determine_place_of_supply(self.billing, self.shipping, is_b2b=True) == "Karnataka"

    def test_b2c_uses_shipping(self):
        assert determine_place_of_supply(self.billing, self.shipping, is_b2b=False) == "Kerala"

    def test_b2c_falls_back_to_billing(self):
        assert determine_place_of_supply(self.billing, None) == "Karnataka"
        assert determine_place_of_supply(self.billing, {"state": "  "}) == "Karnataka"

    def test_b2b_without_billing_uses_shipping(self):
        assert determine_place_of_supply({}, self.shipping, is_b2b=True) == "Kerala"

    def test_default_state(self):
        assert determine_place_of_supply(None, None) == "Maharashtra"
        assert determine_place_of_supply(None, None, default="Goa") == "Goa"

    def test_attribute_style_addresses(self):
        billing = SimpleNamespace(state="Odisha")
        shipping = SimpleNamespace(state=None)
        assert determine_place_of_supply(billing, shipping) == "Odisha"
