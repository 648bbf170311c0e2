"""Unit tests for quantity and money helpers."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import (
    MAX_QUANTITY,
    cap_quantity,
    clamp_quantity,
    format_money,
    is_number,
    round_money,
    to_decimal,
    to_json_number,
)


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestClampQuantity:

    def test_within_bounds_unchanged(self):
        assert clamp_quantity(5) == 5

    def test_below_one_clamps_to_one(self):
        assert clamp_quantity(0) == 1
        assert clamp_quantity(-7) == 1

    def test_above_max_clamps_to_max(self):
        assert clamp_quantity(150) == MAX_QUANTITY

    def test_cap_only_applies_upper_bound(self):
        assert cap_quantity(150) == MAX_QUANTITY
        assert cap_quantity(0) == 0
        assert cap_quantity(-2) == -2


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoneyHelpers:

    def test_to_decimal_from_float_keeps_printed_value(self):
        assert to_decimal(0.1) == Decimal("0.1")

    def test_to_decimal_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            to_decimal("abc")

    def test_round_money_half_up(self):
        assert round_money(Decimal("0.125")) == Decimal("0.13")
        assert round_money(Decimal("0.135")) == Decimal("0.14")
        assert round_money(Decimal("44.8")) == Decimal("44.80")

    def test_is_number(self):
        assert is_number(3)
        assert is_number(2.5)
        assert is_number(Decimal("1.10"))
        assert not is_number(True)
        assert not is_number("3")
        assert not is_number(None)
        assert not is_number(float("nan"))
        assert not is_number(float("inf"))

    def test_to_json_number(self):
        assert to_json_number(Decimal("250")) == 250
        assert isinstance(to_json_number(Decimal("250.00")), int)
        assert to_json_number(Decimal("19.99")) == 19.99

    def test_format_money(self):
        assert format_money(Decimal("374.8")) == "$374.80"
