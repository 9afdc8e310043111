from decimal import Decimal

import pytest
from wholesale.shared.errors import MinimumNotMet
from wholesale.shared.money import display_amount, to_decimal


class TestToDecimal:
    def test_float_keeps_its_shortest_form(self):
        assert to_decimal(5.99) == Decimal("5.99")

    def test_none_is_zero(self):
        assert to_decimal(None) == Decimal("0")


class TestDisplayAmount:
    @pytest.mark.parametrize(
        "amount, expected",
        [
            (Decimal("300"), "300"),
            (Decimal("300.00"), "300"),
            (Decimal("71.880"), "71.88"),
            (500.0, "500"),
            (Decimal("0"), "0"),
            (Decimal("1500"), "1500"),
        ],
    )
    def test_renders_without_trailing_zeros(self, amount, expected):
        assert display_amount(amount) == expected


def test_minimum_not_met_message():
    error = MinimumNotMet(Decimal("300.00"), Decimal("500"), "Drunk Elephant")
    assert error.message == (
        "Order total (300) does not meet minimum order value (500) for Drunk Elephant"
    )
    assert error.status_code == 400
