from decimal import Decimal

from wholesale.utils.settings import platform_minimum_order_value


def test_platform_minimum_from_domain_config():
    assert platform_minimum_order_value() == Decimal("2000")


def test_environment_overrides_domain_config(monkeypatch):
    monkeypatch.setenv("PLATFORM_MIN_ORDER_VALUE", "1500.50")
    assert platform_minimum_order_value() == Decimal("1500.50")


def test_blank_environment_value_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("PLATFORM_MIN_ORDER_VALUE", " ")
    assert platform_minimum_order_value() == Decimal("2000")
