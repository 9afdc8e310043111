"""Monetary helpers.

Prices are stored as floats by the catalogue and converted to ``Decimal``
through their shortest string form, so ``5.99`` stays ``Decimal("5.99")``.
"""

from decimal import Decimal

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def to_decimal(value) -> Decimal:
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def display_amount(amount) -> str:
    """Render an amount without trailing zeros: ``300``, ``71.88``."""
    normalized = to_decimal(amount).normalize()
    if normalized == normalized.to_integral_value():
        return str(normalized.quantize(Decimal(1)))
    return format(normalized, "f")
