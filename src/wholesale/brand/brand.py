"""Brand aggregate: a seller with its own minimum order value and return premium."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, String, Text

from wholesale.domain import wholesale


@wholesale.aggregate
class Brand:
    """Brand aggregate root.

    ``minimum_order_value`` gates per-brand checkout. ``risk_free_return_premium``
    is a percentage surcharge applied to line items whose shopper opted into a
    risk-free return.
    """

    name: String(required=True, max_length=100, unique=True)
    minimum_order_value: Float(required=True)
    risk_free_return_premium: Float(required=True)
    country: String(max_length=100)
    description: Text()
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def amounts_must_be_in_range(self):
        errors = {}
        if self.minimum_order_value is not None and self.minimum_order_value < 0:
            errors["minimum_order_value"] = ["Minimum order value must be at least 0"]
        premium = self.risk_free_return_premium
        if premium is not None and premium < 0:
            errors["risk_free_return_premium"] = ["Risk-free return premium percentage must be at least 0"]
        elif premium is not None and premium > 100:
            errors["risk_free_return_premium"] = ["Risk-free return premium percentage cannot exceed 100"]
        if errors:
            raise ValidationError(errors)

    @classmethod
    def register(
        cls,
        name,
        minimum_order_value,
        risk_free_return_premium,
        country=None,
        description=None,
    ):
        from wholesale.brand.events import BrandRegistered

        now = datetime.now(UTC)
        brand = cls(
            name=name.strip() if isinstance(name, str) else name,
            minimum_order_value=minimum_order_value,
            risk_free_return_premium=risk_free_return_premium,
            country=country.strip() if isinstance(country, str) else country,
            description=description,
            created_at=now,
            updated_at=now,
        )
        brand.raise_(
            BrandRegistered(
                brand_id=brand.id,
                name=brand.name,
                minimum_order_value=brand.minimum_order_value,
                risk_free_return_premium=brand.risk_free_return_premium,
                registered_at=now,
            )
        )
        return brand
