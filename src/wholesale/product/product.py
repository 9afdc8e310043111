"""Product aggregate with the Dimensions value object."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, Integer, String, Text, ValueObject

from wholesale.domain import wholesale


def normalize_sku(sku):
    """SKUs are compared case-insensitively and stored upper-cased."""
    return sku.strip().upper() if isinstance(sku, str) else sku


@wholesale.value_object(part_of="Product")
class Dimensions:
    """Value object for physical dimensions of a single unit."""

    length: Float(required=True)
    width: Float(required=True)
    height: Float(required=True)

    @invariant.post
    def dimensions_must_be_positive(self):
        errors = {}
        for name in ("length", "width", "height"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                errors[name] = [f"{name.capitalize()} must be greater than 0"]
        if errors:
            raise ValidationError(errors)


@wholesale.aggregate
class Product:
    """Product aggregate root.

    Products are sold by the case: every cart quantity must be a multiple of
    ``units_per_case``. Weight, dimensions, MSRP and stock are informational.
    """

    name: String(required=True, max_length=255)
    sku: String(required=True, max_length=50, unique=True)
    brand_id: Identifier(required=True)
    description: Text()
    price_per_unit: Float(required=True)
    units_per_case: Integer(required=True)
    weight: Float(required=True)
    dimensions: ValueObject(Dimensions, required=True)
    msrp: Float(required=True)
    stock_quantity: Integer(default=0)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def quantities_must_be_in_range(self):
        errors = {}
        if self.price_per_unit is not None and self.price_per_unit < 0:
            errors["price_per_unit"] = ["Price per unit must be at least 0"]
        if self.units_per_case is not None and self.units_per_case < 1:
            errors["units_per_case"] = ["Units per case must be at least 1"]
        if self.weight is not None and self.weight <= 0:
            errors["weight"] = ["Weight must be greater than 0"]
        if self.msrp is not None and self.msrp < 0:
            errors["msrp"] = ["MSRP must be at least 0"]
        if self.stock_quantity is not None and self.stock_quantity < 0:
            errors["stock_quantity"] = ["Stock quantity must be at least 0"]
        if errors:
            raise ValidationError(errors)

    @classmethod
    def create(
        cls,
        name,
        sku,
        brand_id,
        price_per_unit,
        units_per_case,
        weight,
        dimensions,
        msrp,
        stock_quantity=0,
        description=None,
    ):
        from wholesale.product.events import ProductCreated

        dimensions_vo = Dimensions(**dimensions) if isinstance(dimensions, dict) else dimensions
        now = datetime.now(UTC)

        product = cls(
            name=name.strip() if isinstance(name, str) else name,
            sku=normalize_sku(sku),
            brand_id=brand_id,
            description=description,
            price_per_unit=price_per_unit,
            units_per_case=units_per_case,
            weight=weight,
            dimensions=dimensions_vo,
            msrp=msrp,
            stock_quantity=stock_quantity if stock_quantity is not None else 0,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductCreated(
                product_id=product.id,
                brand_id=product.brand_id,
                sku=product.sku,
                name=product.name,
                price_per_unit=product.price_per_unit,
                units_per_case=product.units_per_case,
                created_at=now,
            )
        )
        return product

    def is_valid_case_quantity(self, quantity) -> bool:
        """True when ``quantity`` is a positive whole number of cases."""
        return quantity > 0 and quantity % self.units_per_case == 0
