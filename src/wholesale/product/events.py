"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from wholesale.domain import wholesale


@wholesale.event(part_of="Product")
class ProductCreated:
    """A product was listed under a brand."""

    __version__ = 1

    product_id: Identifier(required=True)
    brand_id: Identifier(required=True)
    sku: String(required=True)
    name: String(required=True)
    price_per_unit: Float(required=True)
    units_per_case: Integer(required=True)
    created_at: DateTime(required=True)
