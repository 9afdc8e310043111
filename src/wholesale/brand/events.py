"""Domain events for the Brand aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from wholesale.domain import wholesale


@wholesale.event(part_of="Brand")
class BrandRegistered:
    """A brand joined the marketplace."""

    __version__ = 1

    brand_id: Identifier(required=True)
    name: String(required=True)
    minimum_order_value: Float(required=True)
    risk_free_return_premium: Float(required=True)
    registered_at: DateTime(required=True)
