"""Domain events for the Cart aggregate."""

from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String, Text

from wholesale.domain import wholesale


@wholesale.event(part_of="Cart")
class CartItemAdded:
    """A product was put in the cart, or its line item was overwritten."""

    __version__ = 1

    cart_id = Identifier(required=True)
    user_id = String(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    has_risk_free_return = Boolean(default=False)


@wholesale.event(part_of="Cart")
class CartItemUpdated:
    """The quantity or return flag of a line item was changed."""

    __version__ = 1

    cart_id = Identifier(required=True)
    user_id = String(required=True)
    product_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)
    has_risk_free_return = Boolean(default=False)


@wholesale.event(part_of="Cart")
class CartItemRemoved:
    """A line item was removed from the cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    user_id = String(required=True)
    product_id = Identifier(required=True)


@wholesale.event(part_of="Cart")
class BrandCheckedOut:
    """All line items of one brand left the cart through checkout."""

    __version__ = 1

    cart_id = Identifier(required=True)
    user_id = String(required=True)
    brand_id = Identifier(required=True)
    product_ids = Text(required=True)  # JSON: list of product ids
    subtotal = Float(required=True)
    checked_out_at = DateTime(required=True)
