"""Cart aggregate, one multi-brand cart per user.

Line items are keyed by product: a product appears at most once, and adding
it again overwrites its quantity and return flag. The cart is never deleted;
brand checkouts shrink it and it can be refilled afterwards.
"""

import json
from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, HasMany, Identifier, Integer, String

from wholesale.cart.events import BrandCheckedOut, CartItemAdded, CartItemRemoved, CartItemUpdated
from wholesale.domain import wholesale
from wholesale.shared.errors import MAX_CART_SKUS, InvalidCaseQuantity, ItemNotFound, SkuCapExceeded


@wholesale.entity(part_of="Cart")
class CartItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    has_risk_free_return = Boolean(default=False)
    added_at = DateTime()


@wholesale.aggregate
class Cart:
    user_id = String(required=True, max_length=255, unique=True)
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def cart_cannot_exceed_sku_limit(self):
        if len(self.items) > MAX_CART_SKUS:
            raise ValidationError({"items": [f"Cart cannot contain more than {MAX_CART_SKUS} SKUs"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, user_id):
        now = datetime.now(UTC)
        return cls(user_id=user_id, created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def item_for(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def add_item(self, product, quantity, has_risk_free_return=False):
        """Put ``quantity`` units of ``product`` in the cart.

        A product already in the cart has its quantity and return flag
        replaced, not incremented. The SKU limit is checked before the case
        size so that a full cart is reported even for an invalid quantity.
        """
        existing = self.item_for(product.id)

        if existing is None and len(self.items) >= MAX_CART_SKUS:
            raise SkuCapExceeded(MAX_CART_SKUS)

        if not product.is_valid_case_quantity(quantity):
            raise InvalidCaseQuantity(product.units_per_case)

        now = datetime.now(UTC)
        if existing:
            existing.quantity = quantity
            existing.has_risk_free_return = bool(has_risk_free_return)
        else:
            self.add_items(
                CartItem(
                    product_id=product.id,
                    quantity=quantity,
                    has_risk_free_return=bool(has_risk_free_return),
                    added_at=now,
                )
            )

        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                user_id=self.user_id,
                product_id=str(product.id),
                quantity=quantity,
                has_risk_free_return=bool(has_risk_free_return),
            )
        )

    def update_item(self, product, quantity, has_risk_free_return=False):
        """Overwrite the quantity and return flag of a product already in the cart.

        A quantity of zero removes the line item.
        """
        item = self.item_for(product.id)
        if item is None:
            raise ItemNotFound()

        if quantity == 0:
            self.remove_item(product.id)
            return

        if not product.is_valid_case_quantity(quantity):
            raise InvalidCaseQuantity(product.units_per_case)

        previous_quantity = item.quantity
        item.quantity = quantity
        item.has_risk_free_return = bool(has_risk_free_return)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemUpdated(
                cart_id=str(self.id),
                user_id=self.user_id,
                product_id=str(product.id),
                previous_quantity=previous_quantity,
                new_quantity=quantity,
                has_risk_free_return=bool(has_risk_free_return),
            )
        )

    def remove_item(self, product_id):
        item = self.item_for(product_id)
        if item is None:
            raise ItemNotFound()

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemRemoved(
                cart_id=str(self.id),
                user_id=self.user_id,
                product_id=str(product_id),
            )
        )

    # -------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------
    def check_out_brand(self, brand_id, product_ids, subtotal):
        """Drop the line items of one brand after its checkout was accepted.

        ``product_ids`` is the brand membership computed when the checkout was
        validated; only those line items are removed.
        """
        product_ids = {str(product_id) for product_id in product_ids}
        checked_out = [i for i in self.items if str(i.product_id) in product_ids]
        for item in checked_out:
            self.remove_items(item)

        now = datetime.now(UTC)
        self.updated_at = now

        self.raise_(
            BrandCheckedOut(
                cart_id=str(self.id),
                user_id=self.user_id,
                brand_id=str(brand_id),
                product_ids=json.dumps(sorted(str(i.product_id) for i in checked_out)),
                subtotal=float(subtotal),
                checked_out_at=now,
            )
        )
        return checked_out
