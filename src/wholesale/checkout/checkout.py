"""Per-brand checkout: command and handler.

Checking out a brand validates the brand's group in the current cart and,
only when every check passes, removes that brand's line items. Items of all
other brands stay in the cart untouched.
"""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from wholesale.brand.brand import Brand
from wholesale.cart.cart import Cart
from wholesale.cart.resolution import resolve_line_items
from wholesale.cart.summary import BrandSnapshot, summarize
from wholesale.domain import wholesale
from wholesale.shared.errors import BrandNotFound, CartNotFound, MinimumNotMet, NoItemsForBrand
from wholesale.utils.settings import platform_minimum_order_value

logger = structlog.get_logger(__name__)


@wholesale.command(part_of="Cart")
class CheckoutBrand:
    user_id = String(required=True, max_length=255)
    brand_id = Identifier(required=True)


@wholesale.command_handler(part_of=Cart)
class CheckoutBrandHandler:
    @handle(CheckoutBrand)
    def checkout_brand(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.find_by_user(command.user_id)
        if cart is None:
            raise CartNotFound()

        brand = current_domain.repository_for(Brand).find(command.brand_id)
        if brand is None:
            raise BrandNotFound()
        brand = BrandSnapshot.of(brand)

        platform_minimum = platform_minimum_order_value()
        lines = resolve_line_items(cart)
        summary = summarize(cart.user_id, lines, platform_minimum)

        group = summary.group_for(brand.id)
        if group is None or not group.items:
            raise NoItemsForBrand(brand.name)

        if group.subtotal < brand.minimum_order_value:
            logger.info(
                "Brand checkout rejected below minimum",
                user_id=cart.user_id,
                brand_id=brand.id,
                subtotal=str(group.subtotal),
                minimum_order_value=str(brand.minimum_order_value),
            )
            raise MinimumNotMet(group.subtotal, brand.minimum_order_value, brand.name)

        # Membership comes from the snapshot that was validated above
        cart.check_out_brand(brand.id, group.product_ids, group.subtotal)
        repo.add(cart)

        logger.info(
            "Brand checked out",
            user_id=cart.user_id,
            brand_id=brand.id,
            item_count=len(group.items),
            subtotal=str(group.subtotal),
        )

        remaining = [line for line in lines if line.product.id not in group.product_ids]
        return summarize(cart.user_id, remaining, platform_minimum)
