"""Cart line item management: commands and handler.

Every command returns the recomputed order summary of the cart, so callers
never need a separate read after a mutation.
"""

import structlog
from protean import handle
from protean.fields import Boolean, Identifier, Integer, String
from protean.utils.globals import current_domain

from wholesale.cart.cart import Cart
from wholesale.cart.queries import summarize_cart
from wholesale.domain import wholesale
from wholesale.product.product import Product
from wholesale.shared.errors import CartNotFound, ItemNotFound, ProductNotFound

logger = structlog.get_logger(__name__)


@wholesale.command(part_of="Cart")
class AddToCart:
    user_id = String(required=True, max_length=255)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    has_risk_free_return = Boolean(default=False)


@wholesale.command(part_of="Cart")
class UpdateCartItem:
    user_id = String(required=True, max_length=255)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    has_risk_free_return = Boolean(default=False)


@wholesale.command(part_of="Cart")
class RemoveFromCart:
    user_id = String(required=True, max_length=255)
    product_id = Identifier(required=True)


def _load_product(product_id):
    product = current_domain.repository_for(Product).find(product_id)
    if product is None:
        raise ProductNotFound()
    return product


def _load_cart(repo, user_id):
    cart = repo.find_by_user(user_id)
    if cart is None:
        raise CartNotFound()
    return cart


@wholesale.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.find_by_user(command.user_id) or Cart.create(user_id=command.user_id)

        product = _load_product(command.product_id)
        cart.add_item(
            product=product,
            quantity=command.quantity,
            has_risk_free_return=command.has_risk_free_return,
        )
        repo.add(cart)

        logger.info(
            "Cart item added",
            user_id=command.user_id,
            product_id=str(command.product_id),
            quantity=command.quantity,
        )
        return summarize_cart(cart)

    @handle(UpdateCartItem)
    def update_cart_item(self, command):
        repo = current_domain.repository_for(Cart)
        cart = _load_cart(repo, command.user_id)
        if cart.item_for(command.product_id) is None:
            raise ItemNotFound()

        product = _load_product(command.product_id)
        cart.update_item(
            product=product,
            quantity=command.quantity,
            has_risk_free_return=command.has_risk_free_return,
        )
        repo.add(cart)

        logger.info(
            "Cart item updated",
            user_id=command.user_id,
            product_id=str(command.product_id),
            quantity=command.quantity,
        )
        return summarize_cart(cart)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = _load_cart(repo, command.user_id)
        cart.remove_item(command.product_id)
        repo.add(cart)

        logger.info("Cart item removed", user_id=command.user_id, product_id=str(command.product_id))
        return summarize_cart(cart)
