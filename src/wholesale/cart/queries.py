"""Read side of the cart: order summaries."""

from protean.utils.globals import current_domain

from wholesale.cart.cart import Cart
from wholesale.cart.resolution import resolve_line_items
from wholesale.cart.summary import OrderSummary, empty_summary, summarize
from wholesale.utils.settings import platform_minimum_order_value


def summarize_cart(cart) -> OrderSummary:
    return summarize(cart.user_id, resolve_line_items(cart), platform_minimum_order_value())


def cart_summary(user_id: str) -> OrderSummary:
    """Order summary for ``user_id``; empty, not an error, when there is no cart."""
    cart = current_domain.repository_for(Cart).find_by_user(user_id)
    if cart is None:
        return empty_summary(user_id, platform_minimum_order_value())
    return summarize_cart(cart)
