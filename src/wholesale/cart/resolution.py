"""Resolve cart line items against the catalogue.

Turns the product references stored on a cart into immutable snapshots of
the product and its brand, ready for ``wholesale.cart.summary.summarize``.
Brand and product rates are read at resolution time, so a change to a
brand's premium is reflected in every cart that is read afterwards.
"""

from protean.utils.globals import current_domain

from wholesale.brand.brand import Brand
from wholesale.cart.summary import BrandSnapshot, ProductSnapshot, ResolvedLineItem
from wholesale.product.product import Product
from wholesale.shared.errors import ReferenceMissing


def resolve_line_items(cart) -> list[ResolvedLineItem]:
    """Attach product and brand snapshots to every line item of ``cart``.

    Raises ``ReferenceMissing`` when a line item points at a product, or a
    product at a brand, that no longer exists.
    """
    products = current_domain.repository_for(Product)
    brands = current_domain.repository_for(Brand)

    brand_snapshots: dict[str, BrandSnapshot] = {}
    lines = []
    for item in cart.items:
        product = products.find(item.product_id)
        if product is None:
            raise ReferenceMissing("Product", item.product_id)

        brand_id = str(product.brand_id)
        if brand_id not in brand_snapshots:
            brand = brands.find(brand_id)
            if brand is None:
                raise ReferenceMissing("Brand", brand_id)
            brand_snapshots[brand_id] = BrandSnapshot.of(brand)

        lines.append(
            ResolvedLineItem(
                product=ProductSnapshot.of(product),
                brand=brand_snapshots[brand_id],
                quantity=item.quantity,
                has_risk_free_return=bool(item.has_risk_free_return),
            )
        )
    return lines
