"""Wholesale bounded context: brand catalogue, multi-brand cart and per-brand checkout.

Brands sell products in case quantities. A shopper keeps a single cart that
spans brands, and each brand is checked out on its own once the items of that
brand reach the brand's minimum order value.
"""

from protean.domain import Domain

from wholesale.utils.logging import configure_logging

# Configure logging for the application
configure_logging()

# Domain Composition Root
wholesale = Domain(name="wholesale")
