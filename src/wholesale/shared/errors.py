"""Domain rejections raised by the wholesale cart and catalogue.

Each rejection carries the exact user-facing ``message`` and the HTTP status
the API reports it with. Inconsistent stored data raises ``IntegrityFailure``
instead, which clients only see as a server error. Field-level validation
failures surface as ``protean.exceptions.ValidationError`` from the aggregates.
"""

from decimal import Decimal

from wholesale.shared.money import display_amount

MAX_CART_SKUS = 100


class WholesaleError(Exception):
    """Base class for rejections of client input."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------
class NotFound(WholesaleError):
    status_code = 404


class BrandNotFound(NotFound):
    def __init__(self):
        super().__init__("Brand not found")


class ProductNotFound(NotFound):
    def __init__(self):
        super().__init__("Product not found")


class CartNotFound(NotFound):
    def __init__(self):
        super().__init__("Cart not found")


class ItemNotFound(NotFound):
    def __init__(self):
        super().__init__("Product not found in cart")


class InvalidId(WholesaleError):
    def __init__(self, value):
        super().__init__(f"Invalid ID: {value}")
        self.value = value


class DuplicateKey(WholesaleError):
    """A uniqueness constraint (brand name, product SKU) was violated."""


# ---------------------------------------------------------------------------
# Cart and checkout
# ---------------------------------------------------------------------------
class InvalidCaseQuantity(WholesaleError):
    def __init__(self, units_per_case: int):
        super().__init__(f"Quantity must be a multiple of case size ({units_per_case})")
        self.units_per_case = units_per_case


class SkuCapExceeded(WholesaleError):
    def __init__(self, limit: int = MAX_CART_SKUS):
        super().__init__(f"Cart cannot contain more than {limit} SKUs")
        self.limit = limit


class NoItemsForBrand(WholesaleError):
    def __init__(self, brand_name: str):
        super().__init__(f"No items found for brand {brand_name}")
        self.brand_name = brand_name


class MinimumNotMet(WholesaleError):
    def __init__(self, subtotal: Decimal, minimum: Decimal, brand_name: str):
        super().__init__(
            f"Order total ({display_amount(subtotal)}) does not meet minimum order value "
            f"({display_amount(minimum)}) for {brand_name}"
        )
        self.subtotal = subtotal
        self.minimum = minimum
        self.brand_name = brand_name


# ---------------------------------------------------------------------------
# Data integrity
# ---------------------------------------------------------------------------
class IntegrityFailure(Exception):
    """Stored data is inconsistent. Reported as a server error, never shown to clients."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ReferenceMissing(IntegrityFailure):
    """A cart line item points at a product or brand that no longer exists."""

    def __init__(self, kind: str, identifier):
        super().__init__(f"{kind} {identifier} referenced by cart no longer exists")
        self.kind = kind
        self.identifier = identifier
