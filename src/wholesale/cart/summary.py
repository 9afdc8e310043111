"""Cart aggregation: brand-grouped order summary of a resolved cart.

Everything in this module is pure: it works on immutable snapshots of the
products and brands a cart refers to (see ``wholesale.cart.resolution``) and
never touches a repository. Amounts are ``Decimal`` throughout.

Per brand group:

* ``subtotal`` is the sum of ``price_per_unit * quantity``
* ``risk_free_premium`` is the sum, over items that opted in, of the item's
  base price times the brand's premium percentage
* ``total_amount`` is ``subtotal + risk_free_premium``
* ``reaches_minimum_order`` compares the subtotal alone with the brand's
  minimum; the premium does not count towards it

Order totals are plain sums over the groups, and the platform minimum is
compared against the grand total (premiums included).
"""

from dataclasses import dataclass, field
from decimal import Decimal

from wholesale.shared.money import HUNDRED, ZERO, to_decimal


# ---------------------------------------------------------------------------
# Snapshots
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class BrandSnapshot:
    id: str
    name: str
    minimum_order_value: Decimal
    risk_free_return_premium: Decimal
    country: str | None = None
    description: str | None = None

    @classmethod
    def of(cls, brand) -> "BrandSnapshot":
        return cls(
            id=str(brand.id),
            name=brand.name,
            minimum_order_value=to_decimal(brand.minimum_order_value),
            risk_free_return_premium=to_decimal(brand.risk_free_return_premium),
            country=brand.country,
            description=brand.description,
        )


@dataclass(frozen=True)
class ProductSnapshot:
    id: str
    name: str
    sku: str
    brand_id: str
    price_per_unit: Decimal
    units_per_case: int
    msrp: Decimal = ZERO

    @classmethod
    def of(cls, product) -> "ProductSnapshot":
        return cls(
            id=str(product.id),
            name=product.name,
            sku=product.sku,
            brand_id=str(product.brand_id),
            price_per_unit=to_decimal(product.price_per_unit),
            units_per_case=product.units_per_case,
            msrp=to_decimal(product.msrp),
        )


@dataclass(frozen=True)
class ResolvedLineItem:
    """A cart line item with its product and the product's brand attached."""

    product: ProductSnapshot
    brand: BrandSnapshot
    quantity: int
    has_risk_free_return: bool = False


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class PricedLineItem:
    product: ProductSnapshot
    quantity: int
    has_risk_free_return: bool
    base_price: Decimal
    risk_free_premium: Decimal
    total_price: Decimal


@dataclass(frozen=True)
class BrandGroup:
    brand: BrandSnapshot
    items: tuple[PricedLineItem, ...]
    subtotal: Decimal
    risk_free_premium: Decimal
    total_amount: Decimal
    reaches_minimum_order: bool

    @property
    def brand_id(self) -> str:
        return self.brand.id

    @property
    def product_ids(self) -> frozenset[str]:
        return frozenset(item.product.id for item in self.items)


@dataclass(frozen=True)
class OrderSummary:
    user_id: str
    items: tuple[PricedLineItem, ...] = ()
    brand_groups: tuple[BrandGroup, ...] = ()
    total_order_amount: Decimal = ZERO
    risk_free_return_premium: Decimal = ZERO
    reaches_platform_minimum: bool = False

    def group_for(self, brand_id) -> BrandGroup | None:
        return next((g for g in self.brand_groups if g.brand_id == str(brand_id)), None)

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass
class _GroupAccumulator:
    brand: BrandSnapshot
    items: list[PricedLineItem] = field(default_factory=list)
    subtotal: Decimal = ZERO
    risk_free_premium: Decimal = ZERO

    def freeze(self) -> BrandGroup:
        return BrandGroup(
            brand=self.brand,
            items=tuple(self.items),
            subtotal=self.subtotal,
            risk_free_premium=self.risk_free_premium,
            total_amount=self.subtotal + self.risk_free_premium,
            reaches_minimum_order=self.subtotal >= self.brand.minimum_order_value,
        )


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------
def price_line_item(line: ResolvedLineItem) -> PricedLineItem:
    base_price = line.product.price_per_unit * line.quantity
    premium = base_price * line.brand.risk_free_return_premium / HUNDRED if line.has_risk_free_return else ZERO
    return PricedLineItem(
        product=line.product,
        quantity=line.quantity,
        has_risk_free_return=line.has_risk_free_return,
        base_price=base_price,
        risk_free_premium=premium,
        total_price=base_price + premium,
    )


def group_by_brand(priced: list[tuple[BrandSnapshot, PricedLineItem]]) -> list[BrandGroup]:
    """Group priced items by brand identity, in order of first appearance."""
    accumulators: dict[str, _GroupAccumulator] = {}
    for brand, item in priced:
        acc = accumulators.get(brand.id)
        if acc is None:
            acc = accumulators[brand.id] = _GroupAccumulator(brand=brand)
        acc.items.append(item)
        acc.subtotal += item.base_price
        acc.risk_free_premium += item.risk_free_premium
    return [acc.freeze() for acc in accumulators.values()]


def summarize(user_id: str, lines, platform_minimum: Decimal) -> OrderSummary:
    """Build the order summary of a cart from its resolved line items."""
    priced = [(line.brand, price_line_item(line)) for line in lines]
    groups = group_by_brand(priced)

    total_order_amount = sum((g.total_amount for g in groups), ZERO)
    total_premium = sum((g.risk_free_premium for g in groups), ZERO)

    return OrderSummary(
        user_id=user_id,
        items=tuple(item for _, item in priced),
        brand_groups=tuple(groups),
        total_order_amount=total_order_amount,
        risk_free_return_premium=total_premium,
        reaches_platform_minimum=total_order_amount >= to_decimal(platform_minimum),
    )


def empty_summary(user_id: str, platform_minimum: Decimal) -> OrderSummary:
    return summarize(user_id, [], platform_minimum)
