"""Pydantic request/response schemas for the wholesale API.

These are external contracts (anti-corruption layer), separate from
internal Protean commands and aggregates. Amounts leave the domain as
``Decimal`` and are rendered as JSON numbers here.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class Envelope(BaseModel, Generic[DataT]):
    success: bool = True
    data: DataT


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class DimensionsSchema(BaseModel):
    length: float
    width: float
    height: float


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class RegisterBrandRequest(BaseModel):
    name: str
    minimum_order_value: float
    risk_free_return_premium: float
    country: str | None = None
    description: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Drunk Elephant",
                    "minimum_order_value": 500.0,
                    "risk_free_return_premium": 20,
                    "country": "US",
                    "description": "Clean clinical skincare",
                }
            ]
        }
    }


class CreateProductRequest(BaseModel):
    name: str
    sku: str
    brand_id: str
    price_per_unit: float
    units_per_case: int
    weight: float
    dimensions: DimensionsSchema
    msrp: float
    stock_quantity: int = 0
    description: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Protini Polypeptide Cream",
                    "sku": "DE-PP-001",
                    "brand_id": "5f0c9a6e-8d3b-4c57-9a0e-1b2c3d4e5f60",
                    "price_per_unit": 55.99,
                    "units_per_case": 4,
                    "weight": 0.15,
                    "dimensions": {"length": 6, "width": 6, "height": 6},
                    "msrp": 68.99,
                    "stock_quantity": 120,
                }
            ]
        }
    }


class AddToCartRequest(BaseModel):
    user_id: str
    product_id: str
    quantity: int
    has_risk_free_return: bool = False


class UpdateCartItemRequest(BaseModel):
    quantity: int
    has_risk_free_return: bool = False


# ---------------------------------------------------------------------------
# Catalogue Response Schemas
# ---------------------------------------------------------------------------
class BrandSchema(BaseModel):
    id: str
    name: str
    minimum_order_value: float
    risk_free_return_premium: float
    country: str | None = None
    description: str | None = None

    @classmethod
    def from_brand(cls, brand) -> "BrandSchema":
        """Build from a Brand aggregate or a BrandSnapshot."""
        return cls(
            id=str(brand.id),
            name=brand.name,
            minimum_order_value=float(brand.minimum_order_value),
            risk_free_return_premium=float(brand.risk_free_return_premium),
            country=brand.country,
            description=brand.description,
        )


class ProductSchema(BaseModel):
    id: str
    name: str
    sku: str
    brand_id: str
    brand: BrandSchema | None = None
    description: str | None = None
    price_per_unit: float
    units_per_case: int
    weight: float
    dimensions: DimensionsSchema
    msrp: float
    stock_quantity: int

    @classmethod
    def from_product(cls, product, brand=None) -> "ProductSchema":
        return cls(
            id=str(product.id),
            name=product.name,
            sku=product.sku,
            brand_id=str(product.brand_id),
            brand=BrandSchema.from_brand(brand) if brand is not None else None,
            description=product.description,
            price_per_unit=product.price_per_unit,
            units_per_case=product.units_per_case,
            weight=product.weight,
            dimensions=DimensionsSchema(
                length=product.dimensions.length,
                width=product.dimensions.width,
                height=product.dimensions.height,
            ),
            msrp=product.msrp,
            stock_quantity=product.stock_quantity or 0,
        )


# ---------------------------------------------------------------------------
# Cart Response Schemas
# ---------------------------------------------------------------------------
class LineItemProductSchema(BaseModel):
    id: str
    name: str
    sku: str
    brand_id: str
    price_per_unit: float
    units_per_case: int


class LineItemSchema(BaseModel):
    product: LineItemProductSchema
    quantity: int
    has_risk_free_return: bool
    base_price: float
    risk_free_premium: float
    total_price: float

    @classmethod
    def from_item(cls, item) -> "LineItemSchema":
        return cls(
            product=LineItemProductSchema(
                id=item.product.id,
                name=item.product.name,
                sku=item.product.sku,
                brand_id=item.product.brand_id,
                price_per_unit=float(item.product.price_per_unit),
                units_per_case=item.product.units_per_case,
            ),
            quantity=item.quantity,
            has_risk_free_return=item.has_risk_free_return,
            base_price=float(item.base_price),
            risk_free_premium=float(item.risk_free_premium),
            total_price=float(item.total_price),
        )


class BrandGroupSchema(BaseModel):
    brand_id: str
    brand: BrandSchema
    items: list[LineItemSchema]
    subtotal: float
    risk_free_premium: float
    total_amount: float
    reaches_minimum_order: bool

    @classmethod
    def from_group(cls, group) -> "BrandGroupSchema":
        return cls(
            brand_id=group.brand_id,
            brand=BrandSchema.from_brand(group.brand),
            items=[LineItemSchema.from_item(item) for item in group.items],
            subtotal=float(group.subtotal),
            risk_free_premium=float(group.risk_free_premium),
            total_amount=float(group.total_amount),
            reaches_minimum_order=group.reaches_minimum_order,
        )


class OrderSummarySchema(BaseModel):
    user_id: str
    items: list[LineItemSchema]
    brand_groups: list[BrandGroupSchema]
    total_order_amount: float
    risk_free_return_premium: float
    reaches_platform_minimum: bool

    @classmethod
    def from_summary(cls, summary) -> "OrderSummarySchema":
        return cls(
            user_id=summary.user_id,
            items=[LineItemSchema.from_item(item) for item in summary.items],
            brand_groups=[BrandGroupSchema.from_group(group) for group in summary.brand_groups],
            total_order_amount=float(summary.total_order_amount),
            risk_free_return_premium=float(summary.risk_free_return_premium),
            reaches_platform_minimum=summary.reaches_platform_minimum,
        )
