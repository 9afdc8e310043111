"""FastAPI routes for the wholesale platform: brands, products and carts."""

import json

from fastapi import APIRouter
from protean.utils.globals import current_domain

from wholesale.api.schemas import (
    AddToCartRequest,
    BrandSchema,
    CreateProductRequest,
    Envelope,
    OrderSummarySchema,
    ProductSchema,
    RegisterBrandRequest,
    UpdateCartItemRequest,
)
from wholesale.brand.brand import Brand
from wholesale.brand.registration import RegisterBrand
from wholesale.cart.items import AddToCart, RemoveFromCart, UpdateCartItem
from wholesale.cart.queries import cart_summary
from wholesale.checkout.checkout import CheckoutBrand
from wholesale.product.creation import CreateProduct
from wholesale.product.product import Product
from wholesale.shared.errors import BrandNotFound, ProductNotFound


def _brand_or_404(brand_id):
    brand = current_domain.repository_for(Brand).find(brand_id)
    if brand is None:
        raise BrandNotFound()
    return brand


def _product_with_brand(product, brands: dict | None = None) -> ProductSchema:
    brands = {} if brands is None else brands
    brand_id = str(product.brand_id)
    if brand_id not in brands:
        brands[brand_id] = current_domain.repository_for(Brand).find(brand_id)
    return ProductSchema.from_product(product, brand=brands[brand_id])


# ---------------------------------------------------------------------------
# Brand Router
# ---------------------------------------------------------------------------
brand_router = APIRouter(prefix="/brands", tags=["brands"])


@brand_router.get("", response_model=Envelope[list[BrandSchema]])
async def list_brands():
    brands = current_domain.repository_for(Brand).list_all()
    return Envelope(data=[BrandSchema.from_brand(brand) for brand in brands])


@brand_router.get("/{brand_id}", response_model=Envelope[BrandSchema])
async def get_brand(brand_id: str):
    return Envelope(data=BrandSchema.from_brand(_brand_or_404(brand_id)))


@brand_router.post("", status_code=201, response_model=Envelope[BrandSchema])
async def register_brand(body: RegisterBrandRequest):
    command = RegisterBrand(
        name=body.name,
        minimum_order_value=body.minimum_order_value,
        risk_free_return_premium=body.risk_free_return_premium,
        country=body.country,
        description=body.description,
    )
    brand_id = current_domain.process(command, asynchronous=False)
    return Envelope(data=BrandSchema.from_brand(_brand_or_404(brand_id)))


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.get("", response_model=Envelope[list[ProductSchema]])
async def list_products():
    products = current_domain.repository_for(Product).list_all()
    brands: dict = {}
    return Envelope(data=[_product_with_brand(product, brands) for product in products])


@product_router.get("/brand/{brand_id}", response_model=Envelope[list[ProductSchema]])
async def list_products_by_brand(brand_id: str):
    brand = _brand_or_404(brand_id)
    products = current_domain.repository_for(Product).find_by_brand(brand_id)
    return Envelope(data=[ProductSchema.from_product(product, brand=brand) for product in products])


@product_router.get("/{product_id}", response_model=Envelope[ProductSchema])
async def get_product(product_id: str):
    product = current_domain.repository_for(Product).find(product_id)
    if product is None:
        raise ProductNotFound()
    return Envelope(data=_product_with_brand(product))


@product_router.post("", status_code=201, response_model=Envelope[ProductSchema])
async def create_product(body: CreateProductRequest):
    command = CreateProduct(
        name=body.name,
        sku=body.sku,
        brand_id=body.brand_id,
        description=body.description,
        price_per_unit=body.price_per_unit,
        units_per_case=body.units_per_case,
        weight=body.weight,
        dimensions=json.dumps(body.dimensions.model_dump()),
        msrp=body.msrp,
        stock_quantity=body.stock_quantity,
    )
    product_id = current_domain.process(command, asynchronous=False)
    product = current_domain.repository_for(Product).get(product_id)
    return Envelope(data=_product_with_brand(product))


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.post("", response_model=Envelope[OrderSummarySchema])
async def add_to_cart(body: AddToCartRequest):
    command = AddToCart(
        user_id=body.user_id,
        product_id=body.product_id,
        quantity=body.quantity,
        has_risk_free_return=body.has_risk_free_return,
    )
    summary = current_domain.process(command, asynchronous=False)
    return Envelope(data=OrderSummarySchema.from_summary(summary))


@cart_router.get("/{user_id}", response_model=Envelope[OrderSummarySchema])
async def get_cart(user_id: str):
    return Envelope(data=OrderSummarySchema.from_summary(cart_summary(user_id)))


@cart_router.put("/{user_id}/items/{product_id}", response_model=Envelope[OrderSummarySchema])
async def update_cart_item(user_id: str, product_id: str, body: UpdateCartItemRequest):
    command = UpdateCartItem(
        user_id=user_id,
        product_id=product_id,
        quantity=body.quantity,
        has_risk_free_return=body.has_risk_free_return,
    )
    summary = current_domain.process(command, asynchronous=False)
    return Envelope(data=OrderSummarySchema.from_summary(summary))


@cart_router.delete("/{user_id}/items/{product_id}", response_model=Envelope[OrderSummarySchema])
async def remove_from_cart(user_id: str, product_id: str):
    command = RemoveFromCart(user_id=user_id, product_id=product_id)
    summary = current_domain.process(command, asynchronous=False)
    return Envelope(data=OrderSummarySchema.from_summary(summary))


@cart_router.post("/{user_id}/checkout/{brand_id}", response_model=Envelope[OrderSummarySchema])
async def checkout_brand(user_id: str, brand_id: str):
    command = CheckoutBrand(user_id=user_id, brand_id=brand_id)
    summary = current_domain.process(command, asynchronous=False)
    return Envelope(data=OrderSummarySchema.from_summary(summary))
