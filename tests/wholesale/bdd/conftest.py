"""Shared BDD fixtures and step definitions for the wholesale cart."""

import json

import pytest
from protean import current_domain
from pytest_bdd import given, parsers
from wholesale.brand.registration import RegisterBrand
from wholesale.cart.items import AddToCart
from wholesale.product.creation import CreateProduct

BUYER = "buyer-bdd"


# ---------------------------------------------------------------------------
# Scalar fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def buyer():
    return BUYER


@pytest.fixture()
def catalogue():
    """Ids of the brands and products set up by Given steps, by name and SKU."""
    return {"brands": {}, "products": {}}


@pytest.fixture()
def outcome():
    """Result (summary or rejection) of the latest When step."""
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse('a brand "{name}" with minimum order value {minimum:g} and return premium {premium:g}')
)
def brand_exists(catalogue, name, minimum, premium):
    catalogue["brands"][name] = current_domain.process(
        RegisterBrand(name=name, minimum_order_value=minimum, risk_free_return_premium=premium),
        asynchronous=False,
    )


@given(
    parsers.cfparse('a product "{sku}" of "{brand}" priced {price:g} per unit in cases of {units:d}')
)
def product_exists(catalogue, sku, brand, price, units):
    catalogue["products"][sku] = current_domain.process(
        CreateProduct(
            name=f"Product {sku}",
            sku=sku,
            brand_id=catalogue["brands"][brand],
            price_per_unit=price,
            units_per_case=units,
            weight=0.2,
            dimensions=json.dumps({"length": 4, "width": 4, "height": 12}),
            msrp=price * 1.25,
        ),
        asynchronous=False,
    )


@given(parsers.re(r'the buyer has (?P<quantity>\d+) units of "(?P<sku>[^"]+)" in the cart'))
def cart_holds(catalogue, buyer, quantity, sku):
    current_domain.process(
        AddToCart(user_id=buyer, product_id=catalogue["products"][sku], quantity=int(quantity)),
        asynchronous=False,
    )


@given(parsers.re(r'the buyer has (?P<quantity>\d+) units of "(?P<sku>[^"]+)" with risk-free return in the cart'))
def cart_holds_with_risk_free_return(catalogue, buyer, quantity, sku):
    current_domain.process(
        AddToCart(
            user_id=buyer,
            product_id=catalogue["products"][sku],
            quantity=int(quantity),
            has_risk_free_return=True,
        ),
        asynchronous=False,
    )
