"""Reference catalogue used to seed a fresh database.

Brands and products are registered through the same commands the API uses,
so every invariant and uniqueness check applies to seeded data too.
"""

import json

import structlog
from protean.domain import Domain

from wholesale.brand.brand import Brand
from wholesale.brand.registration import RegisterBrand
from wholesale.product.creation import CreateProduct
from wholesale.product.product import Product

logger = structlog.get_logger(__name__)

BRANDS = [
    {
        "name": "The Ordinary",
        "minimum_order_value": 200.00,
        "risk_free_return_premium": 20,
        "description": "Affordable, science-backed skincare focusing on single-ingredient solutions",
    },
    {
        "name": "Summer Fridays",
        "minimum_order_value": 300.00,
        "risk_free_return_premium": 20,
        "description": "Clean beauty, Instagram-famous masks focusing on hydrating treatments",
    },
    {
        "name": "Drunk Elephant",
        "minimum_order_value": 500.00,
        "risk_free_return_premium": 20,
        "description": "Clean clinical skincare focusing on biocompatible ingredients",
    },
    {
        "name": "Glow Recipe",
        "minimum_order_value": 400.00,
        "risk_free_return_premium": 20,
        "description": "Fruit-powered Korean beauty focusing on gentle, effective formulations",
    },
    {
        "name": "Youth To The People",
        "minimum_order_value": 350.00,
        "risk_free_return_premium": 20,
        "description": "Superfood skincare focusing on vegan, sustainable formulas",
    },
]

# Keyed by brand name; resolved to brand ids at seed time
PRODUCTS = [
    {
        "name": "Niacinamide 10% + Zinc 1%",
        "sku": "TO-NZ-001",
        "brand": "The Ordinary",
        "price_per_unit": 5.99,
        "units_per_case": 12,
        "msrp": 7.99,
        "weight": 0.2,
        "dimensions": {"length": 3, "width": 3, "height": 10},
    },
    {
        "name": "Hyaluronic Acid 2% + B5",
        "sku": "TO-HA-001",
        "brand": "The Ordinary",
        "price_per_unit": 6.99,
        "units_per_case": 12,
        "msrp": 8.99,
        "weight": 0.2,
        "dimensions": {"length": 3, "width": 3, "height": 10},
    },
    {
        "name": "Jet Lag Mask",
        "sku": "SF-JLM-001",
        "brand": "Summer Fridays",
        "price_per_unit": 39.99,
        "units_per_case": 6,
        "msrp": 49.99,
        "weight": 0.3,
        "dimensions": {"length": 4, "width": 4, "height": 15},
    },
    {
        "name": "Cloud Dew Oil-Free Gel Cream",
        "sku": "SF-CD-001",
        "brand": "Summer Fridays",
        "price_per_unit": 35.99,
        "units_per_case": 6,
        "msrp": 44.99,
        "weight": 0.25,
        "dimensions": {"length": 5, "width": 5, "height": 5},
    },
    {
        "name": "Protini Polypeptide Cream",
        "sku": "DE-PP-001",
        "brand": "Drunk Elephant",
        "price_per_unit": 55.99,
        "units_per_case": 4,
        "msrp": 68.99,
        "weight": 0.15,
        "dimensions": {"length": 6, "width": 6, "height": 6},
    },
    {
        "name": "C-Firma Fresh Day Serum",
        "sku": "DE-CF-001",
        "brand": "Drunk Elephant",
        "price_per_unit": 65.99,
        "units_per_case": 4,
        "msrp": 78.99,
        "weight": 0.12,
        "dimensions": {"length": 4, "width": 4, "height": 12},
    },
    {
        "name": "Watermelon Glow PHA+BHA Pore-Tight Toner",
        "sku": "GR-WT-001",
        "brand": "Glow Recipe",
        "price_per_unit": 28.99,
        "units_per_case": 8,
        "msrp": 34.99,
        "weight": 0.25,
        "dimensions": {"length": 4, "width": 4, "height": 14},
    },
    {
        "name": "Plum Plump Hyaluronic Serum",
        "sku": "GR-PH-001",
        "brand": "Glow Recipe",
        "price_per_unit": 32.99,
        "units_per_case": 8,
        "msrp": 42.99,
        "weight": 0.2,
        "dimensions": {"length": 4, "width": 4, "height": 12},
    },
    {
        "name": "Superfood Cleanser",
        "sku": "YP-SC-001",
        "brand": "Youth To The People",
        "price_per_unit": 29.99,
        "units_per_case": 6,
        "msrp": 36.99,
        "weight": 0.24,
        "dimensions": {"length": 5, "width": 5, "height": 15},
    },
    {
        "name": "Adaptogen Deep Moisture Cream",
        "sku": "YP-AD-001",
        "brand": "Youth To The People",
        "price_per_unit": 45.99,
        "units_per_case": 6,
        "msrp": 58.99,
        "weight": 0.2,
        "dimensions": {"length": 6, "width": 6, "height": 6},
    },
]


def clear_catalogue(domain: Domain) -> None:
    with domain.domain_context():
        domain.repository_for(Product).clear()
        domain.repository_for(Brand).clear()


def seed_catalogue(domain: Domain) -> dict[str, str]:
    """Replace the catalogue with the reference brands and products.

    Returns a mapping of brand name to the new brand id.
    """
    clear_catalogue(domain)

    with domain.domain_context():
        brand_ids = {}
        for brand in BRANDS:
            brand_ids[brand["name"]] = domain.process(RegisterBrand(**brand), asynchronous=False)
        logger.info("Brands created", count=len(brand_ids))

        for product in PRODUCTS:
            data = dict(product)
            brand_name = data.pop("brand")
            domain.process(
                CreateProduct(
                    brand_id=brand_ids[brand_name],
                    dimensions=json.dumps(data.pop("dimensions")),
                    **data,
                ),
                asynchronous=False,
            )
        logger.info("Products created", count=len(PRODUCTS))

    return brand_ids
