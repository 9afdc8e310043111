import json
import os

import pytest


@pytest.fixture(scope="session")
def _wholesale_domain(request):
    """Initialize the wholesale domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from wholesale.domain import wholesale

    wholesale.init()
    return wholesale


@pytest.fixture(scope="session", autouse=True)
def setup_db(_wholesale_domain):
    from wholesale.utils.db import drop_db, setup_db

    setup_db(_wholesale_domain)

    yield

    drop_db(_wholesale_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_wholesale_domain, monkeypatch):
    """Push domain context before each test, cleanup after."""
    monkeypatch.delenv("PLATFORM_MIN_ORDER_VALUE", raising=False)

    ctx = _wholesale_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


# ---------------------------------------------------------------------------
# Catalogue factories
# ---------------------------------------------------------------------------
@pytest.fixture()
def register_brand():
    """Register a brand through its command and return the loaded aggregate."""
    from protean import current_domain
    from wholesale.brand.brand import Brand
    from wholesale.brand.registration import RegisterBrand

    counter = iter(range(1, 10_000))

    def _register(**overrides):
        defaults = {
            "name": f"Brand {next(counter)}",
            "minimum_order_value": 500.0,
            "risk_free_return_premium": 10.0,
            "country": "US",
        }
        defaults.update(overrides)
        brand_id = current_domain.process(RegisterBrand(**defaults), asynchronous=False)
        return current_domain.repository_for(Brand).get(brand_id)

    return _register


@pytest.fixture()
def create_product():
    """Create a product through its command and return the loaded aggregate."""
    from protean import current_domain
    from wholesale.product.creation import CreateProduct
    from wholesale.product.product import Product

    counter = iter(range(1, 10_000))

    def _create(brand, **overrides):
        number = next(counter)
        defaults = {
            "name": f"Product {number}",
            "sku": f"SKU-{number:04d}",
            "brand_id": str(brand.id),
            "price_per_unit": 50.0,
            "units_per_case": 6,
            "weight": 0.25,
            "dimensions": {"length": 4, "width": 4, "height": 12},
            "msrp": 65.0,
        }
        defaults.update(overrides)
        defaults["dimensions"] = json.dumps(defaults["dimensions"])
        product_id = current_domain.process(CreateProduct(**defaults), asynchronous=False)
        return current_domain.repository_for(Product).get(product_id)

    return _create
