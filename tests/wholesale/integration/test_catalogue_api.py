"""Integration tests for the brand and product endpoints via TestClient."""

import uuid

import pytest
from fastapi.testclient import TestClient
from wholesale.api.application import create_app


@pytest.fixture()
def client(_wholesale_domain):
    return TestClient(create_app(_wholesale_domain))


def _brand_payload(**overrides):
    payload = {
        "name": "Summer Fridays",
        "minimum_order_value": 300.0,
        "risk_free_return_premium": 20,
        "country": "US",
    }
    payload.update(overrides)
    return payload


def _product_payload(brand_id, **overrides):
    payload = {
        "name": "Jet Lag Mask",
        "sku": "SF-JLM-001",
        "brand_id": brand_id,
        "price_per_unit": 39.99,
        "units_per_case": 6,
        "weight": 0.3,
        "dimensions": {"length": 4, "width": 4, "height": 15},
        "msrp": 49.99,
    }
    payload.update(overrides)
    return payload


class TestBrandEndpoints:
    def test_register_brand(self, client):
        response = client.post("/api/brands", json=_brand_payload())

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["name"] == "Summer Fridays"
        assert data["minimum_order_value"] == 300
        uuid.UUID(data["id"])

    def test_duplicate_brand_name(self, client):
        client.post("/api/brands", json=_brand_payload())
        response = client.post("/api/brands", json=_brand_payload())

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Brand name already exists"}

    def test_invalid_premium(self, client):
        response = client.post("/api/brands", json=_brand_payload(risk_free_return_premium=150))
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "Risk-free return premium percentage cannot exceed 100",
        }

    def test_negative_minimum_order_value(self, client):
        response = client.post("/api/brands", json=_brand_payload(minimum_order_value=-1))
        assert response.status_code == 400
        assert response.json()["error"] == "Minimum order value must be at least 0"

    def test_missing_name(self, client):
        payload = _brand_payload()
        del payload["name"]
        response = client.post("/api/brands", json=payload)
        assert response.status_code == 400
        assert response.json()["error"] == "Name is required"

    def test_list_brands(self, client):
        client.post("/api/brands", json=_brand_payload(name="The Ordinary"))
        client.post("/api/brands", json=_brand_payload(name="Glow Recipe"))

        response = client.get("/api/brands")

        assert response.status_code == 200
        assert [b["name"] for b in response.json()["data"]] == ["Glow Recipe", "The Ordinary"]

    def test_get_brand(self, client):
        brand_id = client.post("/api/brands", json=_brand_payload()).json()["data"]["id"]

        response = client.get(f"/api/brands/{brand_id}")

        assert response.status_code == 200
        assert response.json()["data"]["id"] == brand_id

    def test_get_unknown_brand(self, client):
        response = client.get(f"/api/brands/{uuid.uuid4()}")
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Brand not found"}

    def test_get_brand_with_malformed_id(self, client):
        response = client.get("/api/brands/xyz")
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid ID: xyz"


class TestProductEndpoints:
    @pytest.fixture()
    def brand_id(self, client):
        return client.post("/api/brands", json=_brand_payload()).json()["data"]["id"]

    def test_create_product(self, client, brand_id):
        response = client.post("/api/products", json=_product_payload(brand_id))

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["sku"] == "SF-JLM-001"
        assert data["brand"]["id"] == brand_id
        assert data["dimensions"] == {"length": 4, "width": 4, "height": 15}
        assert data["stock_quantity"] == 0

    def test_duplicate_sku(self, client, brand_id):
        client.post("/api/products", json=_product_payload(brand_id))
        response = client.post("/api/products", json=_product_payload(brand_id, name="Other"))

        assert response.status_code == 400
        assert response.json()["error"] == "SKU already exists"

    def test_create_for_unknown_brand(self, client):
        response = client.post("/api/products", json=_product_payload(str(uuid.uuid4())))
        assert response.status_code == 404
        assert response.json()["error"] == "Brand not found"

    def test_invalid_weight(self, client, brand_id):
        response = client.post("/api/products", json=_product_payload(brand_id, weight=0))
        assert response.status_code == 400
        assert response.json()["error"] == "Weight must be greater than 0"

    def test_invalid_units_per_case(self, client, brand_id):
        response = client.post("/api/products", json=_product_payload(brand_id, units_per_case=0))
        assert response.status_code == 400
        assert response.json()["error"] == "Units per case must be at least 1"

    def test_range_violations_are_joined(self, client, brand_id):
        response = client.post(
            "/api/products", json=_product_payload(brand_id, price_per_unit=-1, stock_quantity=-5)
        )
        assert response.status_code == 400
        error = response.json()["error"]
        assert "Price per unit must be at least 0" in error
        assert "Stock quantity must be at least 0" in error
        assert ". " in error

    def test_list_products_resolves_brand(self, client, brand_id):
        client.post("/api/products", json=_product_payload(brand_id))

        response = client.get("/api/products")

        assert response.status_code == 200
        products = response.json()["data"]
        assert len(products) == 1
        assert products[0]["brand"]["name"] == "Summer Fridays"

    def test_get_product(self, client, brand_id):
        product_id = client.post("/api/products", json=_product_payload(brand_id)).json()["data"]["id"]

        response = client.get(f"/api/products/{product_id}")

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Jet Lag Mask"

    def test_get_unknown_product(self, client):
        response = client.get(f"/api/products/{uuid.uuid4()}")
        assert response.status_code == 404
        assert response.json()["error"] == "Product not found"

    def test_products_by_brand(self, client, brand_id):
        other_id = client.post("/api/brands", json=_brand_payload(name="Glow Recipe")).json()["data"]["id"]
        client.post("/api/products", json=_product_payload(brand_id))
        client.post("/api/products", json=_product_payload(other_id, sku="GR-WT-001", name="Toner"))

        response = client.get(f"/api/products/brand/{brand_id}")

        assert response.status_code == 200
        assert [p["sku"] for p in response.json()["data"]] == ["SF-JLM-001"]

    def test_products_by_unknown_brand(self, client):
        response = client.get(f"/api/products/brand/{uuid.uuid4()}")
        assert response.status_code == 404
