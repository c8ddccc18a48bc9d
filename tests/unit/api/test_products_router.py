"""Tests for the products router status-code mapping."""

import pytest
from fastapi.testclient import TestClient


class TestReadEndpoints:
    def test_list_products(self, client: TestClient):
        response = client.get("/products")

        assert response.status_code == 200
        body = response.json()
        assert [p["id"] for p in body] == [1, 2, 3]
        assert body[0] == {
            "id": 1,
            "name": "Laptop",
            "description": "Gaming laptop",
            "price": "1299.99",
            "stock": 10,
            "createdAt": body[0]["createdAt"],
            "updatedAt": body[0]["updatedAt"],
        }

    def test_list_products_empty_store(self, empty_client: TestClient):
        response = empty_client.get("/products")

        assert response.status_code == 200
        assert response.json() == []

    def test_get_product(self, client: TestClient):
        response = client.get("/products/2")

        assert response.status_code == 200
        assert response.json()["name"] == "Mouse"

    def test_get_missing_product(self, client: TestClient):
        response = client.get("/products/999")

        assert response.status_code == 404
        assert response.json() == {"detail": "Product with ID 999 not found"}

    def test_in_stock(self, client: TestClient):
        client.put("/products/2", json={"name": "Mouse", "price": 79.99, "stock": 0})

        response = client.get("/products/in-stock")

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [1, 3]

    def test_price_range_defaults(self, client: TestClient):
        response = client.get("/products/price-range")

        assert response.status_code == 200
        assert len(response.json()) == 3

    def test_price_range_defaults_include_max_price(self, client: TestClient):
        client.post(
            "/products", json={"name": "Yacht", "price": "79228162514264337593543950335"}
        )

        response = client.get("/products/price-range")

        assert [p["id"] for p in response.json()] == [1, 2, 3, 4]

    def test_price_range_only_min(self, client: TestClient):
        response = client.get("/products/price-range", params={"minPrice": "149.99"})

        assert [p["id"] for p in response.json()] == [1, 3]

    def test_price_range_rejects_non_numeric(self, client: TestClient):
        response = client.get("/products/price-range", params={"minPrice": "cheap"})

        assert response.status_code == 400

    def test_non_integer_id_does_not_match(self, client: TestClient):
        response = client.get("/products/abc")

        assert response.status_code == 404


class TestCreateEndpoint:
    def test_create_returns_201_with_location(
        self, client: TestClient, product_body: dict
    ):
        response = client.post("/products", json=product_body)

        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 4
        assert body["name"] == "Monitor"
        assert body["price"] == "199.99"
        assert body["description"] is None
        assert response.headers["location"].endswith("/products/4")

    def test_create_ignores_server_assigned_fields(self, client: TestClient):
        response = client.post(
            "/products",
            json={
                "id": 77,
                "name": "Cable",
                "price": 5,
                "createdAt": "1999-01-01T00:00:00Z",
            },
        )

        assert response.status_code == 201
        assert response.json()["id"] == 4
        assert not response.json()["createdAt"].startswith("1999")

    @pytest.mark.parametrize(
        ("body", "message"),
        [
            ({"name": "   ", "price": 1}, "Product name is required"),
            ({"price": 1}, "Product name is required"),
            ({"name": "Cable", "price": -1}, "Product price cannot be negative"),
            (
                {"name": "Yacht", "price": "1e40"},
                "Product price cannot exceed 79228162514264337593543950335",
            ),
        ],
    )
    def test_create_validation_errors(
        self, client: TestClient, body: dict, message: str
    ):
        response = client.post("/products", json=body)

        assert response.status_code == 400
        assert response.json() == {"detail": message}
        assert len(client.get("/products").json()) == 3

    def test_create_keeps_exact_price(self, client: TestClient):
        response = client.post(
            "/products", json={"name": "Resistor", "price": "0.12345678901234567891"}
        )

        assert response.status_code == 201
        product_id = response.json()["id"]
        fetched = client.get(f"/products/{product_id}")
        assert fetched.json()["price"] == "0.12345678901234567891"

    def test_create_normalizes_negative_zero_price(self, client: TestClient):
        response = client.post("/products", json={"name": "Sample", "price": "-0"})

        assert response.status_code == 201
        assert response.json()["price"] == "0"

    def test_create_malformed_body(self, client: TestClient):
        response = client.post("/products", json={"name": "Cable", "price": "lots"})

        assert response.status_code == 400
        assert isinstance(response.json()["detail"], list)


class TestUpdateEndpoint:
    def test_update_existing(self, client: TestClient):
        response = client.put(
            "/products/1",
            json={"name": "Laptop Pro", "description": "Faster", "price": 1999, "stock": 3},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == 1
        assert body["name"] == "Laptop Pro"
        assert body["stock"] == 3
        assert client.get("/products/1").json()["name"] == "Laptop Pro"

    def test_update_missing(self, client: TestClient, product_body: dict):
        response = client.put("/products/999", json=product_body)

        assert response.status_code == 404
        assert response.json() == {"detail": "Product with ID 999 not found"}

    def test_update_invalid_payload_on_missing_id_is_400(self, client: TestClient):
        """Validation runs before the existence check."""
        response = client.put("/products/999", json={"name": "", "price": 1})

        assert response.status_code == 400
        assert response.json() == {"detail": "Product name is required"}


class TestDeleteEndpoint:
    def test_delete_existing(self, client: TestClient):
        response = client.delete("/products/1")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get("/products/1").status_code == 404
        assert client.delete("/products/1").status_code == 404


class TestUnexpectedErrors:
    """Unexpected failures should become opaque 500s."""

    @pytest.mark.parametrize(
        ("method", "path", "body"),
        [
            ("GET", "/products", None),
            ("GET", "/products/1", None),
            ("POST", "/products", {"name": "Cable", "price": 1}),
            ("PUT", "/products/1", {"name": "Cable", "price": 1}),
            ("DELETE", "/products/1", None),
            ("GET", "/products/in-stock", None),
            ("GET", "/products/price-range", None),
        ],
    )
    def test_internal_errors_are_not_leaked(
        self, failing_client: TestClient, method: str, path: str, body: dict | None
    ):
        response = failing_client.request(method, path, json=body)

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}
        assert "corrupted" not in response.text


class TestMiddleware:
    def test_request_id_is_echoed(self, client: TestClient):
        response = client.get("/products", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"

    def test_request_id_is_generated(self, client: TestClient):
        response = client.get("/products")

        assert response.headers["X-Request-ID"]

    def test_security_headers(self, client: TestClient):
        response = client.get("/health")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
