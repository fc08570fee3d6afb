"""
Integration tests for product API endpoints (all routes require a bearer token).
"""
import pytest

pytestmark = pytest.mark.integration


PRODUCT_PAYLOAD = {
    "title": "T3 Smart Pro",
    "description": "Latest smartphone with amazing features",
    "price": 999.99,
    "publishDate": "2024-01-15",
    "photoLink": "https://example.com/photo.jpg",
}


@pytest.fixture
def created_product(client, auth_headers):
    response = client.post("/products", json=PRODUCT_PAYLOAD, headers=auth_headers)
    assert response.status_code == 201
    return response.json()


class TestProductAuth:
    """Tests for bearer token enforcement"""

    @pytest.mark.parametrize(
        "method,path",
        [
            ("get", "/products"),
            ("get", "/products/any-id"),
            ("post", "/products"),
            ("put", "/products/any-id"),
            ("delete", "/products/any-id"),
        ],
    )
    def test_missing_token_returns_401(self, client, method, path):
        response = client.request(method.upper(), path, json=PRODUCT_PAYLOAD)
        assert response.status_code == 401
        assert response.json()["statusCode"] == 401

    def test_malformed_token_returns_401(self, client):
        response = client.get("/products", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401

    def test_expired_token_returns_401(self, client, auth_headers, clock):
        clock.advance(3600)
        response = client.get("/products", headers=auth_headers)
        assert response.status_code == 401
        assert response.json()["message"] == "Token has expired"


class TestProductCrud:
    """Tests for create/get/update/delete"""

    def test_create_returns_product_with_generated_id(self, created_product):
        assert created_product["productId"]
        assert created_product["title"] == "T3 Smart Pro"
        assert created_product["price"] == 999.99
        assert created_product["publishDate"] == "2024-01-15"

    def test_create_with_negative_price_returns_400(self, client, auth_headers, table):
        response = client.post("/products", json={**PRODUCT_PAYLOAD, "price": -1}, headers=auth_headers)
        assert response.status_code == 400
        assert not any(document["__edb_e__"] == "product" for document in table.documents)

    def test_get_product(self, client, auth_headers, created_product):
        response = client.get(f"/products/{created_product['productId']}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == created_product

    def test_get_missing_product_returns_404(self, client, auth_headers):
        response = client.get("/products/missing", headers=auth_headers)
        assert response.status_code == 404
        assert response.json() == {
            "statusCode": 404,
            "message": "Product with ID missing not found",
            "error": "Not Found",
        }

    def test_partial_update(self, client, auth_headers, created_product):
        product_id = created_product["productId"]
        response = client.put(f"/products/{product_id}", json={"price": 899.99}, headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {**created_product, "price": 899.99}

    def test_update_with_explicit_null_returns_400(self, client, auth_headers, created_product):
        product_id = created_product["productId"]
        response = client.put(f"/products/{product_id}", json={"title": None}, headers=auth_headers)
        assert response.status_code == 400

    def test_update_missing_product_returns_404(self, client, auth_headers):
        response = client.put("/products/missing", json={"price": 1}, headers=auth_headers)
        assert response.status_code == 404

    def test_delete_is_idempotent(self, client, auth_headers, created_product):
        path = f"/products/{created_product['productId']}"
        assert client.delete(path, headers=auth_headers).status_code == 204
        assert client.delete(path, headers=auth_headers).status_code == 204
        assert client.get(path, headers=auth_headers).status_code == 404


class TestProductListing:
    """Tests for GET /products pagination"""

    def test_empty_listing(self, client, auth_headers):
        response = client.get("/products", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"products": [], "nextKey": None}

    def test_pages_follow_next_key(self, client, auth_headers):
        created_ids = set()
        for index in range(5):
            response = client.post(
                "/products",
                json={**PRODUCT_PAYLOAD, "title": f"Product {index}"},
                headers=auth_headers,
            )
            created_ids.add(response.json()["productId"])

        seen = []
        params = {"limit": 2}
        while True:
            response = client.get("/products", params=params, headers=auth_headers)
            assert response.status_code == 200
            data = response.json()
            assert len(data["products"]) <= 2
            seen.extend(product["productId"] for product in data["products"])
            if data["nextKey"] is None:
                break
            params = {"limit": 2, "nextKey": data["nextKey"]}

        assert len(seen) == 5
        assert set(seen) == created_ids

    def test_users_are_not_listed_as_products(self, client, auth_headers, created_product):
        data = client.get("/products", headers=auth_headers).json()
        assert [product["productId"] for product in data["products"]] == [created_product["productId"]]

    def test_empty_next_key_returns_first_page(self, client, auth_headers, created_product):
        response = client.get("/products", params={"nextKey": ""}, headers=auth_headers)
        assert response.status_code == 200
        assert [product["productId"] for product in response.json()["products"]] == [
            created_product["productId"]
        ]

    def test_malformed_stored_product_returns_500(self, client, auth_headers, table):
        table.documents.append({
            "pk": "$ton-service#productid_broken",
            "sk": "$product_1",
            "product_id": "broken",
            "title": "Broken",
            "__edb_e__": "product",
            "__edb_v__": "1",
        })
        response = client.get("/products/broken", headers=auth_headers)
        assert response.status_code == 500
        assert response.json()["message"] == "Internal server error"

    def test_invalid_next_key_returns_400(self, client, auth_headers):
        response = client.get("/products", params={"nextKey": "garbage!"}, headers=auth_headers)
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid pagination cursor"

    @pytest.mark.parametrize("limit", [0, 101, "abc"])
    def test_invalid_limit_returns_400(self, client, auth_headers, limit):
        response = client.get("/products", params={"limit": limit}, headers=auth_headers)
        assert response.status_code == 400
