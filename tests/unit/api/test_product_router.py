"""Unit tests for the product API router."""

import pytest
from fastapi import status

from src.storefront.api.http.app import app
from src.storefront.api.http.deps import get_db_session
from src.storefront.entities.core._base import new_object_id
from src.storefront.entities.service.product import ProductStatus


def _storage_must_not_be_touched():
    raise AssertionError("storage accessed for a malformed id")


class TestProductId:
    @pytest.mark.parametrize(
        "method, path, body",
        [
            ("GET", "/api/products/{}", None),
            ("PUT", "/api/products/{}", {"name": "Mouse"}),
            ("DELETE", "/api/products/{}", None),
            ("PATCH", "/api/products/{}/stock", {"stock": 1}),
            ("GET", "/api/products/{}/reviews", None),
        ],
    )
    @pytest.mark.parametrize("bad_id", ["123", "zzzzzzzzzzzzzzzzzzzzzzzz", "a" * 25])
    def test_malformed_id_rejected_before_storage(self, client, method, path, body, bad_id):
        app.dependency_overrides[get_db_session] = _storage_must_not_be_touched

        response = client.request(method, path.format(bad_id), json=body)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"detail": "Invalid product ID"}

    def test_uppercase_hex_accepted(self, client):
        response = client.get(f"/api/products/{new_object_id().upper()}")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestGetProduct:
    def test_product_without_reviews(self, client, make_product):
        product = make_product()

        response = client.get(f"/api/products/{product.id}")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()["product"]
        assert body["id"] == product.id
        assert body["category"] is None
        assert body["reviews"] == {
            "average": 0,
            "count": 0,
            "distribution": {"1": 0, "2": 0, "3": 0, "4": 0, "5": 0},
        }

    def test_review_summary(self, client, make_product, add_reviews):
        product = make_product()
        add_reviews(product.id, [5, 5, 4])

        reviews = client.get(f"/api/products/{product.id}").json()["product"]["reviews"]

        assert reviews["average"] == 4.7
        assert reviews["count"] == 3
        assert reviews["distribution"] == {"1": 0, "2": 0, "3": 0, "4": 1, "5": 2}

    def test_category_embedded(self, client, make_category, make_product):
        category = make_category()
        product = make_product(category_id=category.id)

        body = client.get(f"/api/products/{product.id}").json()["product"]

        assert body["category"]["slug"] == "laptops"

    def test_unknown_product(self, client):
        response = client.get(f"/api/products/{new_object_id()}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"detail": "Product not found"}


class TestUpdateProduct:
    def test_partial_update(self, client, make_product, fetch_product):
        product = make_product()

        response = client.put(f"/api/products/{product.id}", json={"price_cents": 1999})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["price_cents"] == 1999
        stored = fetch_product(product.id)
        assert stored.price_cents == 1999
        assert stored.name == "Wireless Mouse"

    @pytest.mark.parametrize(
        "body, field",
        [
            ({"price_cents": "cheap"}, "price_cents"),
            ({"price_cents": -1}, "price_cents"),
            ({"stock": 1.5}, "stock"),
            ({"name": None}, "name"),
            ({"status": "SOLD"}, "status"),
            ({"colour": "red"}, "colour"),
        ],
    )
    def test_validation_errors_are_flattened(
        self, client, make_product, fetch_product, body, field
    ):
        product = make_product()

        response = client.put(f"/api/products/{product.id}", json=body)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        detail = response.json()["detail"]
        assert detail["form_errors"] == []
        assert field in detail["field_errors"]
        assert fetch_product(product.id) == product

    def test_body_must_be_an_object(self, client, make_product):
        product = make_product()

        response = client.put(f"/api/products/{product.id}", json=[1, 2])

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"]["form_errors"]

    def test_unknown_product(self, client):
        response = client.put(f"/api/products/{new_object_id()}", json={"name": "Mouse"})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_unknown_category(self, client, make_product):
        product = make_product()

        response = client.put(
            f"/api/products/{product.id}", json={"category_id": new_object_id()}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "category_id" in response.json()["detail"]["field_errors"]


class TestDeleteProduct:
    def test_soft_delete(self, client, make_product, fetch_product):
        product = make_product()

        response = client.delete(f"/api/products/{product.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Product discontinued", "success": True}
        assert fetch_product(product.id).status == ProductStatus.DISCONTINUED

        detail = client.get(f"/api/products/{product.id}")
        assert detail.status_code == status.HTTP_200_OK
        assert detail.json()["product"]["status"] == "DISCONTINUED"

    def test_unknown_product(self, client):
        response = client.delete(f"/api/products/{new_object_id()}")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestUpdateStock:
    @pytest.mark.parametrize("value", [-1, 2.5, "5", True, None])
    def test_invalid_stock_changes_nothing(self, client, make_product, fetch_product, value):
        product = make_product(stock=7)

        response = client.patch(f"/api/products/{product.id}/stock", json={"stock": value})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"detail": "Invalid stock value"}
        stored = fetch_product(product.id)
        assert stored.stock == 7
        assert stored.status == ProductStatus.ACTIVE

    def test_missing_body(self, client, make_product):
        product = make_product()

        response = client.patch(
            f"/api/products/{product.id}/stock",
            content=b"not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"detail": "Invalid stock value"}

    def test_zero_marks_out_of_stock(self, client, make_product, fetch_product):
        product = make_product(stock=3)

        response = client.patch(f"/api/products/{product.id}/stock", json={"stock": 0})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["product"]["stock"] == 0
        assert response.json()["product"]["status"] == "OUT_OF_STOCK"
        assert fetch_product(product.id).status == ProductStatus.OUT_OF_STOCK

    def test_restock_marks_active(self, client, make_product, fetch_product):
        product = make_product(stock=0, status=ProductStatus.OUT_OF_STOCK)

        response = client.patch(f"/api/products/{product.id}/stock", json={"stock": 12})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["product"]["status"] == "ACTIVE"
        stored = fetch_product(product.id)
        assert stored.stock == 12
        assert stored.status == ProductStatus.ACTIVE

    def test_unknown_product(self, client):
        response = client.patch(f"/api/products/{new_object_id()}/stock", json={"stock": 1})

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestListAndCreate:
    def test_list_hides_discontinued_by_default(self, client, make_product):
        kept = make_product(name="Keyboard")
        make_product(name="Old Mouse", status=ProductStatus.DISCONTINUED)

        listed = client.get("/api/products").json()
        everything = client.get("/api/products", params={"include_discontinued": True}).json()

        assert [p["id"] for p in listed] == [kept.id]
        assert len(everything) == 2

    def test_filter_by_status(self, client, make_product):
        make_product(name="Keyboard")
        empty = make_product(name="Hub", stock=0, status=ProductStatus.OUT_OF_STOCK)

        response = client.get("/api/products", params={"status": "OUT_OF_STOCK"})

        assert [p["id"] for p in response.json()] == [empty.id]

    def test_create_product(self, client, fetch_product):
        response = client.post(
            "/api/products",
            json={"name": "USB-C Hub", "slug": "usb-c-hub", "price_cents": 4999},
        )

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["status"] == "OUT_OF_STOCK"
        assert fetch_product(body["id"]).name == "USB-C Hub"

    def test_create_requires_price(self, client):
        response = client.post("/api/products", json={"name": "USB-C Hub"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "price_cents" in response.json()["detail"]["field_errors"]

    def test_create_with_unknown_category(self, client):
        response = client.post(
            "/api/products",
            json={"name": "Hub", "price_cents": 100, "category_id": new_object_id()},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "category_id" in response.json()["detail"]["field_errors"]


class TestReviews:
    def test_add_and_list_reviews(self, client, make_product):
        product = make_product()

        created = client.post(
            f"/api/products/{product.id}/reviews",
            json={"rating": 4, "author": "Sam", "comment": "Solid"},
        )
        listed = client.get(f"/api/products/{product.id}/reviews")

        assert created.status_code == status.HTTP_201_CREATED
        assert listed.status_code == status.HTTP_200_OK
        assert [r["rating"] for r in listed.json()] == [4]

    @pytest.mark.parametrize("rating", [0, 6, 4.5, "5"])
    def test_rating_must_be_one_to_five(self, client, make_product, rating):
        product = make_product()

        response = client.post(f"/api/products/{product.id}/reviews", json={"rating": rating})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "rating" in response.json()["detail"]["field_errors"]

    def test_review_for_unknown_product(self, client):
        response = client.post(f"/api/products/{new_object_id()}/reviews", json={"rating": 5})

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestCategories:
    def test_list_categories(self, client, make_category):
        make_category(name="Audio", slug="audio")
        make_category()

        response = client.get("/api/categories")

        assert response.status_code == status.HTTP_200_OK
        assert [c["slug"] for c in response.json()] == ["audio", "laptops"]


class TestQueryValidation:
    def test_unknown_status_filter(self, client):
        response = client.get("/api/products", params={"status": "BOGUS"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        detail = response.json()["detail"]
        assert detail["form_errors"] == []
        assert list(detail["field_errors"]) == ["status"]

    def test_include_discontinued_must_be_boolean(self, client):
        response = client.get("/api/products", params={"include_discontinued": "maybe"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "include_discontinued" in response.json()["detail"]["field_errors"]
