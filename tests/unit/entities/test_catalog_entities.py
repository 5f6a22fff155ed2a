"""Data layer tests for catalog entities and repositories.

Repositories are exercised against an in-memory SQLite database.
"""

import re

from src.storefront.entities.core._base import is_valid_object_id, new_object_id
from src.storefront.entities.service.category import Category, CategoryRepository
from src.storefront.entities.service.product import (
    Product,
    ProductRepository,
    ProductStatus,
)
from src.storefront.entities.service.review import Review, ReviewRepository


class TestObjectIds:
    def test_new_ids_are_24_hex_characters(self):
        object_id = new_object_id()

        assert re.fullmatch(r"[0-9a-f]{24}", object_id)
        assert new_object_id() != object_id

    def test_validation(self):
        assert is_valid_object_id("507f1f77bcf86cd799439011")
        assert is_valid_object_id("507F1F77BCF86CD799439011")
        assert not is_valid_object_id("507f1f77bcf86cd79943901")
        assert not is_valid_object_id("507f1f77bcf86cd7994390111")
        assert not is_valid_object_id("507f1f77bcf86cd79943901g")
        assert not is_valid_object_id("507f1f77bcf86cd799439011\n")
        assert not is_valid_object_id("")


class TestProductEntity:
    def test_defaults(self):
        product = Product(name="Wireless Mouse", price_cents=2999)

        assert is_valid_object_id(product.id)
        assert product.stock == 0
        assert product.status == ProductStatus.ACTIVE
        assert product.category_id is None

    def test_equality_ignores_timestamps(self):
        first = Product(id="a" * 24, name="Mouse", price_cents=100, stock=1)
        second = Product(id="a" * 24, name="Mouse", price_cents=100, stock=1)
        other = Product(id="b" * 24, name="Mouse", price_cents=100, stock=1)

        assert first == second
        assert hash(first) == hash(second)
        assert first != other

    def test_is_purchasable(self):
        assert Product(name="A", price_cents=1, stock=1).is_purchasable
        assert not Product(name="A", price_cents=1, stock=0).is_purchasable
        assert not Product(
            name="A", price_cents=1, stock=5, status=ProductStatus.DISCONTINUED
        ).is_purchasable


class TestProductRepository:
    def test_create_and_get(self, session):
        repository = ProductRepository(session)

        created = repository.create(Product(name="Mouse", price_cents=2999, stock=3))
        session.commit()

        fetched = repository.get(created.id)
        assert fetched == created
        assert fetched.status == ProductStatus.ACTIVE

    def test_get_missing_returns_none(self, session):
        assert ProductRepository(session).get(new_object_id()) is None

    def test_update_applies_only_given_fields(self, session):
        repository = ProductRepository(session)
        created = repository.create(Product(name="Mouse", price_cents=2999, stock=3))

        updated = repository.update(created.id, {"price_cents": 1999})

        assert updated.price_cents == 1999
        assert updated.name == "Mouse"
        assert updated.stock == 3

    def test_update_missing_returns_none(self, session):
        assert ProductRepository(session).update(new_object_id(), {"stock": 1}) is None

    def test_reserve_stock(self, session):
        repository = ProductRepository(session)
        product = repository.create(Product(name="Mouse", price_cents=1, stock=3))

        reserved = repository.reserve_stock(product.id, 2)

        assert reserved.stock == 1
        assert repository.stock_level(product.id) == (1, ProductStatus.ACTIVE)

    def test_reserve_stock_never_goes_negative(self, session):
        repository = ProductRepository(session)
        product = repository.create(Product(name="Mouse", price_cents=1, stock=1))

        assert repository.reserve_stock(product.id, 2) is None
        assert repository.stock_level(product.id) == (1, ProductStatus.ACTIVE)

    def test_reserve_stock_requires_active_product(self, session):
        repository = ProductRepository(session)
        product = repository.create(
            Product(name="Mouse", price_cents=1, stock=5, status=ProductStatus.DISCONTINUED)
        )

        assert repository.reserve_stock(product.id, 1) is None
        assert repository.stock_level(product.id) == (5, ProductStatus.DISCONTINUED)
        assert repository.stock_level(new_object_id()) is None

    def test_list_excludes_discontinued_by_default(self, session):
        repository = ProductRepository(session)
        active = repository.create(Product(name="Active", price_cents=1, stock=1))
        gone = repository.create(
            Product(name="Gone", price_cents=1, stock=1, status=ProductStatus.DISCONTINUED)
        )

        ids = {product.id for product in repository.list_all()}
        assert ids == {active.id}

        everything = {product.id for product in repository.list_all(include_discontinued=True)}
        assert everything == {active.id, gone.id}

        only_gone = repository.list_all(status=ProductStatus.DISCONTINUED)
        assert [product.id for product in only_gone] == [gone.id]

    def test_list_by_category(self, session):
        category = CategoryRepository(session).create(Category(name="Audio", slug="audio"))
        repository = ProductRepository(session)
        inside = repository.create(
            Product(name="Headphones", price_cents=1, category_id=category.id)
        )
        repository.create(Product(name="Mouse", price_cents=1))

        listed = repository.list_all(category_id=category.id)
        assert [product.id for product in listed] == [inside.id]


class TestCategoryRepository:
    def test_get_by_slug(self, session):
        repository = CategoryRepository(session)
        created = repository.create(Category(name="Laptops", slug="laptops"))

        assert repository.get_by_slug("laptops") == created
        assert repository.get_by_slug("phones") is None

    def test_list_all_sorted_by_name(self, session):
        repository = CategoryRepository(session)
        repository.create(Category(name="Laptops", slug="laptops"))
        repository.create(Category(name="Audio", slug="audio"))

        assert [category.name for category in repository.list_all()] == ["Audio", "Laptops"]


class TestReviewRepository:
    def test_ratings_for_product(self, session):
        product = ProductRepository(session).create(Product(name="Mouse", price_cents=1))
        other = ProductRepository(session).create(Product(name="Pad", price_cents=1))
        reviews = ReviewRepository(session)
        for rating in (5, 4):
            reviews.create(Review(product_id=product.id, rating=rating))
        reviews.create(Review(product_id=other.id, rating=1))

        assert sorted(reviews.ratings_for_product(product.id)) == [4, 5]
        assert len(reviews.list_for_product(product.id)) == 2
