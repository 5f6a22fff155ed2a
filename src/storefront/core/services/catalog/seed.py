"""Seeding of reference categories and demo products."""

from loguru import logger
from sqlmodel import Session, select

from src.storefront.core.services.catalog.stock import status_for_stock
from src.storefront.data.catalog import DEFAULT_CATEGORIES, DEMO_PRODUCTS
from src.storefront.entities.service.category import Category, CategoryRepository
from src.storefront.entities.service.product import Product, ProductRepository, ProductTable


def seed_catalog(session: Session, with_demo_products: bool = False) -> dict[str, int]:
    """Insert missing default categories (and demo products); safe to rerun.

    Returns the number of categories and products created.
    """
    categories = CategoryRepository(session)
    products = ProductRepository(session)
    created = {"categories": 0, "products": 0}

    by_slug: dict[str, Category] = {}
    for data in DEFAULT_CATEGORIES:
        category = categories.get_by_slug(data["slug"])
        if category is None:
            category = categories.create(Category(**data))
            created["categories"] += 1
        by_slug[category.slug] = category

    if with_demo_products:
        for data in DEMO_PRODUCTS:
            exists = session.exec(
                select(ProductTable).where(ProductTable.slug == data["slug"])
            ).first()
            if exists is not None:
                continue
            fields = {key: value for key, value in data.items() if key != "category"}
            category = by_slug.get(data["category"])
            products.create(
                Product(
                    **fields,
                    status=status_for_stock(fields["stock"]),
                    category_id=category.id if category else None,
                )
            )
            created["products"] += 1

    logger.info(
        "Seeded {} categories and {} products",
        created["categories"],
        created["products"],
    )
    return created
