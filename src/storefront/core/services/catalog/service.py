from loguru import logger
from sqlmodel import Session

from src.storefront.core.services.catalog.reviews import summarize_reviews
from src.storefront.core.services.catalog.stock import status_for_stock
from src.storefront.data.image_urls import image_url_for
from src.storefront.entities.service.category import CategoryRepository
from src.storefront.entities.service.product import Product, ProductRepository, ProductStatus
from src.storefront.entities.service.product.schemas import (
    ProductCreate,
    ProductDetail,
    ProductUpdate,
)
from src.storefront.entities.service.review import Review, ReviewRepository
from src.storefront.entities.service.review.schemas import ReviewCreate


class UnknownCategoryError(ValueError):
    """Raised when a product references a category that does not exist."""

    def __init__(self, category_id: str):
        super().__init__(f"Category {category_id} does not exist")
        self.category_id = category_id


class ProductCatalogService:
    """Catalog operations behind the product routes.

    Methods returning `None` signal that the product does not exist. Nothing
    here commits; the route owns the transaction.
    """

    def __init__(self, db_session: Session):
        self._products = ProductRepository(db_session)
        self._categories = CategoryRepository(db_session)
        self._reviews = ReviewRepository(db_session)

    def get_detail(self, product_id: str) -> ProductDetail | None:
        product = self._products.get(product_id)
        if product is None:
            return None

        category = (
            self._categories.get(product.category_id) if product.category_id else None
        )
        summary = summarize_reviews(self._reviews.ratings_for_product(product_id))

        detail = ProductDetail(
            **product.model_dump(), category=category, reviews=summary
        )
        if detail.image_url is None:
            detail.image_url = image_url_for(detail.slug)
        return detail

    def list_products(
        self,
        *,
        status: ProductStatus | None = None,
        category_id: str | None = None,
        include_discontinued: bool = False,
    ) -> list[Product]:
        return self._products.list_all(
            status=status,
            category_id=category_id,
            include_discontinued=include_discontinued,
        )

    def _ensure_category(self, category_id: str | None) -> None:
        if category_id is not None and self._categories.get(category_id) is None:
            raise UnknownCategoryError(category_id)

    def create_product(self, payload: ProductCreate) -> Product:
        self._ensure_category(payload.category_id)
        product = Product(
            **payload.model_dump(), status=status_for_stock(payload.stock)
        )
        created = self._products.create(product)
        logger.info("Created product {} ({})", created.id, created.name)
        return created

    def update_product(self, product_id: str, payload: ProductUpdate) -> Product | None:
        changes = payload.changes()
        self._ensure_category(changes.get("category_id"))
        return self._products.update(product_id, changes)

    def discontinue(self, product_id: str) -> Product | None:
        """Soft delete: the record stays, only its status changes."""
        product = self._products.update(
            product_id, {"status": ProductStatus.DISCONTINUED}
        )
        if product is not None:
            logger.info("Discontinued product {}", product_id)
        return product

    def set_stock(self, product_id: str, stock: int) -> Product | None:
        return self._products.update(
            product_id, {"stock": stock, "status": status_for_stock(stock)}
        )

    def list_reviews(self, product_id: str) -> list[Review] | None:
        if self._products.get(product_id) is None:
            return None
        return self._reviews.list_for_product(product_id)

    def add_review(self, product_id: str, payload: ReviewCreate) -> Review | None:
        if self._products.get(product_id) is None:
            return None
        return self._reviews.create(Review(product_id=product_id, **payload.model_dump()))
