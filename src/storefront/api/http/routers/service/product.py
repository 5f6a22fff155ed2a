"""Product API router: catalog reads, updates, soft delete and stock."""

from fastapi import APIRouter, Depends, HTTPException, Request
from loguru import logger
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from src.storefront.api.http.deps import get_catalog_service, get_db_session
from src.storefront.api.http.validation import json_body
from src.storefront.core.services.catalog.service import (
    ProductCatalogService,
    UnknownCategoryError,
)
from src.storefront.entities.core._base import is_valid_object_id
from src.storefront.entities.service.product import Product, ProductStatus
from src.storefront.entities.service.product.schemas import (
    ProductCreate,
    ProductDetailResponse,
    ProductResponse,
    ProductUpdate,
    StockUpdate,
)
from src.storefront.entities.service.review import Review
from src.storefront.entities.service.review.schemas import ReviewCreate

router = APIRouter(prefix="/api/products", tags=["products"])


def valid_product_id(product_id: str) -> str:
    """Reject malformed ids before any storage access."""
    if not is_valid_object_id(product_id):
        raise HTTPException(status_code=400, detail="Invalid product ID")
    return product_id


async def stock_body(request: Request) -> StockUpdate:
    try:
        return StockUpdate.model_validate(await request.json())
    except (ValueError, ValidationError) as exc:
        raise HTTPException(status_code=400, detail="Invalid stock value") from exc


def _not_found() -> HTTPException:
    return HTTPException(status_code=404, detail="Product not found")


def _unknown_category(exc: UnknownCategoryError) -> HTTPException:
    return HTTPException(
        status_code=400,
        detail={"form_errors": [], "field_errors": {"category_id": [str(exc)]}},
    )


@router.get("", response_model=list[Product])
def list_products(
    status: ProductStatus | None = None,
    category_id: str | None = None,
    include_discontinued: bool = False,
    catalog: ProductCatalogService = Depends(get_catalog_service),
) -> list[Product]:
    """List catalog products, newest first."""
    try:
        return catalog.list_products(
            status=status,
            category_id=category_id,
            include_discontinued=include_discontinued,
        )
    except SQLAlchemyError as e:
        logger.exception("GET /api/products error")
        raise HTTPException(status_code=500, detail="Internal server error") from e


@router.post("", response_model=Product, status_code=201)
def create_product(
    payload: ProductCreate = Depends(json_body(ProductCreate)),
    db: Session = Depends(get_db_session),
    catalog: ProductCatalogService = Depends(get_catalog_service),
) -> Product:
    """Create a product; its status follows the initial stock."""
    try:
        product = catalog.create_product(payload)
        db.commit()
        return product
    except UnknownCategoryError as e:
        db.rollback()
        raise _unknown_category(e) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("POST /api/products error")
        raise HTTPException(status_code=500, detail="Failed to create product") from e


@router.get("/{product_id}", response_model=ProductDetailResponse)
def get_product(
    product_id: str = Depends(valid_product_id),
    catalog: ProductCatalogService = Depends(get_catalog_service),
) -> ProductDetailResponse:
    """Get a product with its category and review summary."""
    try:
        detail = catalog.get_detail(product_id)
    except SQLAlchemyError as e:
        logger.exception("GET /api/products/{} error", product_id)
        raise HTTPException(status_code=500, detail="Internal server error") from e
    if detail is None:
        raise _not_found()
    return ProductDetailResponse(product=detail)


@router.put("/{product_id}", response_model=Product)
def update_product(
    product_id: str = Depends(valid_product_id),
    payload: ProductUpdate = Depends(json_body(ProductUpdate)),
    db: Session = Depends(get_db_session),
    catalog: ProductCatalogService = Depends(get_catalog_service),
) -> Product:
    """Apply a partial update to a product."""
    try:
        product = catalog.update_product(product_id, payload)
        if product is None:
            raise _not_found()
        db.commit()
        return product
    except UnknownCategoryError as e:
        db.rollback()
        raise _unknown_category(e) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("PUT /api/products/{} error", product_id)
        raise HTTPException(status_code=500, detail="Failed to update product") from e


@router.delete("/{product_id}")
def delete_product(
    product_id: str = Depends(valid_product_id),
    db: Session = Depends(get_db_session),
    catalog: ProductCatalogService = Depends(get_catalog_service),
) -> dict[str, str | bool]:
    """Discontinue a product. The record is kept."""
    try:
        product = catalog.discontinue(product_id)
        if product is None:
            raise _not_found()
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("DELETE /api/products/{} error", product_id)
        raise HTTPException(status_code=500, detail="Failed to delete product") from e
    return {"message": "Product discontinued", "success": True}


@router.patch("/{product_id}/stock", response_model=ProductResponse)
def update_stock(
    product_id: str = Depends(valid_product_id),
    payload: StockUpdate = Depends(stock_body),
    db: Session = Depends(get_db_session),
    catalog: ProductCatalogService = Depends(get_catalog_service),
) -> ProductResponse:
    """Set the stock level; status becomes OUT_OF_STOCK at zero, ACTIVE otherwise."""
    try:
        product = catalog.set_stock(product_id, payload.stock)
        if product is None:
            raise _not_found()
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("PATCH /api/products/{}/stock error", product_id)
        raise HTTPException(status_code=500, detail="Internal server error") from e
    return ProductResponse(product=product)


@router.get("/{product_id}/reviews", response_model=list[Review])
def list_reviews(
    product_id: str = Depends(valid_product_id),
    catalog: ProductCatalogService = Depends(get_catalog_service),
) -> list[Review]:
    try:
        reviews = catalog.list_reviews(product_id)
    except SQLAlchemyError as e:
        logger.exception("GET /api/products/{}/reviews error", product_id)
        raise HTTPException(status_code=500, detail="Internal server error") from e
    if reviews is None:
        raise _not_found()
    return reviews


@router.post("/{product_id}/reviews", response_model=Review, status_code=201)
def add_review(
    product_id: str = Depends(valid_product_id),
    payload: ReviewCreate = Depends(json_body(ReviewCreate)),
    db: Session = Depends(get_db_session),
    catalog: ProductCatalogService = Depends(get_catalog_service),
) -> Review:
    try:
        review = catalog.add_review(product_id, payload)
        if review is None:
            raise _not_found()
        db.commit()
        return review
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("POST /api/products/{}/reviews error", product_id)
        raise HTTPException(status_code=500, detail="Failed to add review") from e
