"""Request and response schemas for the product API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from src.storefront.entities.service.category.entity import Category
from src.storefront.entities.service.product.entity import Product, ProductStatus


class ProductCreate(BaseModel):
    """Payload accepted when creating a product."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=200)
    slug: str | None = Field(default=None, max_length=200, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    description: str | None = None
    price_cents: StrictInt = Field(ge=0)
    stock: StrictInt = Field(default=0, ge=0)
    image_url: str | None = None
    category_id: str | None = Field(default=None, pattern=r"^[a-fA-F0-9]{24}$")


class ProductUpdate(BaseModel):
    """Partial update payload; only the fields present are written."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: str | None = Field(default=None, min_length=1, max_length=200)
    slug: str | None = Field(default=None, max_length=200, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    description: str | None = None
    price_cents: StrictInt | None = Field(default=None, ge=0)
    stock: StrictInt | None = Field(default=None, ge=0)
    status: ProductStatus | None = None
    image_url: str | None = None
    category_id: str | None = Field(default=None, pattern=r"^[a-fA-F0-9]{24}$")

    @field_validator("name", "price_cents", "stock", "status")
    @classmethod
    def _not_null(cls, value):
        if value is None:
            raise ValueError("Field may not be null")
        return value

    def changes(self) -> dict:
        """Fields explicitly sent by the client."""
        return self.model_dump(exclude_unset=True)


class StockUpdate(BaseModel):
    """Payload of the stock endpoint: a whole, non-negative unit count."""

    stock: StrictInt = Field(ge=0)


class ReviewSummary(BaseModel):
    """Aggregate of a product's ratings."""

    average: float = 0
    count: int = 0
    distribution: dict[str, int] = Field(
        default_factory=lambda: {str(star): 0 for star in range(1, 6)}
    )


class ProductDetail(Product):
    """A product together with its category and review summary."""

    category: Category | None = None
    reviews: ReviewSummary = Field(default_factory=ReviewSummary)


class ProductDetailResponse(BaseModel):
    product: ProductDetail


class ProductResponse(BaseModel):
    product: Product
