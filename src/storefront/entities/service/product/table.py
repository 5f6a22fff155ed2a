"""Product database table model."""

from sqlmodel import Field

from src.storefront.entities.core._base import EntityTable
from src.storefront.entities.service.product.entity import ProductStatus


class ProductTable(EntityTable, table=True):
    """Database persistence model for products.

    This represents how the Product entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    name: str
    slug: str | None = Field(default=None, index=True)
    description: str | None = None
    price_cents: int
    stock: int = 0
    status: ProductStatus = Field(default=ProductStatus.ACTIVE, index=True)
    image_url: str | None = None
    category_id: str | None = Field(default=None, foreign_key="categorytable.id", index=True)
