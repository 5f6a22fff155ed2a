"""Entity: Product."""

from enum import Enum
from typing import Any

from pydantic import Field

from src.storefront.entities.core._base import Entity


class ProductStatus(str, Enum):
    """Lifecycle states of a catalog product."""

    ACTIVE = "ACTIVE"
    OUT_OF_STOCK = "OUT_OF_STOCK"
    DISCONTINUED = "DISCONTINUED"


class Product(Entity):
    """Product entity representing a sellable catalog item.

    Prices are integer cents. `status` follows the stock level through
    `status_for_stock` except for DISCONTINUED, which is only ever set by
    a soft delete or an explicit update.
    """

    name: str = Field(description="Display name")
    slug: str | None = Field(default=None, description="URL friendly name")
    description: str | None = Field(default=None, description="Long description")
    price_cents: int = Field(ge=0, description="Unit price in cents")
    stock: int = Field(default=0, ge=0, description="Units available")
    status: ProductStatus = Field(default=ProductStatus.ACTIVE)
    image_url: str | None = Field(default=None, description="Primary image")
    category_id: str | None = Field(default=None, description="Owning category")

    @property
    def is_purchasable(self) -> bool:
        return self.status == ProductStatus.ACTIVE and self.stock > 0

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.price_cents == other.price_cents
            and self.stock == other.stock
            and self.status == other.status
            and self.category_id == other.category_id
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.name,
            self.price_cents,
            self.stock,
            self.status,
            self.category_id,
        ))
