"""Review database table model."""

from sqlmodel import Field

from src.storefront.entities.core._base import EntityTable


class ReviewTable(EntityTable, table=True):
    """Database persistence model for product reviews."""

    product_id: str = Field(foreign_key="producttable.id", index=True)
    rating: int
    author: str | None = None
    comment: str | None = None
