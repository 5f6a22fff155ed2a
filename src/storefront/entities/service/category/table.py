"""Category database table model."""

from sqlmodel import Field

from src.storefront.entities.core._base import EntityTable


class CategoryTable(EntityTable, table=True):
    """Database persistence model for categories."""

    name: str
    slug: str = Field(unique=True, index=True)
    description: str | None = None
