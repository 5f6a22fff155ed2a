"""Entity: Category."""

from pydantic import Field

from src.storefront.entities.core._base import Entity


class Category(Entity):
    """Grouping of catalog products, e.g. laptops or accessories."""

    name: str = Field(description="Display name")
    slug: str = Field(description="URL friendly name")
    description: str | None = Field(default=None, description="Short description")
