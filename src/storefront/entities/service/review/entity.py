"""Entity: Review."""

from pydantic import Field

from src.storefront.entities.core._base import Entity


class Review(Entity):
    """A customer's star rating of a product."""

    product_id: str = Field(description="Reviewed product")
    rating: int = Field(description="Star rating, 1 to 5")
    author: str | None = Field(default=None, description="Display name of the reviewer")
    comment: str | None = Field(default=None, description="Free text review")
