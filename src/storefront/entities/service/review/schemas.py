"""Request schemas for product reviews."""

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class ReviewCreate(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    rating: StrictInt = Field(ge=1, le=5)
    author: str | None = Field(default=None, max_length=100)
    comment: str | None = Field(default=None, max_length=5000)
