"""Entity: shipping address."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints

from src.storefront.entities.core._base import Entity

AddressLine = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)]


class ShippingAddress(BaseModel):
    """Where an order is delivered. Every line is required."""

    model_config = ConfigDict(extra="forbid")

    street: AddressLine
    city: AddressLine
    state: AddressLine
    zip_code: AddressLine
    country: AddressLine


class SavedAddress(ShippingAddress, Entity):
    """A shipping address the customer chose to keep for later checkouts."""

    model_config = ConfigDict(extra="ignore")
