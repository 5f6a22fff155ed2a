"""Saved address database table model."""

from sqlalchemy import UniqueConstraint

from src.storefront.entities.core._base import EntityTable


class SavedAddressTable(EntityTable, table=True):
    """Database persistence model for saved shipping addresses."""

    __table_args__ = (
        UniqueConstraint("street", "city", "state", "zip_code", "country"),
    )

    street: str
    city: str
    state: str
    zip_code: str
    country: str
