from sqlmodel import Session, col, select

from src.storefront.entities.service.address.entity import SavedAddress, ShippingAddress
from src.storefront.entities.service.address.table import SavedAddressTable


class AddressRepository:
    """Data-access layer for saved shipping addresses."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def find(self, address: ShippingAddress) -> SavedAddress | None:
        statement = select(SavedAddressTable).where(
            (SavedAddressTable.street == address.street)
            & (SavedAddressTable.city == address.city)
            & (SavedAddressTable.state == address.state)
            & (SavedAddressTable.zip_code == address.zip_code)
            & (SavedAddressTable.country == address.country)
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return SavedAddress.model_validate(row, from_attributes=True)

    def save(self, address: ShippingAddress) -> SavedAddress:
        """Store an address once; saving an identical one returns the existing row."""
        existing = self.find(address)
        if existing is not None:
            return existing
        row = SavedAddressTable.model_validate(address.model_dump())
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return SavedAddress.model_validate(row, from_attributes=True)

    def list_all(self) -> list[SavedAddress]:
        statement = select(SavedAddressTable).order_by(col(SavedAddressTable.created_at).desc())
        return [
            SavedAddress.model_validate(row, from_attributes=True)
            for row in self._session.exec(statement)
        ]
