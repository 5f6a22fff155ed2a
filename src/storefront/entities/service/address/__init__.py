"""Entity package: shipping addresses."""

from .entity import SavedAddress, ShippingAddress
from .repository import AddressRepository
from .table import SavedAddressTable

__all__ = ["AddressRepository", "SavedAddress", "SavedAddressTable", "ShippingAddress"]
