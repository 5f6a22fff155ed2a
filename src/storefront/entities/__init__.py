"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model with business logic
- table.py: Database persistence model
- repository.py: Data access layer

Importing this package registers every table with the SQLModel metadata.
"""

from .service.address import AddressRepository, SavedAddress, SavedAddressTable, ShippingAddress
from .service.category import Category, CategoryRepository, CategoryTable
from .service.order import Order, OrderRepository, OrderStatus, OrderTable, PaymentMethod
from .service.product import Product, ProductRepository, ProductStatus, ProductTable
from .service.review import Review, ReviewRepository, ReviewTable

__all__ = [
    "AddressRepository",
    "SavedAddress",
    "SavedAddressTable",
    "ShippingAddress",
    "Category",
    "CategoryRepository",
    "CategoryTable",
    "Order",
    "OrderRepository",
    "OrderStatus",
    "OrderTable",
    "PaymentMethod",
    "Product",
    "ProductRepository",
    "ProductStatus",
    "ProductTable",
    "Review",
    "ReviewRepository",
    "ReviewTable",
]
