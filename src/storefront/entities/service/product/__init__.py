"""Entity package: Product."""

from .entity import Product, ProductStatus
from .repository import ProductRepository
from .table import ProductTable

__all__ = ["Product", "ProductRepository", "ProductStatus", "ProductTable"]
