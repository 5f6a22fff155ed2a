"""Entity package: Order."""

from .entity import Order, OrderStatus, PaymentMethod
from .repository import OrderRepository
from .table import OrderTable

__all__ = ["Order", "OrderRepository", "OrderStatus", "OrderTable", "PaymentMethod"]
