"""Entity: Order."""

from enum import Enum

from pydantic import Field

from src.storefront.entities.core._base import Entity
from src.storefront.entities.service.address.entity import ShippingAddress


class OrderStatus(str, Enum):
    PLACED = "PLACED"


class PaymentMethod(str, Enum):
    CARD = "card"


class Order(Entity):
    """A placed single-product order with the prices it was charged at."""

    product_id: str
    quantity: int = Field(ge=1)
    unit_price_cents: int = Field(ge=0)
    subtotal_cents: int = Field(ge=0)
    shipping_cents: int = Field(ge=0)
    tax_cents: int = Field(ge=0)
    total_cents: int = Field(ge=0)
    currency: str = "USD"
    payment_method: PaymentMethod = PaymentMethod.CARD
    status: OrderStatus = OrderStatus.PLACED
    shipping_address: ShippingAddress
