"""Order database table model."""

from sqlmodel import Field

from src.storefront.entities.core._base import EntityTable
from src.storefront.entities.service.order.entity import OrderStatus, PaymentMethod


class OrderTable(EntityTable, table=True):
    """Database persistence model for orders; the address is stored inline."""

    product_id: str = Field(foreign_key="producttable.id", index=True)
    quantity: int
    unit_price_cents: int
    subtotal_cents: int
    shipping_cents: int
    tax_cents: int
    total_cents: int
    currency: str = "USD"
    payment_method: PaymentMethod = PaymentMethod.CARD
    status: OrderStatus = OrderStatus.PLACED
    ship_street: str
    ship_city: str
    ship_state: str
    ship_zip_code: str
    ship_country: str
