from typing import NoReturn

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt
from sqlmodel import Session

from src.storefront.core.services.catalog.stock import status_for_stock
from src.storefront.core.services.checkout.pricing import OrderQuote, quote_order
from src.storefront.entities.service.address import (
    AddressRepository,
    SavedAddress,
    ShippingAddress,
)
from src.storefront.entities.service.order import Order, OrderRepository, PaymentMethod
from src.storefront.entities.service.product import ProductRepository, ProductStatus
from src.storefront.runtime.config.config_data import CheckoutConfig


class CheckoutError(Exception):
    """Base class for checkout failures the customer can act on."""


class ProductNotFoundError(CheckoutError, LookupError):
    def __init__(self, product_id: str):
        super().__init__("Product not found")
        self.product_id = product_id


class ProductUnavailableError(CheckoutError):
    def __init__(self, product_id: str, status: ProductStatus):
        super().__init__(f"Product is not available for purchase ({status.value})")
        self.product_id = product_id
        self.status = status


class InsufficientStockError(CheckoutError):
    def __init__(self, product_id: str, requested: int, available: int):
        super().__init__(f"Only {available} unit(s) in stock, {requested} requested")
        self.product_id = product_id
        self.requested = requested
        self.available = available


class QuantityLimitError(CheckoutError):
    def __init__(self, requested: int, max_quantity: int):
        super().__init__(f"quantity may not exceed {max_quantity}")
        self.requested = requested
        self.max_quantity = max_quantity


class PlaceOrderRequest(BaseModel):
    """Everything the checkout page collects before the order is placed."""

    model_config = ConfigDict(extra="forbid")

    product_id: str = Field(pattern=r"^[a-fA-F0-9]{24}$")
    quantity: StrictInt = Field(default=1, ge=1)
    shipping_address: ShippingAddress
    save_address: StrictBool = False
    payment_method: PaymentMethod = PaymentMethod.CARD


class CheckoutState(BaseModel):
    """Initial state of the checkout page for an optional product."""

    product_id: str | None = None
    shipping_address: dict[str, str] = Field(
        default_factory=lambda: {field: "" for field in ShippingAddress.model_fields}
    )
    save_address: bool = False
    payment_method: PaymentMethod = PaymentMethod.CARD
    summary: OrderQuote | None = None


class CheckoutService:
    """Quotes and places single-product orders.

    `place_order` flushes stock, order and address changes in the caller's
    session; the caller commits or rolls back the whole checkout.
    """

    def __init__(self, db_session: Session, config: CheckoutConfig):
        self._config = config
        self._products = ProductRepository(db_session)
        self._orders = OrderRepository(db_session)
        self._addresses = AddressRepository(db_session)

    def _check_quantity(self, quantity: int) -> None:
        if quantity > self._config.max_quantity:
            raise QuantityLimitError(quantity, self._config.max_quantity)

    def quote(self, product_id: str, quantity: int = 1) -> OrderQuote:
        self._check_quantity(quantity)
        product = self._products.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return quote_order(product, quantity, self._config)

    def initial_state(self, product_id: str | None, quantity: int = 1) -> CheckoutState:
        if product_id is None:
            return CheckoutState()
        return CheckoutState(product_id=product_id, summary=self.quote(product_id, quantity))

    def place_order(self, request: PlaceOrderRequest) -> Order:
        self._check_quantity(request.quantity)
        product = self._products.get(request.product_id)
        if product is None:
            raise ProductNotFoundError(request.product_id)

        reserved = self._products.reserve_stock(product.id, request.quantity)
        if reserved is None:
            self._raise_not_reservable(product.id, request.quantity)
        status = status_for_stock(reserved.stock)
        if status != reserved.status:
            self._products.update(product.id, {"status": status})

        quote = quote_order(product, request.quantity, self._config)
        order = self._orders.create(
            Order(
                product_id=product.id,
                quantity=quote.quantity,
                unit_price_cents=quote.unit_price_cents,
                subtotal_cents=quote.subtotal_cents,
                shipping_cents=quote.shipping_cents,
                tax_cents=quote.tax_cents,
                total_cents=quote.total_cents,
                currency=quote.currency,
                payment_method=request.payment_method,
                shipping_address=request.shipping_address,
            )
        )
        if request.save_address:
            self._addresses.save(request.shipping_address)

        logger.bind(order_id=order.id, product_id=product.id).info(
            "Order placed: {} x {} for {} cents",
            order.quantity,
            product.name,
            order.total_cents,
        )
        return order

    def _raise_not_reservable(self, product_id: str, quantity: int) -> NoReturn:
        level = self._products.stock_level(product_id)
        if level is None:
            raise ProductNotFoundError(product_id)
        stock, status = level
        if status == ProductStatus.DISCONTINUED:
            raise ProductUnavailableError(product_id, status)
        if stock < quantity:
            raise InsufficientStockError(product_id, quantity, stock)
        raise ProductUnavailableError(product_id, status)

    def get_order(self, order_id: str) -> Order | None:
        return self._orders.get(order_id)

    def saved_addresses(self) -> list[SavedAddress]:
        return self._addresses.list_all()
