"""Order pricing: subtotal, shipping and tax for a single product line."""

from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel

from src.storefront.entities.service.product.entity import Product
from src.storefront.runtime.config.config_data import CheckoutConfig


class OrderQuote(BaseModel):
    """Priced order line as shown in the checkout summary."""

    product_id: str
    product_name: str
    quantity: int
    unit_price_cents: int
    subtotal_cents: int
    shipping_cents: int
    tax_cents: int
    total_cents: int
    currency: str


def shipping_for(subtotal_cents: int, config: CheckoutConfig) -> int:
    threshold = config.free_shipping_threshold_cents
    if threshold is not None and subtotal_cents >= threshold:
        return 0
    return config.shipping_fee_cents


def tax_for(subtotal_cents: int, config: CheckoutConfig) -> int:
    """Tax on the subtotal, rounded half up to whole cents."""
    tax = Decimal(subtotal_cents) * Decimal(str(config.tax_rate))
    return int(tax.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def quote_order(product: Product, quantity: int, config: CheckoutConfig) -> OrderQuote:
    if quantity < 1:
        raise ValueError("quantity must be at least 1")

    subtotal = product.price_cents * quantity
    shipping = shipping_for(subtotal, config)
    tax = tax_for(subtotal, config)
    return OrderQuote(
        product_id=product.id,
        product_name=product.name,
        quantity=quantity,
        unit_price_cents=product.price_cents,
        subtotal_cents=subtotal,
        shipping_cents=shipping,
        tax_cents=tax,
        total_cents=subtotal + shipping + tax,
        currency=config.currency,
    )
