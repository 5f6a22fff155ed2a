"""Unit tests for checkout pricing."""

import pytest

from src.storefront.core.services.checkout.pricing import (
    quote_order,
    shipping_for,
    tax_for,
)
from src.storefront.entities.service.product import Product
from src.storefront.runtime.config.config_data import CheckoutConfig


@pytest.fixture
def config() -> CheckoutConfig:
    return CheckoutConfig(
        shipping_fee_cents=500, free_shipping_threshold_cents=10000, tax_rate=0.1
    )


class TestShipping:
    def test_flat_fee_below_threshold(self, config):
        assert shipping_for(9999, config) == 500

    def test_free_at_threshold(self, config):
        assert shipping_for(10000, config) == 0

    def test_threshold_disabled(self):
        config = CheckoutConfig(shipping_fee_cents=700, free_shipping_threshold_cents=None)
        assert shipping_for(1_000_000, config) == 700


class TestTax:
    def test_rounds_half_up_to_cents(self):
        config = CheckoutConfig(tax_rate=0.05)
        # 0.05 * 1010 = 50.5
        assert tax_for(1010, config) == 51

    def test_zero_rate(self):
        assert tax_for(1234, CheckoutConfig(tax_rate=0)) == 0


class TestQuoteOrder:
    def test_quote_totals(self, config):
        product = Product(name="Wireless Mouse", price_cents=2999, stock=5)

        quote = quote_order(product, 2, config)

        assert quote.product_id == product.id
        assert quote.unit_price_cents == 2999
        assert quote.subtotal_cents == 5998
        assert quote.shipping_cents == 500
        assert quote.tax_cents == 600
        assert quote.total_cents == 5998 + 500 + 600
        assert quote.currency == "USD"

    def test_free_shipping_over_threshold(self, config):
        product = Product(name="Laptop", price_cents=199900, stock=5)

        quote = quote_order(product, 1, config)

        assert quote.shipping_cents == 0
        assert quote.total_cents == 199900 + 19990

    def test_rejects_zero_quantity(self, config):
        product = Product(name="Laptop", price_cents=100, stock=5)

        with pytest.raises(ValueError):
            quote_order(product, 0, config)
