"""Checkout API router: page state, order summary and order placement."""

from fastapi import APIRouter, Depends, HTTPException, Query
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from src.storefront.api.http.deps import get_checkout_service, get_db_session
from src.storefront.api.http.validation import json_body
from src.storefront.core.services.checkout.pricing import OrderQuote
from src.storefront.core.services.checkout.service import (
    CheckoutService,
    CheckoutState,
    InsufficientStockError,
    PlaceOrderRequest,
    ProductNotFoundError,
    ProductUnavailableError,
    QuantityLimitError,
)
from src.storefront.entities.core._base import is_valid_object_id
from src.storefront.entities.service.address import SavedAddress
from src.storefront.entities.service.order import Order

router = APIRouter(prefix="/api/checkout", tags=["checkout"])


def product_param(product: str | None = Query(default=None)) -> str | None:
    """The `product` query parameter the checkout page is opened with."""
    if product is not None and not is_valid_object_id(product):
        raise HTTPException(status_code=400, detail="Invalid product ID")
    return product


def valid_order_id(order_id: str) -> str:
    if not is_valid_object_id(order_id):
        raise HTTPException(status_code=400, detail="Invalid order ID")
    return order_id


@router.get("", response_model=CheckoutState)
def checkout_state(
    product_id: str | None = Depends(product_param),
    quantity: int = Query(default=1, ge=1),
    checkout: CheckoutService = Depends(get_checkout_service),
) -> CheckoutState:
    """Initial form state and order summary for the checkout page."""
    try:
        return checkout.initial_state(product_id, quantity)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except QuantityLimitError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except SQLAlchemyError as e:
        logger.exception("GET /api/checkout error")
        raise HTTPException(status_code=500, detail="Internal server error") from e


@router.get("/summary", response_model=OrderQuote)
def order_summary(
    product_id: str | None = Depends(product_param),
    quantity: int = Query(default=1, ge=1),
    checkout: CheckoutService = Depends(get_checkout_service),
) -> OrderQuote:
    """Priced summary of buying `quantity` units of a product."""
    if product_id is None:
        raise HTTPException(status_code=400, detail="Missing product")
    try:
        return checkout.quote(product_id, quantity)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except QuantityLimitError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except SQLAlchemyError as e:
        logger.exception("GET /api/checkout/summary error")
        raise HTTPException(status_code=500, detail="Internal server error") from e


@router.post("/orders", response_model=Order, status_code=201)
def place_order(
    payload: PlaceOrderRequest = Depends(json_body(PlaceOrderRequest)),
    db: Session = Depends(get_db_session),
    checkout: CheckoutService = Depends(get_checkout_service),
) -> Order:
    """Place an order: reserve stock, persist the order and optionally the address."""
    try:
        order = checkout.place_order(payload)
        db.commit()
        return order
    except ProductNotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e)) from e
    except (ProductUnavailableError, InsufficientStockError) as e:
        db.rollback()
        raise HTTPException(status_code=409, detail=str(e)) from e
    except QuantityLimitError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e)) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("POST /api/checkout/orders error")
        raise HTTPException(status_code=500, detail="Failed to place order") from e


@router.get("/addresses", response_model=list[SavedAddress])
def saved_addresses(
    checkout: CheckoutService = Depends(get_checkout_service),
) -> list[SavedAddress]:
    try:
        return checkout.saved_addresses()
    except SQLAlchemyError as e:
        logger.exception("GET /api/checkout/addresses error")
        raise HTTPException(status_code=500, detail="Internal server error") from e


@router.get("/orders/{order_id}", response_model=Order)
def get_order(
    order_id: str = Depends(valid_order_id),
    checkout: CheckoutService = Depends(get_checkout_service),
) -> Order:
    try:
        order = checkout.get_order(order_id)
    except SQLAlchemyError as e:
        logger.exception("GET /api/checkout/orders/{} error", order_id)
        raise HTTPException(status_code=500, detail="Internal server error") from e
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return order
