"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.storefront.api.http.app_data import ApplicationDependencies
from src.storefront.core.services.catalog.service import ProductCatalogService
from src.storefront.core.services.checkout.service import CheckoutService
from src.storefront.runtime.context import get_config


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a database session that is closed after the response is sent."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_catalog_service(
    db: Session = Depends(get_db_session),
) -> ProductCatalogService:
    return ProductCatalogService(db)


def get_checkout_service(
    db: Session = Depends(get_db_session),
) -> CheckoutService:
    return CheckoutService(db, get_config().checkout)
