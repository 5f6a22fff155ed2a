from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import update
from sqlmodel import Session, col, select

from src.storefront.entities.service.product.entity import Product, ProductStatus
from src.storefront.entities.service.product.table import ProductTable


class ProductRepository:
    """Data-access layer for products.

    Write methods flush but never commit; the caller owns the transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, row: ProductTable) -> Product:
        return Product.model_validate(row, from_attributes=True)

    def get(self, product_id: str) -> Product | None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return self._to_entity(row)

    def reserve_stock(self, product_id: str, quantity: int) -> Product | None:
        """Take `quantity` units from an ACTIVE product in a single UPDATE.

        The stock check runs in the database; two checkouts can never both
        take the last unit. Returns None when no row matched.
        """
        statement = (
            update(ProductTable)
            .where(
                col(ProductTable.id) == product_id,
                col(ProductTable.stock) >= quantity,
                col(ProductTable.status) == ProductStatus.ACTIVE,
            )
            .values(stock=col(ProductTable.stock) - quantity, updated_at=datetime.now(UTC))
            .execution_options(synchronize_session=False)
        )
        result = self._session.exec(statement)
        if result.rowcount == 0:
            return None
        row = self._session.get(ProductTable, product_id)
        self._session.refresh(row)
        return self._to_entity(row)

    def stock_level(self, product_id: str) -> tuple[int, ProductStatus] | None:
        """Stock and status read from the database, bypassing the identity map."""
        statement = select(ProductTable.stock, ProductTable.status).where(
            ProductTable.id == product_id
        )
        level = self._session.exec(statement).first()
        if level is None:
            return None
        return level[0], ProductStatus(level[1])

    def list_all(
        self,
        *,
        status: ProductStatus | None = None,
        category_id: str | None = None,
        include_discontinued: bool = False,
    ) -> list[Product]:
        statement = select(ProductTable)
        if status is not None:
            statement = statement.where(ProductTable.status == status)
        elif not include_discontinued:
            statement = statement.where(ProductTable.status != ProductStatus.DISCONTINUED)
        if category_id is not None:
            statement = statement.where(ProductTable.category_id == category_id)
        statement = statement.order_by(col(ProductTable.created_at).desc())
        return [self._to_entity(row) for row in self._session.exec(statement)]

    def create(self, product: Product) -> Product:
        row = ProductTable.model_validate(product.model_dump())
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def update(self, product_id: str, changes: Mapping[str, Any]) -> Product | None:
        """Apply `changes` to a product; returns None when it does not exist."""
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        for field, value in changes.items():
            setattr(row, field, value)
        row.updated_at = datetime.now(UTC)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)
