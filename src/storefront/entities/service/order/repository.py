from sqlmodel import Session

from src.storefront.entities.service.address.entity import ShippingAddress
from src.storefront.entities.service.order.entity import Order
from src.storefront.entities.service.order.table import OrderTable

_ADDRESS_FIELDS = tuple(ShippingAddress.model_fields)


class OrderRepository:
    """Data-access layer for orders."""

    def __init__(self, session: Session) -> None:
        self._session = session

    @staticmethod
    def _to_entity(row: OrderTable) -> Order:
        data = row.model_dump()
        address = {field: data.pop(f"ship_{field}") for field in _ADDRESS_FIELDS}
        return Order.model_validate({**data, "shipping_address": address})

    def get(self, order_id: str) -> Order | None:
        row = self._session.get(OrderTable, order_id)
        if row is None:
            return None
        return self._to_entity(row)

    def create(self, order: Order) -> Order:
        data = order.model_dump(exclude={"shipping_address"})
        data.update(
            {f"ship_{field}": value for field, value in order.shipping_address.model_dump().items()}
        )
        row = OrderTable.model_validate(data)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)
