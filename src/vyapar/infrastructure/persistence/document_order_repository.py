"""Document-store implementation of OrderRepository (``orders``)."""

from __future__ import annotations

from vyapar.domain.model.order import Order, OrderStatus
from vyapar.domain.model.value_objects import Quantity
from vyapar.domain.repository.order_repository import OrderRepository
from vyapar.infrastructure.persistence.document_store import ORDERS, JsonDocumentStore
from vyapar.infrastructure.persistence.records import (
    read_money,
    read_order_status,
    read_product_name,
    read_timestamp,
    write_money,
)


class DocumentOrderRepository(OrderRepository):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: str) -> Order | None:
        raw = self._store.get(ORDERS, order_id)
        return self._to_domain(order_id, raw) if raw is not None else None

    def list_all(self, status: OrderStatus | None = None) -> list[Order]:
        orders = [self._to_domain(doc_id, raw) for doc_id, raw in self._store.query(ORDERS)]
        if status is None:
            return orders
        return [o for o in orders if o.status == status]

    def list_for_retailer(self, retailer_id: str) -> list[Order]:
        return [
            self._to_domain(doc_id, raw)
            for doc_id, raw in self._store.query(ORDERS, retailerId=retailer_id)
        ]

    def list_for_wholesaler(self, wholesaler_id: str) -> list[Order]:
        return [
            self._to_domain(doc_id, raw)
            for doc_id, raw in self._store.query(ORDERS, wholesalerId=wholesaler_id)
        ]

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self._store.new_id()
        self._store.put(ORDERS, order.id, self._to_raw(order))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "productId": order.product_id,
            "productName": order.product_name,
            "wholesalerId": order.wholesaler_id,
            "wholesalerName": order.wholesaler_name,
            "retailerId": order.retailer_id,
            "qty": order.qty.value,
            "unit": order.unit,
            "pricePerUnit": write_money(order.price_per_unit),
            "status": order.status.value,
            "createdAt": order.created_at.isoformat(),
            "updatedAt": order.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(doc_id: str, raw: dict) -> Order:
        return Order(
            id=doc_id,
            product_id=raw["productId"],
            product_name=read_product_name(raw),
            wholesaler_id=raw["wholesalerId"],
            wholesaler_name=raw.get("wholesalerName") or "N/A",
            retailer_id=raw["retailerId"],
            qty=Quantity(int(raw["qty"])),
            unit=raw.get("unit") or "unit",
            price_per_unit=read_money(raw.get("pricePerUnit")),
            status=read_order_status(raw.get("status")),
            created_at=read_timestamp(raw.get("createdAt")),
            updated_at=read_timestamp(raw.get("updatedAt")),
        )
