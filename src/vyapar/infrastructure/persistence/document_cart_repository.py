"""Document-store implementation of CartRepository (``cart``)."""

from __future__ import annotations

from vyapar.domain.model.cart import CART_LINE_PENDING, CartLine
from vyapar.domain.model.value_objects import Quantity
from vyapar.domain.repository.cart_repository import CartRepository
from vyapar.infrastructure.persistence.document_store import CART, JsonDocumentStore
from vyapar.infrastructure.persistence.records import (
    read_money,
    read_product_name,
    read_timestamp,
    write_money,
)


class DocumentCartRepository(CartRepository):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    # --- CartRepository interface ---------------------------------------------

    def get_by_id(self, line_id: str) -> CartLine | None:
        raw = self._store.get(CART, line_id)
        return self._to_domain(line_id, raw) if raw is not None else None

    def list_for_retailer(self, retailer_id: str) -> list[CartLine]:
        lines = [
            self._to_domain(doc_id, raw)
            for doc_id, raw in self._store.query(CART, retailerId=retailer_id)
        ]
        lines.sort(key=lambda line: line.created_at)
        return lines

    def save(self, line: CartLine) -> None:
        if line.id is None:
            line.id = self._store.new_id()
        self._store.put(CART, line.id, self._to_raw(line))

    def delete(self, line_id: str) -> None:
        self._store.delete(CART, line_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(line: CartLine) -> dict:
        return {
            "retailerId": line.retailer_id,
            "wholesalerId": line.wholesaler_id,
            "productId": line.product_id,
            "productName": line.product_name,
            "wholesalerName": line.wholesaler_name,
            "pricePerUnit": write_money(line.price_per_unit),
            "quantity": line.quantity.value,
            "unit": line.unit,
            "status": line.status,
            "createdAt": line.created_at.isoformat(),
            "totalPrice": write_money(line.total_price),
        }

    @staticmethod
    def _to_domain(doc_id: str, raw: dict) -> CartLine:
        return CartLine(
            id=doc_id,
            retailer_id=raw["retailerId"],
            wholesaler_id=raw["wholesalerId"],
            wholesaler_name=raw.get("wholesalerName") or "N/A",
            product_id=raw["productId"],
            product_name=read_product_name(raw),
            quantity=Quantity(int(raw["quantity"])),
            price_per_unit=read_money(raw.get("pricePerUnit")),
            unit=raw.get("unit") or "unit",
            status=raw.get("status", CART_LINE_PENDING),
            created_at=read_timestamp(raw.get("createdAt")),
        )
