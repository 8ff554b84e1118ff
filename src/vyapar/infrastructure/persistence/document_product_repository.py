"""Document-store implementation of ProductRepository (``products``)."""

from __future__ import annotations

from vyapar.domain.model.product import Product
from vyapar.domain.repository.product_repository import ProductRepository
from vyapar.infrastructure.persistence.document_store import PRODUCTS, JsonDocumentStore
from vyapar.infrastructure.persistence.records import read_product_name, read_timestamp


class DocumentProductRepository(ProductRepository):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        raw = self._store.get(PRODUCTS, product_id)
        return self._to_domain(product_id, raw) if raw is not None else None

    def list_all(self) -> list[Product]:
        return [self._to_domain(doc_id, raw) for doc_id, raw in self._store.query(PRODUCTS)]

    def search(self, query: str | None = None, category: str | None = None) -> list[Product]:
        filters = {"category": category.strip().upper()} if category else {}
        prefix = (query or "").strip().lower()
        products = [
            self._to_domain(doc_id, raw)
            for doc_id, raw in self._store.query(PRODUCTS, **filters)
        ]
        found = [p for p in products if p.search_name.startswith(prefix)]
        found.sort(key=lambda p: p.search_name)
        return found

    def save(self, product: Product) -> None:
        self._store.put(PRODUCTS, product.id, self._to_raw(product))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "productId": product.id,
            "productName": product.name,
            "category": product.category,
            "unit": product.unit,
            "description": product.description,
            "searchName": product.search_name,
            "createdAt": product.created_at.isoformat(),
            "updatedAt": product.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(doc_id: str, raw: dict) -> Product:
        return Product(
            id=raw.get("productId") or doc_id,
            name=read_product_name(raw),
            category=raw.get("category", ""),
            unit=raw.get("unit") or "UNIT",
            description=raw.get("description", ""),
            created_at=read_timestamp(raw.get("createdAt")),
            updated_at=read_timestamp(raw.get("updatedAt")),
        )
