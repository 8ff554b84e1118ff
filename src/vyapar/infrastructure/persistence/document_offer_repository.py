"""Document-store implementation of OfferRepository (``wholesalerProducts``)."""

from __future__ import annotations

from vyapar.domain.model.offer import WholesalerOffer
from vyapar.domain.repository.offer_repository import OfferRepository
from vyapar.infrastructure.persistence.document_store import OFFERS, JsonDocumentStore
from vyapar.infrastructure.persistence.records import (
    read_money,
    read_price_tiers,
    write_money,
    write_price_tiers,
)


class DocumentOfferRepository(OfferRepository):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    # --- OfferRepository interface --------------------------------------------

    def get_by_id(self, offer_id: str) -> WholesalerOffer | None:
        raw = self._store.get(OFFERS, offer_id)
        return self._to_domain(offer_id, raw) if raw is not None else None

    def find(self, wholesaler_id: str, product_id: str) -> WholesalerOffer | None:
        matches = self._store.query(OFFERS, wholesalerId=wholesaler_id, productId=product_id)
        if not matches:
            return None
        doc_id, raw = matches[0]
        return self._to_domain(doc_id, raw)

    def list_for_product(self, product_id: str) -> list[WholesalerOffer]:
        return [
            self._to_domain(doc_id, raw)
            for doc_id, raw in self._store.query(OFFERS, productId=product_id)
        ]

    def save(self, offer: WholesalerOffer) -> None:
        if offer.id is None:
            offer.id = self._store.new_id()
        self._store.put(OFFERS, offer.id, self._to_raw(offer))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(offer: WholesalerOffer) -> dict:
        return {
            "wholesalerId": offer.wholesaler_id,
            "wholesalerName": offer.wholesaler_name,
            "productId": offer.product_id,
            "priceTiers": write_price_tiers(offer.price_tiers),
            "pricePerUnit": write_money(offer.base_price),
            "available": offer.available,
            "unit": offer.unit,
            "deliveryArea": list(offer.delivery_area),
        }

    @staticmethod
    def _to_domain(doc_id: str, raw: dict) -> WholesalerOffer:
        return WholesalerOffer(
            id=doc_id,
            wholesaler_id=raw["wholesalerId"],
            wholesaler_name=raw.get("wholesalerName") or "N/A",
            product_id=raw["productId"],
            unit=raw.get("unit") or "unit",
            price_tiers=read_price_tiers(raw, doc_id),
            base_price=read_money(raw.get("pricePerUnit")),
            available=raw.get("available", True) is not False,
            delivery_area=list(raw.get("deliveryArea") or []),
        )
