"""Abstract repository for WholesalerOffer aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from vyapar.domain.model.offer import WholesalerOffer


class OfferRepository(ABC):

    @abstractmethod
    def get_by_id(self, offer_id: str) -> WholesalerOffer | None:
        """Return an offer by its id, or None if not found."""

    @abstractmethod
    def find(self, wholesaler_id: str, product_id: str) -> WholesalerOffer | None:
        """Return the wholesaler's offer for a product, or None."""

    @abstractmethod
    def list_for_product(self, product_id: str) -> list[WholesalerOffer]:
        """Return every offer for a product, in insertion order."""

    @abstractmethod
    def save(self, offer: WholesalerOffer) -> None:
        """Persist a new or updated offer, assigning an id to new ones."""
