"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from vyapar.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self, status: OrderStatus | None = None) -> list[Order]:
        """Return every order, optionally only those in *status*."""

    @abstractmethod
    def list_for_retailer(self, retailer_id: str) -> list[Order]:
        """Return the orders a retailer placed."""

    @abstractmethod
    def list_for_wholesaler(self, wholesaler_id: str) -> list[Order]:
        """Return the orders addressed to a wholesaler."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order, assigning an id to new ones."""
