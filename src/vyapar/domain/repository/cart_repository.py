"""Abstract repository for CartLine aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from vyapar.domain.model.cart import CartLine


class CartRepository(ABC):

    @abstractmethod
    def get_by_id(self, line_id: str) -> CartLine | None:
        """Return a cart line by its id, or None if not found."""

    @abstractmethod
    def list_for_retailer(self, retailer_id: str) -> list[CartLine]:
        """Return a retailer's pending cart lines, oldest first."""

    @abstractmethod
    def save(self, line: CartLine) -> None:
        """Persist a new or updated cart line, assigning an id to new ones."""

    @abstractmethod
    def delete(self, line_id: str) -> None:
        """Remove a cart line. Deleting a missing line is a no-op."""
