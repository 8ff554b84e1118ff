"""Application service: remove a line from the retailer's cart."""

from __future__ import annotations

from vyapar.domain.exceptions import EntityNotFoundError
from vyapar.domain.repository.unit_of_work import UnitOfWork


class RemoveCartLineHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, retailer_id: str, line_id: str) -> None:
        with self._uow.atomic():
            line = self._uow.cart.get_by_id(line_id)
            # Other retailers' lines are reported as missing, not forbidden.
            if line is None or not line.is_owned_by(retailer_id):
                raise EntityNotFoundError(f"Cart line '{line_id}' not found")
            self._uow.cart.delete(line_id)
