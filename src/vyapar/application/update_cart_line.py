"""Application service: change the quantity of a cart line."""

from __future__ import annotations

from vyapar.application.dto import CartLineDTO, cart_line_to_dto
from vyapar.domain.exceptions import EntityNotFoundError
from vyapar.domain.model.value_objects import Quantity
from vyapar.domain.repository.unit_of_work import UnitOfWork


class UpdateCartLineHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, retailer_id: str, line_id: str, quantity: int) -> CartLineDTO:
        """Update the quantity.  The locked-in unit price is NOT re-resolved."""
        qty = Quantity(quantity)

        with self._uow.atomic():
            line = self._uow.cart.get_by_id(line_id)
            if line is None or not line.is_owned_by(retailer_id):
                raise EntityNotFoundError(f"Cart line '{line_id}' not found")

            line.change_quantity(qty)
            self._uow.cart.save(line)

        return cart_line_to_dto(line)
