"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from vyapar.application.dto import CartDTO, cart_line_to_dto
from vyapar.domain.model.value_objects import Money
from vyapar.domain.repository.unit_of_work import UnitOfWork


class ShowCartHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, retailer_id: str) -> CartDTO:
        lines = self._uow.cart.list_for_retailer(retailer_id)

        total = Money.zero()
        for line in lines:
            total = total + line.total_price

        return CartDTO(
            retailer_id=retailer_id,
            lines=[cart_line_to_dto(line) for line in lines],
            total=str(total),
        )
