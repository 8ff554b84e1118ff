"""Application service: List Orders use case (query).

Serves the retailer's order history, the wholesaler's inbox and the
admin dashboard's status filter.
"""

from __future__ import annotations

from vyapar.application.dto import OrderDTO, order_to_dto
from vyapar.application.update_order_status import parse_status
from vyapar.domain.repository.unit_of_work import UnitOfWork


class ListOrdersHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        retailer_id: str | None = None,
        wholesaler_id: str | None = None,
        status: str | None = None,
    ) -> list[OrderDTO]:
        if retailer_id is not None:
            orders = self._uow.orders.list_for_retailer(retailer_id)
        elif wholesaler_id is not None:
            orders = self._uow.orders.list_for_wholesaler(wholesaler_id)
        else:
            orders = self._uow.orders.list_all()

        if status is not None:
            wanted = parse_status(status)
            orders = [o for o in orders if o.status == wanted]

        orders.sort(key=lambda o: o.created_at, reverse=True)
        return [order_to_dto(o) for o in orders]
