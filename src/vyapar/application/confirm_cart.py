"""Application service: Confirm Cart use case.

Loads the retailer's cart and hands it to the Order Lifecycle Manager,
which converts every line into a ``requested`` order atomically.
"""

from __future__ import annotations

from vyapar.application.dto import OrderDTO, order_to_dto
from vyapar.domain.repository.unit_of_work import UnitOfWork
from vyapar.domain.service.order_lifecycle import OrderLifecycleManager


class ConfirmCartHandler:

    def __init__(
        self,
        uow: UnitOfWork,
        lifecycle: OrderLifecycleManager | None = None,
    ) -> None:
        self._uow = uow
        self._lifecycle = lifecycle or OrderLifecycleManager(uow)

    def handle(self, retailer_id: str) -> list[OrderDTO]:
        lines = self._uow.cart.list_for_retailer(retailer_id)
        orders = self._lifecycle.confirm_cart(retailer_id, lines)
        return [order_to_dto(order) for order in orders]
