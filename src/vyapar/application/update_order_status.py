"""Application service: Update Order Status use case.

Used by wholesalers and the admin dashboard.  The caller's view of the
order is loaded here and passed to the lifecycle manager, which
compares it against the stored status inside its atomic unit.
"""

from __future__ import annotations

from vyapar.application.dto import OrderDTO, order_to_dto
from vyapar.domain.exceptions import EntityNotFoundError, ValidationError
from vyapar.domain.model.actor import Actor
from vyapar.domain.model.order import OrderStatus
from vyapar.domain.repository.unit_of_work import UnitOfWork
from vyapar.domain.service.order_lifecycle import OrderLifecycleManager


def parse_status(raw: str) -> OrderStatus:
    try:
        return OrderStatus(raw.strip().lower())
    except ValueError:
        choices = ", ".join(s.value for s in OrderStatus)
        raise ValidationError(f"Unknown order status '{raw}' (expected one of: {choices})")


class UpdateOrderStatusHandler:

    def __init__(
        self,
        uow: UnitOfWork,
        lifecycle: OrderLifecycleManager | None = None,
    ) -> None:
        self._uow = uow
        self._lifecycle = lifecycle or OrderLifecycleManager(uow)

    def handle(self, order_id: str, new_status: str, actor: Actor) -> OrderDTO:
        target = parse_status(new_status)

        order = self._uow.orders.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        updated = self._lifecycle.transition(order, target, actor)
        return order_to_dto(updated)
