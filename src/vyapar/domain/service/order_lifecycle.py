"""Domain service: Order Lifecycle Manager.

Owns the two operations that move money-bearing state around:

- ``confirm_cart`` converts a retailer's cart lines into ``requested``
  orders and deletes the lines, all in one atomic unit;
- ``transition`` advances an order along ``ALLOWED_TRANSITIONS`` and
  records exactly one notification for the retailer in the same unit.

Transitions use compare-and-swap on the status the caller observed: if
another actor moved the order first, the loser gets InvalidTransition
instead of silently overwriting.  Store failures are never retried here.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import datetime, timezone

from vyapar.domain.exceptions import (
    EmptyCart,
    EntityNotFoundError,
    InvalidTransition,
    UnauthorizedActor,
)
from vyapar.domain.model.actor import Actor, Role
from vyapar.domain.model.cart import CartLine
from vyapar.domain.model.notification import Notification
from vyapar.domain.model.order import Order, OrderStatus
from vyapar.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)

NotificationListener = Callable[[Notification], None]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderLifecycleManager:

    def __init__(
        self,
        uow: UnitOfWork,
        clock: Callable[[], datetime] = _utcnow,
        listeners: Sequence[NotificationListener] = (),
    ) -> None:
        self._uow = uow
        self._clock = clock
        self._listeners: list[NotificationListener] = list(listeners)

    def subscribe(self, listener: NotificationListener) -> None:
        """Register a callback invoked with each committed notification."""
        self._listeners.append(listener)

    # --- Cart confirmation ----------------------------------------------------

    def confirm_cart(self, retailer_id: str, cart_lines: Sequence[CartLine]) -> list[Order]:
        """Convert every line into a ``requested`` order, all or nothing.

        Prices are copied from the lines verbatim.  A line that has
        already left the cart (e.g. a retried confirmation that did
        commit) aborts the whole unit, so a retry never double-converts.
        """
        if not cart_lines:
            raise EmptyCart("Your cart is empty. Add products before confirming.")

        for line in cart_lines:
            if not line.is_owned_by(retailer_id):
                raise UnauthorizedActor("You can only confirm your own cart")

        now = self._clock()
        orders: list[Order] = []

        with self._uow.atomic():
            for line in cart_lines:
                if line.id is None or self._uow.cart.get_by_id(line.id) is None:
                    raise EntityNotFoundError(
                        f"{line.product_name} is no longer in your cart"
                    )
                order = Order.from_cart_line(line, now)
                self._uow.orders.save(order)
                self._uow.cart.delete(line.id)
                orders.append(order)

        logger.info(
            "retailer %s confirmed %d cart line(s) into orders %s",
            retailer_id,
            len(orders),
            [o.id for o in orders],
        )
        return orders

    # --- Status transitions ---------------------------------------------------

    def transition(self, order: Order, target: OrderStatus, actor: Actor) -> Order:
        """Advance *order* to *target* and notify the retailer.

        *order* is the state the actor acted on.  Returns the committed
        order as stored.
        """
        self._authorize(order, actor)

        observed = order.status
        order.check_transition(target)

        now = self._clock()
        with self._uow.atomic():
            current = self._uow.orders.get_by_id(order.id) if order.id else None
            if current is None:
                raise EntityNotFoundError(f"Order {order.id} not found")
            if current.status != observed:
                raise InvalidTransition(
                    f"Order {order.id} is already {current.status.value}; "
                    f"refresh and try again"
                )
            current.transition_to(target, now)
            self._uow.orders.save(current)

            notification = Notification.for_order_status(current, now)
            self._uow.notifications.save(notification)

        logger.info(
            "order %s moved %s -> %s by %s",
            current.id,
            observed.value,
            target.value,
            actor,
        )
        self._publish(notification)
        return current

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _authorize(order: Order, actor: Actor) -> None:
        if actor.is_admin:
            return
        if actor.role is Role.WHOLESALER and actor.user_id == order.wholesaler_id:
            return
        raise UnauthorizedActor(
            "Only the order's wholesaler or an admin can update its status"
        )

    def _publish(self, notification: Notification) -> None:
        for listener in self._listeners:
            try:
                listener(notification)
            except Exception:
                # the transition is committed by now
                logger.exception("notification listener failed for %s", notification.id)
