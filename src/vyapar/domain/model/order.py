"""Order aggregate: one purchase of one offer.

One Order is created per confirmed cart line.  After creation only its
``status`` (and ``updated_at``) ever change, and only along the edges
of ``ALLOWED_TRANSITIONS``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from vyapar.domain.exceptions import InvalidTransition
from vyapar.domain.model.cart import CartLine
from vyapar.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    REQUESTED = "requested"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.REQUESTED: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


@dataclass
class Order:
    """Aggregate root for purchase orders.

    Use ``Order.from_cart_line()`` for new orders.  The ``__init__`` is
    intentionally simple so the repository can reconstitute persisted
    orders without re-validating.
    """

    id: str | None
    product_id: str
    product_name: str
    wholesaler_id: str
    wholesaler_name: str
    retailer_id: str
    qty: Quantity
    unit: str
    price_per_unit: Money  # snapshot copied from the cart line, never re-resolved
    status: OrderStatus = OrderStatus.REQUESTED
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def from_cart_line(line: CartLine, now: datetime | None = None) -> Order:
        now = now or datetime.now(timezone.utc)
        return Order(
            id=None,
            product_id=line.product_id,
            product_name=line.product_name,
            wholesaler_id=line.wholesaler_id,
            wholesaler_name=line.wholesaler_name,
            retailer_id=line.retailer_id,
            qty=line.quantity,
            unit=line.unit,
            price_per_unit=line.price_per_unit,
            created_at=now,
            updated_at=now,
        )

    # --- State transitions ----------------------------------------------------

    @property
    def is_terminal(self) -> bool:
        return not ALLOWED_TRANSITIONS[self.status]

    def can_transition_to(self, target: OrderStatus) -> bool:
        return target in ALLOWED_TRANSITIONS[self.status]

    def check_transition(self, target: OrderStatus) -> None:
        """Raise InvalidTransition unless *target* is a legal next status.

        A no-op (``target`` equal to the current status) is an error too,
        so a repeated click can never emit a second notification.
        """
        if target == self.status:
            raise InvalidTransition(f"Order is already {self.status.value}")
        if not self.can_transition_to(target):
            raise InvalidTransition(
                f"Cannot move order from {self.status.value} to {target.value}"
            )

    def transition_to(self, target: OrderStatus, now: datetime | None = None) -> None:
        self.check_transition(target)
        self.status = target
        self.updated_at = now or datetime.now(timezone.utc)

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        return self.price_per_unit * self.qty.value
