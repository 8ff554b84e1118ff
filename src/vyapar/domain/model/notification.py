"""Notification record emitted as the side effect of an order transition."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from vyapar.domain.model.order import Order

ORDER_STATUS_UPDATE = "order_status_update"


class NotificationStatus(Enum):
    UNREAD = "unread"
    READ = "read"


@dataclass
class Notification:
    id: str | None
    user_id: str
    type: str
    message: str
    order_id: str
    status: NotificationStatus = NotificationStatus.UNREAD
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def for_order_status(order: Order, now: datetime | None = None) -> Notification:
        """Build the retailer-facing notice for *order*'s current status."""
        return Notification(
            id=None,
            user_id=order.retailer_id,
            type=ORDER_STATUS_UPDATE,
            message=f"Your order for {order.product_name} is now {order.status.value}.",
            order_id=order.id or "",
            created_at=now or datetime.now(timezone.utc),
        )

    def mark_read(self) -> None:
        self.status = NotificationStatus.READ
