"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI / HTTP layers and the application layer
without exposing domain internals to the outside world.  Money is
pre-formatted for display.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from vyapar.domain.model.cart import CartLine
from vyapar.domain.model.notification import Notification
from vyapar.domain.model.order import Order

_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M UTC"


# --- Inputs -------------------------------------------------------------------


@dataclass(frozen=True)
class TierSpec:
    """Input: one price band as a wholesaler typed it."""

    min_qty: int
    max_qty: int | None
    price: str


# --- Outputs ------------------------------------------------------------------


@dataclass(frozen=True)
class OfferQuoteDTO:
    """Output: one wholesaler's price for the requested quantity."""

    offer_id: str
    wholesaler_id: str
    wholesaler_name: str
    unit: str
    unit_price: str  # formatted, e.g. "₹90.00"; "N/A" when unpriced
    line_total: str
    tiers: list[str]
    is_best: bool


@dataclass(frozen=True)
class ProductQuoteDTO:
    product_id: str
    product_name: str
    quantity: int
    offers: list[OfferQuoteDTO]


@dataclass(frozen=True)
class CartLineDTO:
    id: str
    product_name: str
    wholesaler_name: str
    quantity: int
    unit: str
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    retailer_id: str
    lines: list[CartLineDTO]
    total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a single order as displayed to the user."""

    id: str
    product_name: str
    wholesaler_name: str
    retailer_id: str
    quantity: int
    unit: str
    unit_price: str
    total: str
    status: str
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class NotificationDTO:
    id: str
    order_id: str
    message: str
    status: str
    created_at: str


# --- Mapping ------------------------------------------------------------------


def _stamp(value: datetime) -> str:
    return value.strftime(_TIMESTAMP_FORMAT)


def cart_line_to_dto(line: CartLine) -> CartLineDTO:
    return CartLineDTO(
        id=line.id,  # type: ignore[arg-type]
        product_name=line.product_name,
        wholesaler_name=line.wholesaler_name,
        quantity=line.quantity.value,
        unit=line.unit,
        unit_price=str(line.price_per_unit),
        line_total=str(line.total_price),
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        product_name=order.product_name,
        wholesaler_name=order.wholesaler_name,
        retailer_id=order.retailer_id,
        quantity=order.qty.value,
        unit=order.unit,
        unit_price=str(order.price_per_unit),
        total=str(order.total),
        status=order.status.value,
        created_at=_stamp(order.created_at),
        updated_at=_stamp(order.updated_at),
    )


def notification_to_dto(notification: Notification) -> NotificationDTO:
    return NotificationDTO(
        id=notification.id,  # type: ignore[arg-type]
        order_id=notification.order_id,
        message=notification.message,
        status=notification.status.value,
        created_at=_stamp(notification.created_at),
    )
