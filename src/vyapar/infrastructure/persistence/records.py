"""Field readers shared by the document repositories.

Records written by older clients do not all follow the canonical schema:
products may carry ``name`` instead of ``productName``, offers imported
in bulk carry ``priceRanges`` whose tiers use ``price`` and no
``maxQty``, and numbers arrive as either JSON numbers or strings.  The
readers here normalise all of that on the way in; repositories always
write the canonical names.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation

from vyapar.domain.exceptions import ValidationError
from vyapar.domain.model.offer import PriceTier
from vyapar.domain.model.order import OrderStatus
from vyapar.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


def read_money(value: object) -> Money:
    """Coerce a stored number or string to Money; junk reads as zero."""
    if value is None or value == "":
        return Money.zero()
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        return Money.zero()
    if not amount.is_finite() or amount < 0:
        return Money.zero()
    return Money(amount)


def write_money(money: Money) -> str:
    return str(money.amount)


def read_timestamp(value: object) -> datetime:
    if isinstance(value, str) and value:
        try:
            stamp = datetime.fromisoformat(value)
        except ValueError:
            pass
        else:
            return stamp if stamp.tzinfo else stamp.replace(tzinfo=timezone.utc)
    return datetime.now(timezone.utc)


def read_product_name(raw: dict) -> str:
    return raw.get("productName") or raw.get("name") or "Unknown Product"


def read_price_tiers(raw: dict, record_id: str) -> list[PriceTier]:
    """Read ``priceTiers`` (or legacy ``priceRanges``), dropping malformed tiers."""
    entries = raw.get("priceTiers")
    if entries is None:
        entries = raw.get("priceRanges")
    if not isinstance(entries, list):
        return []

    tiers: list[PriceTier] = []
    for entry in entries:
        try:
            tiers.append(_read_tier(entry))
        except (AttributeError, KeyError, TypeError, ValueError, ValidationError) as exc:
            logger.warning("dropping malformed price tier %r on %s: %s", entry, record_id, exc)
    return tiers


def _read_tier(entry: dict) -> PriceTier:
    price = entry.get("pricePerUnit", entry.get("price"))
    max_qty = entry.get("maxQty")
    return PriceTier(
        min_qty=int(entry["minQty"]),
        max_qty=int(max_qty) if max_qty not in (None, "") else None,
        price_per_unit=read_money(price),
    )


def write_price_tiers(tiers: list[PriceTier]) -> list[dict]:
    return [
        {
            "minQty": tier.min_qty,
            "maxQty": tier.max_qty,
            "pricePerUnit": write_money(tier.price_per_unit),
        }
        for tier in tiers
    ]


_LEGACY_ORDER_STATUSES = {"pending": OrderStatus.REQUESTED.value}


def read_order_status(value: object) -> OrderStatus:
    raw = str(value or OrderStatus.REQUESTED.value).strip().lower()
    return OrderStatus(_LEGACY_ORDER_STATUSES.get(raw, raw))
