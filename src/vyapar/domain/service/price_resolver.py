"""Domain service: tiered price resolution.

Pure functions over offers; no repository access and no locking.  A
resolution is a point-in-time answer and may be stale as soon as a
wholesaler edits their tiers, which is accepted.

Tier policy is "highest qualifying minimum": the tier with the largest
``min_qty`` not above the requested quantity wins, and ``max_qty`` is
never treated as a ceiling.  Overlapping tiers with the same minimum
are broken towards the wider band (open-ended first).
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from vyapar.domain.model.offer import PriceTier, WholesalerOffer
from vyapar.domain.model.value_objects import Money, Quantity

logger = logging.getLogger(__name__)


def _tier_sort_key(tier: PriceTier) -> tuple[int, float]:
    upper = math.inf if tier.max_qty is None else tier.max_qty
    return (tier.min_qty, upper)


def resolve_price(offer: WholesalerOffer, quantity: int) -> Money:
    """Return the unit price *offer* charges for *quantity* units.

    Falls back to the offer's flat ``base_price`` when it has no tiers or
    when *quantity* is below every tier.  A zero result means the offer
    is unpriced for this quantity; callers must not bill it.
    """
    qty = Quantity(quantity).value

    if not offer.price_tiers:
        return offer.base_price

    for tier in sorted(offer.price_tiers, key=_tier_sort_key, reverse=True):
        if qty >= tier.min_qty:
            logger.debug(
                "offer %s qty=%d matched tier %s", offer.id, qty, tier
            )
            return tier.price_per_unit

    return offer.base_price


def rank_offers(
    offers: Iterable[WholesalerOffer],
    quantity: int,
    area: str | None = None,
) -> list[tuple[WholesalerOffer, Money]]:
    """Return available offers paired with their price, cheapest first.

    The sort is stable, so offers with equal prices keep input order.
    A zero price sorts like any other amount; telling "unpriced" apart
    is left to the caller.  When *area* is given, offers that do not
    deliver there are skipped.
    """
    priced = [
        (offer, resolve_price(offer, quantity))
        for offer in offers
        if offer.available and (area is None or offer.delivers_to(area))
    ]
    priced.sort(key=lambda pair: pair[1].amount)
    return priced


def resolve_best_offer(
    offers: Iterable[WholesalerOffer],
    quantity: int,
    area: str | None = None,
) -> WholesalerOffer | None:
    """Return the available offer with the lowest resolved unit price.

    Returns None only when nothing is left after the availability and
    area filters.  The winner may resolve to zero; callers must check
    the price before billing it.
    """
    ranked = rank_offers(offers, quantity, area)
    return ranked[0][0] if ranked else None
