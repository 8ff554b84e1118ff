"""Application service: Create Offer use case.

A wholesaler lists a catalog product with its price tiers.  The
duplicate-listing guard (one offer per wholesaler per product) runs in
the same atomic unit as the insert, so two creations cannot both pass
the check.
"""

from __future__ import annotations

import logging

from vyapar.application.dto import TierSpec
from vyapar.domain.exceptions import DuplicateOffer, ProductNotFound
from vyapar.domain.model.offer import PriceTier, WholesalerOffer
from vyapar.domain.model.value_objects import Money
from vyapar.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class CreateOfferHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        wholesaler_id: str,
        wholesaler_name: str,
        product_id: str,
        tiers: list[TierSpec],
        base_price: str | None = None,
        delivery_area: list[str] | None = None,
    ) -> WholesalerOffer:
        price_tiers = [
            PriceTier(
                min_qty=spec.min_qty,
                max_qty=spec.max_qty,
                price_per_unit=Money.of(spec.price),
            )
            for spec in tiers
        ]

        with self._uow.atomic():
            product = self._uow.products.get_by_id(product_id)
            if product is None:
                raise ProductNotFound(f"Product '{product_id}' not found")

            if self._uow.offers.find(wholesaler_id, product_id) is not None:
                raise DuplicateOffer(f"You already list {product.name}")

            offer = WholesalerOffer.create(
                wholesaler_id=wholesaler_id,
                wholesaler_name=wholesaler_name,
                product_id=product.id,
                unit=product.unit,
                price_tiers=price_tiers,
                base_price=Money.of(base_price) if base_price is not None else None,
                delivery_area=delivery_area,
            )
            self._uow.offers.save(offer)

        logger.info(
            "wholesaler %s listed %s as offer %s", wholesaler_id, product.id, offer.id
        )
        return offer
