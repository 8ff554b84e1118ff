"""Application service: Add to Cart use case.

The unit price is resolved here, once, and stored on the cart line as a
snapshot.  Nothing downstream (quantity edits, confirmation) resolves it
again.
"""

from __future__ import annotations

import logging

from vyapar.application.dto import CartLineDTO, cart_line_to_dto
from vyapar.domain.exceptions import OfferNotFound, ProductNotFound
from vyapar.domain.model.cart import CartLine
from vyapar.domain.model.value_objects import Quantity
from vyapar.domain.repository.unit_of_work import UnitOfWork
from vyapar.domain.service.price_resolver import resolve_price

logger = logging.getLogger(__name__)


class AddToCartHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, retailer_id: str, offer_id: str, quantity: int) -> CartLineDTO:
        qty = Quantity(quantity)

        offer = self._uow.offers.get_by_id(offer_id)
        if offer is None:
            raise OfferNotFound(f"Offer '{offer_id}' not found")
        product = self._uow.products.get_by_id(offer.product_id)
        if product is None:
            raise ProductNotFound(f"Product '{offer.product_id}' not found")

        price = resolve_price(offer, qty.value)  # <-- price snapshot
        line = CartLine.create(
            retailer_id=retailer_id,
            offer=offer,
            product_name=product.name,
            quantity=qty,
            price_per_unit=price,
        )
        self._uow.cart.save(line)

        logger.info(
            "retailer %s added %d x %s at %s", retailer_id, qty.value, product.id, price
        )
        return cart_line_to_dto(line)
