"""Application service: Quote Product use case (query).

Lists every wholesaler offering a product at the requested quantity,
cheapest first, and flags the best offer.  Offers that resolve to zero
are unpriced for that quantity: they are listed last and never flagged.
"""

from __future__ import annotations

from vyapar.application.dto import OfferQuoteDTO, ProductQuoteDTO
from vyapar.domain.exceptions import ProductNotFound
from vyapar.domain.model.value_objects import Quantity
from vyapar.domain.repository.unit_of_work import UnitOfWork
from vyapar.domain.service.price_resolver import rank_offers


class QuoteProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: str, quantity: int, area: str | None = None) -> ProductQuoteDTO:
        qty = Quantity(quantity)

        product = self._uow.products.get_by_id(product_id)
        if product is None:
            raise ProductNotFound(f"Product '{product_id}' not found")

        ranked = rank_offers(self._uow.offers.list_for_product(product.id), qty.value, area)
        ranked.sort(key=lambda pair: pair[1].is_zero)  # stable: priced keep their order
        best_id = ranked[0][0].id if ranked and not ranked[0][1].is_zero else None

        quotes = [
            OfferQuoteDTO(
                offer_id=offer.id,  # type: ignore[arg-type]
                wholesaler_id=offer.wholesaler_id,
                wholesaler_name=offer.wholesaler_name,
                unit=offer.unit,
                unit_price="N/A" if price.is_zero else str(price),
                line_total="N/A" if price.is_zero else str(price * qty.value),
                tiers=[str(t) for t in offer.price_tiers],
                is_best=offer.id == best_id,
            )
            for offer, price in ranked
        ]

        return ProductQuoteDTO(
            product_id=product.id,
            product_name=product.name,
            quantity=qty.value,
            offers=quotes,
        )
