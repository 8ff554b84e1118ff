"""Application service: toggle an offer's availability."""

from __future__ import annotations

from vyapar.domain.exceptions import OfferNotFound, UnauthorizedActor
from vyapar.domain.model.actor import Actor, Role
from vyapar.domain.model.offer import WholesalerOffer
from vyapar.domain.repository.unit_of_work import UnitOfWork


class SetOfferAvailabilityHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, offer_id: str, available: bool, actor: Actor) -> WholesalerOffer:
        with self._uow.atomic():
            offer = self._uow.offers.get_by_id(offer_id)
            if offer is None:
                raise OfferNotFound(f"Offer '{offer_id}' not found")
            if not actor.is_admin and not (
                actor.role is Role.WHOLESALER and actor.user_id == offer.wholesaler_id
            ):
                raise UnauthorizedActor("You can only change your own listings")

            offer.set_availability(available)
            self._uow.offers.save(offer)
        return offer
