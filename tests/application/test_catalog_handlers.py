"""Integration tests for the catalog use cases: products and offers.

Uses in-memory fake repositories, no file I/O.
"""

import pytest

from tests.fakes import FakeUnitOfWork
from vyapar.application.add_product import AddProductHandler
from vyapar.application.create_offer import CreateOfferHandler
from vyapar.application.dto import TierSpec
from vyapar.application.set_offer_availability import SetOfferAvailabilityHandler
from vyapar.domain.exceptions import (
    DuplicateOffer,
    OfferNotFound,
    ProductNotFound,
    UnauthorizedActor,
    ValidationError,
)
from vyapar.domain.model.actor import Actor, Role
from vyapar.domain.model.product import Product
from vyapar.domain.model.value_objects import Money

RICE = Product(id="basmati-rice", name="Basmati Rice", category="GRAINS", unit="1KG")


class TestAddProduct:

    def test_adds_a_new_product(self):
        uow = FakeUnitOfWork()
        product = AddProductHandler(uow).handle("Basmati Rice", "grains", "1kg")
        assert product.id == "basmati-rice"
        assert uow.products.get_by_id("basmati-rice").category == "GRAINS"

    def test_same_name_is_idempotent(self):
        uow = FakeUnitOfWork()
        handler = AddProductHandler(uow)
        first = handler.handle("Basmati Rice", "GRAINS", "1KG", "long grain")
        second = handler.handle("basmati   RICE", "OTHER", "5KG")
        assert second.id == first.id
        assert second.category == "GRAINS"
        assert len(uow.products.list_all()) == 1

    def test_invalid_name_is_not_saved(self):
        uow = FakeUnitOfWork()
        with pytest.raises(ValidationError):
            AddProductHandler(uow).handle("Rice & Dal", "GRAINS", "1KG")
        assert uow.products.list_all() == []


class TestCreateOffer:

    def test_creates_offer_with_tiers(self):
        uow = FakeUnitOfWork(products=[RICE])
        offer = CreateOfferHandler(uow).handle(
            wholesaler_id="W1",
            wholesaler_name="Sharma Traders",
            product_id="basmati-rice",
            tiers=[TierSpec(1, 9, "100"), TierSpec(10, None, "90")],
            delivery_area=["Pune"],
        )
        saved = uow.offers.get_by_id(offer.id)
        assert saved.unit == "1KG"
        assert [t.price_per_unit for t in saved.price_tiers] == [
            Money.of("100"), Money.of("90"),
        ]
        assert saved.delivery_area == ["Pune"]

    def test_base_price_only(self):
        uow = FakeUnitOfWork(products=[RICE])
        offer = CreateOfferHandler(uow).handle("W1", "Sharma", "basmati-rice", [], base_price="75")
        assert offer.base_price == Money.of("75")

    def test_unknown_product(self):
        uow = FakeUnitOfWork()
        with pytest.raises(ProductNotFound):
            CreateOfferHandler(uow).handle("W1", "Sharma", "ghost", [TierSpec(1, None, "10")])

    def test_duplicate_listing_rejected(self):
        uow = FakeUnitOfWork(products=[RICE])
        handler = CreateOfferHandler(uow)
        handler.handle("W1", "Sharma", "basmati-rice", [TierSpec(1, None, "100")])

        with pytest.raises(DuplicateOffer, match="already list Basmati Rice"):
            handler.handle("W1", "Sharma", "basmati-rice", [TierSpec(1, None, "95")])
        assert len(uow.offers.list_for_product("basmati-rice")) == 1

    def test_other_wholesaler_may_list_same_product(self):
        uow = FakeUnitOfWork(products=[RICE])
        handler = CreateOfferHandler(uow)
        handler.handle("W1", "Sharma", "basmati-rice", [TierSpec(1, None, "100")])
        handler.handle("W2", "Gupta", "basmati-rice", [TierSpec(1, None, "98")])
        assert len(uow.offers.list_for_product("basmati-rice")) == 2

    def test_bad_tier_price_rejected(self):
        uow = FakeUnitOfWork(products=[RICE])
        with pytest.raises(ValidationError):
            CreateOfferHandler(uow).handle("W1", "Sharma", "basmati-rice", [TierSpec(1, None, "abc")])


class TestSetOfferAvailability:

    def _uow_with_offer(self):
        uow = FakeUnitOfWork(products=[RICE])
        offer = CreateOfferHandler(uow).handle(
            "W1", "Sharma", "basmati-rice", [TierSpec(1, None, "100")]
        )
        return uow, offer.id

    def test_owner_can_toggle(self):
        uow, offer_id = self._uow_with_offer()
        SetOfferAvailabilityHandler(uow).handle(offer_id, False, Actor("W1", Role.WHOLESALER))
        assert uow.offers.get_by_id(offer_id).available is False

    def test_admin_can_toggle(self):
        uow, offer_id = self._uow_with_offer()
        SetOfferAvailabilityHandler(uow).handle(offer_id, False, Actor("ops", Role.ADMIN))
        assert uow.offers.get_by_id(offer_id).available is False

    def test_other_wholesaler_cannot(self):
        uow, offer_id = self._uow_with_offer()
        with pytest.raises(UnauthorizedActor):
            SetOfferAvailabilityHandler(uow).handle(offer_id, False, Actor("W2", Role.WHOLESALER))
        assert uow.offers.get_by_id(offer_id).available is True

    def test_retailer_with_the_owners_id_cannot(self):
        uow, offer_id = self._uow_with_offer()
        with pytest.raises(UnauthorizedActor):
            SetOfferAvailabilityHandler(uow).handle(offer_id, False, Actor("W1", Role.RETAILER))
        assert uow.offers.get_by_id(offer_id).available is True

    def test_unknown_offer(self):
        uow = FakeUnitOfWork()
        with pytest.raises(OfferNotFound):
            SetOfferAvailabilityHandler(uow).handle("nope", True, Actor("ops", Role.ADMIN))
