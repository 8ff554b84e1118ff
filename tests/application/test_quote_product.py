"""Integration tests for the QuoteProduct query."""

import pytest

from tests.fakes import FakeUnitOfWork
from vyapar.application.quote_product import QuoteProductHandler
from vyapar.domain.exceptions import ProductNotFound, ValidationError
from vyapar.domain.model.offer import PriceTier, WholesalerOffer
from vyapar.domain.model.product import Product
from vyapar.domain.model.value_objects import Money

RICE = Product(id="basmati-rice", name="Basmati Rice", category="GRAINS", unit="1KG")


def _offer(wholesaler, tiers, available=True, area=None) -> WholesalerOffer:
    return WholesalerOffer(
        id=None,
        wholesaler_id=wholesaler,
        wholesaler_name=f"{wholesaler} Traders",
        product_id="basmati-rice",
        unit="1KG",
        price_tiers=[PriceTier(lo, hi, Money.of(p)) for lo, hi, p in tiers],
        available=available,
        delivery_area=area or [],
    )


@pytest.fixture
def uow():
    return FakeUnitOfWork(
        products=[RICE],
        offers=[
            _offer("Sharma", [(1, 9, "100"), (10, None, "85")]),
            _offer("Gupta", [(1, None, "95")]),
            _offer("Mehta", [(1, None, "50")], available=False),
            _offer("Bulk", [(100, None, "70")]),
        ],
    )


class TestQuoteProduct:

    def test_small_quantity_ranking(self, uow):
        quote = QuoteProductHandler(uow).handle("basmati-rice", 5)
        names = [o.wholesaler_id for o in quote.offers]
        assert names == ["Gupta", "Sharma", "Bulk"]
        assert quote.offers[0].is_best
        assert quote.offers[0].unit_price == "₹95.00"
        assert quote.offers[0].line_total == "₹475.00"

    def test_bulk_quantity_changes_the_winner(self, uow):
        quote = QuoteProductHandler(uow).handle("basmati-rice", 20)
        best = [o for o in quote.offers if o.is_best]
        assert [o.wholesaler_id for o in best] == ["Sharma"]

    def test_unpriced_offer_is_listed_but_not_best(self, uow):
        quote = QuoteProductHandler(uow).handle("basmati-rice", 5)
        bulk = quote.offers[-1]
        assert bulk.unit_price == "N/A"
        assert bulk.line_total == "N/A"
        assert not bulk.is_best

    def test_unavailable_offers_are_hidden(self, uow):
        quote = QuoteProductHandler(uow).handle("basmati-rice", 5)
        assert "Mehta" not in {o.wholesaler_id for o in quote.offers}

    def test_tiers_are_shown(self, uow):
        quote = QuoteProductHandler(uow).handle("basmati-rice", 5)
        sharma = next(o for o in quote.offers if o.wholesaler_id == "Sharma")
        assert sharma.tiers == ["1-9: ₹100.00", "10+: ₹85.00"]

    def test_area_filter(self):
        uow = FakeUnitOfWork(
            products=[RICE],
            offers=[
                _offer("Pune", [(1, None, "10")], area=["Pune"]),
                _offer("Anywhere", [(1, None, "20")]),
            ],
        )
        quote = QuoteProductHandler(uow).handle("basmati-rice", 1, area="Nagpur")
        assert [o.wholesaler_id for o in quote.offers] == ["Anywhere"]

    def test_unknown_product(self, uow):
        with pytest.raises(ProductNotFound):
            QuoteProductHandler(uow).handle("ghost", 1)

    def test_zero_quantity(self, uow):
        with pytest.raises(ValidationError):
            QuoteProductHandler(uow).handle("basmati-rice", 0)

    def test_only_unpriced_offers_means_no_best(self):
        uow = FakeUnitOfWork(products=[RICE], offers=[_offer("Bulk", [(100, None, "70")])])
        quote = QuoteProductHandler(uow).handle("basmati-rice", 5)
        assert [o.unit_price for o in quote.offers] == ["N/A"]
        assert not any(o.is_best for o in quote.offers)
