"""CartLine aggregate: a retailer's pending selection of one offer."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from vyapar.domain.exceptions import ValidationError
from vyapar.domain.model.offer import WholesalerOffer
from vyapar.domain.model.value_objects import Money, Quantity

CART_LINE_PENDING = "pending"


@dataclass
class CartLine:
    """A not-yet-confirmed selection with a locked-in unit price.

    ``price_per_unit`` is resolved once, when the line is created, and is
    never re-resolved: changing the quantity later keeps the original
    snapshot even if a different tier would now apply.
    """

    id: str | None
    retailer_id: str
    wholesaler_id: str
    wholesaler_name: str
    product_id: str
    product_name: str
    quantity: Quantity
    price_per_unit: Money  # locked at add-to-cart time
    unit: str
    status: str = CART_LINE_PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        retailer_id: str,
        offer: WholesalerOffer,
        product_name: str,
        quantity: Quantity,
        price_per_unit: Money,
    ) -> CartLine:
        if not retailer_id or not retailer_id.strip():
            raise ValidationError("Retailer id is required")
        if not offer.available:
            raise ValidationError(
                f"{offer.wholesaler_name} is not currently offering {product_name}"
            )
        if price_per_unit.is_zero:
            raise ValidationError(
                f"No price is available for {product_name} from {offer.wholesaler_name}"
            )

        return CartLine(
            id=None,
            retailer_id=retailer_id.strip(),
            wholesaler_id=offer.wholesaler_id,
            wholesaler_name=offer.wholesaler_name,
            product_id=offer.product_id,
            product_name=product_name,
            quantity=quantity,
            price_per_unit=price_per_unit,
            unit=offer.unit,
        )

    @property
    def total_price(self) -> Money:
        return self.price_per_unit * self.quantity.value

    def change_quantity(self, quantity: Quantity) -> None:
        """Edit the quantity; the price snapshot is kept as is."""
        self.quantity = quantity

    def is_owned_by(self, retailer_id: str) -> bool:
        return self.retailer_id == retailer_id
