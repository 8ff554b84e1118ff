"""WholesalerOffer aggregate: a wholesaler's priced listing of a product.

An offer carries an ordered list of quantity tiers plus a flat
``base_price`` used when no tier applies.  Tiers are validated one by
one, but the list as a whole may be gapped or overlapping; the price
resolver copes with both.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from vyapar.domain.exceptions import ValidationError
from vyapar.domain.model.value_objects import Money


@dataclass(frozen=True)
class PriceTier:
    """A bulk-pricing band.

    ``max_qty`` of ``None`` means the band is open-ended.  It is only
    used for display and tie-breaking, never as a ceiling.
    """

    min_qty: int
    max_qty: int | None
    price_per_unit: Money

    def __post_init__(self) -> None:
        if self.min_qty < 1:
            raise ValidationError("Tier minimum quantity must be at least 1")
        if self.max_qty is not None and self.max_qty < self.min_qty:
            raise ValidationError(
                f"Tier maximum quantity {self.max_qty} is below minimum {self.min_qty}"
            )
        if self.price_per_unit.is_zero:
            raise ValidationError("Tier price must be greater than zero")

    def __str__(self) -> str:
        upper = f"-{self.max_qty}" if self.max_qty is not None else "+"
        return f"{self.min_qty}{upper}: {self.price_per_unit}"


@dataclass
class WholesalerOffer:
    """Aggregate root for a wholesaler listing.

    Only ``available`` changes after creation; price edits are out of
    this model's hands (a new snapshot is what carts lock in anyway).
    """

    id: str | None
    wholesaler_id: str
    wholesaler_name: str
    product_id: str
    unit: str
    price_tiers: list[PriceTier] = field(default_factory=list)
    base_price: Money = field(default_factory=Money.zero)
    available: bool = True
    delivery_area: list[str] = field(default_factory=list)

    @staticmethod
    def create(
        wholesaler_id: str,
        wholesaler_name: str,
        product_id: str,
        unit: str,
        price_tiers: list[PriceTier],
        base_price: Money | None = None,
        delivery_area: list[str] | None = None,
    ) -> WholesalerOffer:
        """Create a new offer, enforcing listing rules."""
        if not wholesaler_id or not wholesaler_id.strip():
            raise ValidationError("Wholesaler id is required")
        if not price_tiers and (base_price is None or base_price.is_zero):
            raise ValidationError("An offer needs at least one price tier or a base price")

        return WholesalerOffer(
            id=None,
            wholesaler_id=wholesaler_id.strip(),
            wholesaler_name=(wholesaler_name or "").strip() or "N/A",
            product_id=product_id,
            unit=unit,
            price_tiers=list(price_tiers),
            base_price=base_price or Money.zero(),
            delivery_area=sorted({a.strip() for a in delivery_area or [] if a.strip()}),
        )

    def set_availability(self, available: bool) -> None:
        self.available = available

    def delivers_to(self, area: str) -> bool:
        """An empty delivery area means the wholesaler delivers anywhere."""
        if not self.delivery_area:
            return True
        return area.strip().lower() in {a.lower() for a in self.delivery_area}
