"""Product aggregate.

Products live independently of offers and orders.  A product is created
once per unique name: its id is derived from the normalised name, so
adding "Basmati Rice" twice resolves to the same catalog entry.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone

from vyapar.domain.exceptions import ValidationError

_NAME_PATTERN = re.compile(r"^[A-Za-z0-9\s]+$")
_SEPARATORS = re.compile(r"[^a-z0-9]+")


def normalize_product_id(name: str) -> str:
    """Derive the stable product id from a display name.

    >>> normalize_product_id("  Basmati   Rice 1kg ")
    'basmati-rice-1kg'
    """
    return _SEPARATORS.sub("-", name.strip().lower()).strip("-")


@dataclass
class Product:
    """A product in the catalog.

    Timestamps are carried for the persisted record; the catalog never
    renames a product once created.
    """

    id: str
    name: str
    category: str
    unit: str
    description: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def search_name(self) -> str:
        return self.name.lower()

    @staticmethod
    def create(name: str, category: str, unit: str, description: str = "") -> Product:
        """Create a new catalog product, enforcing naming rules."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        name = name.strip()
        if not _NAME_PATTERN.match(name):
            raise ValidationError(
                "Product name must contain only alphanumeric characters and spaces"
            )
        if not category or not category.strip():
            raise ValidationError("Product category is required")
        if not unit or not unit.strip():
            raise ValidationError("Product unit is required")

        return Product(
            id=normalize_product_id(name),
            name=name,
            category=category.strip().upper(),
            unit=unit.strip().upper(),
            description=(description or "").strip(),
        )
