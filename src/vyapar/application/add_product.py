"""Application service: Add Product use case.

Adding is an idempotent upsert keyed by the normalised name: a second
"Basmati Rice" (or "basmati  rice") returns the existing entry.
"""

from __future__ import annotations

import logging

from vyapar.domain.model.product import Product
from vyapar.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, name: str, category: str, unit: str, description: str = "") -> Product:
        """Add a product to the catalog, or return the one already there."""
        candidate = Product.create(name, category, unit, description)

        with self._uow.atomic():
            existing = self._uow.products.get_by_id(candidate.id)
            if existing is not None:
                return existing
            self._uow.products.save(candidate)

        logger.info("added product %s (%s)", candidate.id, candidate.name)
        return candidate
