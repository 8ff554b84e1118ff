"""Application service: Search Products use case (query).

Matches a name prefix, a category or both, returning at most ``limit``
products.  With neither filter the whole catalog is returned.
"""

from __future__ import annotations

from vyapar.domain.model.product import Product
from vyapar.domain.repository.unit_of_work import UnitOfWork

SEARCH_LIMIT = 30


class SearchProductsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        query: str | None = None,
        category: str | None = None,
        limit: int = SEARCH_LIMIT,
    ) -> list[Product]:
        query = (query or "").strip() or None
        category = (category or "").strip() or None
        if query is None and category is None:
            return sorted(self._uow.products.list_all(), key=lambda p: p.search_name)
        return self._uow.products.search(query, category)[:limit]
