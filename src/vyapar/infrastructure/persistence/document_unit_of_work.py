"""Unit of work over a single JsonDocumentStore."""

from __future__ import annotations

from contextlib import AbstractContextManager

from vyapar.domain.repository.unit_of_work import UnitOfWork
from vyapar.infrastructure.persistence.document_cart_repository import DocumentCartRepository
from vyapar.infrastructure.persistence.document_notification_repository import (
    DocumentNotificationRepository,
)
from vyapar.infrastructure.persistence.document_offer_repository import DocumentOfferRepository
from vyapar.infrastructure.persistence.document_order_repository import DocumentOrderRepository
from vyapar.infrastructure.persistence.document_product_repository import (
    DocumentProductRepository,
)
from vyapar.infrastructure.persistence.document_store import JsonDocumentStore


class DocumentUnitOfWork(UnitOfWork):

    def __init__(self, store: JsonDocumentStore) -> None:
        self.store = store
        self.products = DocumentProductRepository(store)
        self.offers = DocumentOfferRepository(store)
        self.cart = DocumentCartRepository(store)
        self.orders = DocumentOrderRepository(store)
        self.notifications = DocumentNotificationRepository(store)

    def atomic(self) -> AbstractContextManager[None]:
        return self.store.transaction()
