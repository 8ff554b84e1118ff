"""Abstract unit of work spanning every repository.

Core operations that must be all-or-nothing (cart confirmation, an order
transition together with its notification, the duplicate-offer guard)
run inside ``atomic()``.  Concrete implementations guarantee that:

- every repository write made inside the block is applied together, or
  none is applied if the block raises;
- blocks are serialised, so a read-check-write inside one block cannot
  interleave with another block's writes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from vyapar.domain.repository.cart_repository import CartRepository
from vyapar.domain.repository.notification_repository import NotificationRepository
from vyapar.domain.repository.offer_repository import OfferRepository
from vyapar.domain.repository.order_repository import OrderRepository
from vyapar.domain.repository.product_repository import ProductRepository


class UnitOfWork(ABC):

    products: ProductRepository
    offers: OfferRepository
    cart: CartRepository
    orders: OrderRepository
    notifications: NotificationRepository

    @abstractmethod
    def atomic(self) -> AbstractContextManager[None]:
        """Open an all-or-nothing block; nested blocks join the outer one."""
