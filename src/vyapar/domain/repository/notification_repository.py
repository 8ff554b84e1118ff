"""Abstract repository for Notification records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from vyapar.domain.model.notification import Notification


class NotificationRepository(ABC):

    @abstractmethod
    def get_by_id(self, notification_id: str) -> Notification | None:
        """Return a notification by its id, or None if not found."""

    @abstractmethod
    def list_for_user(self, user_id: str, unread_only: bool = False) -> list[Notification]:
        """Return a user's notifications, newest first."""

    @abstractmethod
    def save(self, notification: Notification) -> None:
        """Persist a new or updated notification, assigning an id to new ones."""
