"""Document-store implementation of NotificationRepository (``notifications``)."""

from __future__ import annotations

from vyapar.domain.model.notification import Notification, NotificationStatus
from vyapar.domain.repository.notification_repository import NotificationRepository
from vyapar.infrastructure.persistence.document_store import NOTIFICATIONS, JsonDocumentStore
from vyapar.infrastructure.persistence.records import read_timestamp


class DocumentNotificationRepository(NotificationRepository):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    # --- NotificationRepository interface -------------------------------------

    def get_by_id(self, notification_id: str) -> Notification | None:
        raw = self._store.get(NOTIFICATIONS, notification_id)
        return self._to_domain(notification_id, raw) if raw is not None else None

    def list_for_user(self, user_id: str, unread_only: bool = False) -> list[Notification]:
        filters: dict[str, str] = {"userId": user_id}
        if unread_only:
            filters["status"] = NotificationStatus.UNREAD.value
        notifications = [
            self._to_domain(doc_id, raw)
            for doc_id, raw in self._store.query(NOTIFICATIONS, **filters)
        ]
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications

    def save(self, notification: Notification) -> None:
        if notification.id is None:
            notification.id = self._store.new_id()
        self._store.put(NOTIFICATIONS, notification.id, self._to_raw(notification))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(notification: Notification) -> dict:
        return {
            "userId": notification.user_id,
            "type": notification.type,
            "message": notification.message,
            "orderId": notification.order_id,
            "status": notification.status.value,
            "createdAt": notification.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(doc_id: str, raw: dict) -> Notification:
        return Notification(
            id=doc_id,
            user_id=raw["userId"],
            type=raw.get("type", ""),
            message=raw.get("message", ""),
            order_id=raw.get("orderId", ""),
            status=NotificationStatus(raw.get("status", NotificationStatus.UNREAD.value)),
            created_at=read_timestamp(raw.get("createdAt")),
        )
