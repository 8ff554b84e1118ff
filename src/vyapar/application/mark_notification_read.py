"""Application service: mark a notification as read."""

from __future__ import annotations

from vyapar.domain.exceptions import EntityNotFoundError
from vyapar.domain.repository.unit_of_work import UnitOfWork


class MarkNotificationReadHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: str, notification_id: str) -> None:
        with self._uow.atomic():
            notification = self._uow.notifications.get_by_id(notification_id)
            if notification is None or notification.user_id != user_id:
                raise EntityNotFoundError(f"Notification '{notification_id}' not found")
            notification.mark_read()
            self._uow.notifications.save(notification)
