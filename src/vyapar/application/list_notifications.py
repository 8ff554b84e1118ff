"""Application service: List Notifications use case (query)."""

from __future__ import annotations

from vyapar.application.dto import NotificationDTO, notification_to_dto
from vyapar.domain.repository.unit_of_work import UnitOfWork


class ListNotificationsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: str, unread_only: bool = False) -> list[NotificationDTO]:
        notifications = self._uow.notifications.list_for_user(user_id, unread_only)
        return [notification_to_dto(n) for n in notifications]
