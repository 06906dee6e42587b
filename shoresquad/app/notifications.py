"""Transient, dismissible user notifications."""

import logging
from itertools import count

from shoresquad.models.common import utc_now_iso
from shoresquad.models.notification import Notification, NotificationLevel

logger = logging.getLogger(__name__)


class NotificationCenter:
    def __init__(self, max_active: int = 5):
        self.max_active = max_active
        self._active: list[Notification] = []
        self._ids = count(1)

    def push(
        self,
        message: str,
        level: NotificationLevel = NotificationLevel.INFO,
        retryable: bool = False,
    ) -> Notification:
        notification = Notification(
            id=next(self._ids),
            message=message,
            level=level,
            created_at=utc_now_iso(),
            retryable=retryable,
        )
        self._active.append(notification)
        # Oldest notifications drop off first
        if len(self._active) > self.max_active:
            del self._active[: len(self._active) - self.max_active]
        logger.debug("Notification %d (%s): %s", notification.id, level, message)
        return notification

    def dismiss(self, notification_id: int) -> bool:
        for i, n in enumerate(self._active):
            if n.id == notification_id:
                del self._active[i]
                return True
        return False

    def active(self) -> list[Notification]:
        return list(self._active)
