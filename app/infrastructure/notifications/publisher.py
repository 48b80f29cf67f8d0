"""Utility helpers to push notifications to websocket subscribers."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from anyio import from_thread

from app.domain.entities import Notification

from .manager import NotificationConnectionManager, notification_manager

logger = logging.getLogger(__name__)


class NotificationPublisher:
    """Serialize notifications and schedule their delivery."""

    def __init__(self, manager: NotificationConnectionManager) -> None:
        self._manager = manager

    def dispatch(self, notification: Notification) -> bool:
        """Schedule ``notification`` to be delivered to its user.

        Returns ``False`` when nobody is listening or when called outside of an
        event loop and its worker threads (CLI runs, plain unit tests).
        """

        if not self._manager.has_connections(notification.user_id):
            return False

        message = {"type": "notification", "data": self._serialize(notification)}
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            try:
                from_thread.run(
                    self._manager.send_to_user, notification.user_id, message
                )
            except RuntimeError:
                logger.debug(
                    "No event loop available; skipping realtime push of notification %s",
                    notification.id,
                )
                return False
        else:
            loop.create_task(
                self._manager.send_to_user(notification.user_id, message)
            )
        return True

    @staticmethod
    def _serialize(notification: Notification) -> dict[str, Any]:
        return {
            "id": notification.id,
            "asset_id": notification.asset_id,
            "user_id": notification.user_id,
            "type": notification.type,
            "title": notification.title,
            "message": notification.message,
            "is_read": notification.is_read,
            "scheduled_date": notification.scheduled_date.isoformat()
            if notification.scheduled_date
            else None,
            "sent_date": notification.sent_date.isoformat()
            if notification.sent_date
            else None,
            "created_at": notification.created_at.isoformat()
            if notification.created_at
            else None,
        }


notification_publisher = NotificationPublisher(notification_manager)


def dispatch_notification(notification: Notification) -> bool:
    """Public helper that delegates to the shared publisher instance."""

    return notification_publisher.dispatch(notification)


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the websocket payload representation for ``notification``."""

    return NotificationPublisher._serialize(notification)


__all__ = [
    "NotificationPublisher",
    "notification_publisher",
    "dispatch_notification",
    "serialize_notification",
]
