"""Use case for retrieving a single notification."""

from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.infrastructure.repositories import NotificationRepository


def get_notification(session: Session, notification_id: str) -> Notification:
    """Return the notification identified by ``notification_id`` or raise an error."""

    notification = NotificationRepository(session).get(notification_id)
    if notification is None:
        raise ValueError("Notification not found")
    return notification


__all__ = ["get_notification"]
