"""Use case for updating the read state of a notification."""

from dataclasses import replace

from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.infrastructure.repositories import NotificationRepository


def update_notification(
    session: Session, *, notification_id: str, is_read: bool
) -> Notification:
    """Mark the notification as read or unread."""

    repository = NotificationRepository(session)
    current = repository.get(notification_id)
    if current is None:
        raise ValueError("Notification not found")
    if current.is_read == is_read:
        return current
    return repository.update(replace(current, is_read=is_read))


__all__ = ["update_notification"]
