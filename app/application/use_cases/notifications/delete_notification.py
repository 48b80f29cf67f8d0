"""Use case for deleting notifications."""

from sqlalchemy.orm import Session

from app.infrastructure.repositories import NotificationRepository


def delete_notification(session: Session, notification_id: str) -> None:
    """Delete the specified notification."""

    repository = NotificationRepository(session)
    if repository.get(notification_id) is None:
        raise ValueError("Notification not found")
    repository.delete(notification_id)


__all__ = ["delete_notification"]
