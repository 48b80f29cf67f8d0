"""Use case for listing notifications."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.infrastructure.repositories import NotificationRepository


def list_notifications(
    session: Session,
    *,
    user_id: str | None = None,
    is_read: bool | None = None,
) -> Sequence[Notification]:
    """Return notifications newest first, optionally filtered by user and read state."""

    return NotificationRepository(session).list(user_id=user_id, is_read=is_read)


__all__ = ["list_notifications"]
