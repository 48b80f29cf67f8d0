"""Use case for manually inserting a notification."""

from datetime import datetime

from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.infrastructure.repositories import AssetRepository, NotificationRepository
from app.utils import now_in_app_timezone


def create_notification(
    session: Session,
    *,
    asset_id: str,
    user_id: str,
    type: str,
    title: str,
    message: str,
    is_read: bool = False,
    scheduled_date: datetime | None = None,
    sent_date: datetime | None = None,
) -> Notification:
    """Create a notification outside of the generation job."""

    if AssetRepository(session).get(asset_id) is None:
        raise ValueError("Asset not found")

    now = now_in_app_timezone()
    entity = Notification(
        id=None,
        asset_id=asset_id,
        user_id=user_id,
        type=type,
        title=title,
        message=message,
        is_read=is_read,
        scheduled_date=scheduled_date,
        sent_date=sent_date or now,
        created_at=now,
    )
    return NotificationRepository(session).create(entity)


__all__ = ["create_notification"]
