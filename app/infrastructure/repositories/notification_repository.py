"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from app.domain.entities import (
    Notification,
    NotificationAssetSummary,
    NotificationUserSummary,
)
from app.infrastructure.models import NotificationModel
from app.utils import ensure_app_naive_datetime, now_in_app_naive_datetime


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        user_id: str | None = None,
        is_read: bool | None = None,
        limit: int | None = None,
    ) -> Sequence[Notification]:
        query = self.session.query(NotificationModel)
        if user_id:
            query = query.filter(NotificationModel.user_id == user_id)
        if is_read is not None:
            query = query.filter(NotificationModel.is_read == is_read)
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def list_unread_for_user(
        self, user_id: str, *, limit: int | None = 50
    ) -> Sequence[Notification]:
        return self.list(user_id=user_id, is_read=False, limit=limit)

    def get(self, notification_id: str) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def exists_recent(
        self,
        *,
        asset_id: str,
        user_id: str,
        event_type: str,
        since: datetime,
    ) -> bool:
        """Return ``True`` when a matching notification was created at or after ``since``."""

        query = (
            self.session.query(NotificationModel.id)
            .filter(NotificationModel.asset_id == asset_id)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.type == event_type)
            .filter(NotificationModel.created_at >= ensure_app_naive_datetime(since))
        )
        return self.session.query(query.exists()).scalar()

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel()
        if notification.id:
            model.id = notification.id
        self._apply_entity_to_model(model, notification)
        created_at = (
            ensure_app_naive_datetime(notification.created_at)
            or now_in_app_naive_datetime()
        )
        model.created_at = created_at
        model.updated_at = created_at
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, notification: Notification) -> Notification:
        if notification.id is None:
            raise ValueError("Notification id is required for updates")
        model = self.session.get(NotificationModel, notification.id)
        if model is None:
            msg = f"Notification with id {notification.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, notification)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_as_read(self, notification_ids: Sequence[str], *, user_id: str) -> None:
        ids = [notification_id for notification_id in notification_ids if notification_id]
        if not ids:
            return
        self.session.query(NotificationModel).filter(
            NotificationModel.id.in_(ids),
            NotificationModel.user_id == user_id,
        ).update(
            {
                NotificationModel.is_read: True,
                NotificationModel.updated_at: now_in_app_naive_datetime(),
            },
            synchronize_session=False,
        )
        self.session.commit()

    def delete(self, notification_id: str) -> None:
        model = self.session.get(NotificationModel, notification_id)
        if model is None:
            msg = f"Notification with id {notification_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationModel, notification: Notification
    ) -> None:
        model.asset_id = notification.asset_id
        model.user_id = notification.user_id
        model.type = notification.type
        model.title = notification.title
        model.message = notification.message
        model.is_read = notification.is_read
        model.scheduled_date = ensure_app_naive_datetime(notification.scheduled_date)
        model.sent_date = ensure_app_naive_datetime(notification.sent_date)

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        asset = model.asset
        user = model.user
        return Notification(
            id=model.id,
            asset_id=model.asset_id,
            user_id=model.user_id,
            type=model.type,
            title=model.title,
            message=model.message,
            is_read=model.is_read,
            scheduled_date=ensure_app_naive_datetime(model.scheduled_date),
            sent_date=ensure_app_naive_datetime(model.sent_date),
            created_at=ensure_app_naive_datetime(model.created_at),
            updated_at=ensure_app_naive_datetime(model.updated_at),
            asset=NotificationAssetSummary(id=asset.id, name=asset.name)
            if asset is not None
            else None,
            user=NotificationUserSummary(id=user.id, name=user.name, email=user.email)
            if user is not None
            else None,
        )


__all__ = ["NotificationRepository"]
