"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class NotificationAssetSummary:
    id: str
    name: str


@dataclass
class NotificationUserSummary:
    id: str
    name: str
    email: str


@dataclass
class Notification:
    """In-app message about an asset delivered to a specific user."""

    id: str | None
    asset_id: str
    user_id: str
    type: str
    title: str
    message: str
    is_read: bool = False
    scheduled_date: datetime | None = None
    sent_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    asset: NotificationAssetSummary | None = None
    user: NotificationUserSummary | None = None


__all__ = ["Notification", "NotificationAssetSummary", "NotificationUserSummary"]
