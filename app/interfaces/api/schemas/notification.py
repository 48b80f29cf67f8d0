"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NotificationAssetRead(BaseModel):
    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class NotificationUserRead(BaseModel):
    id: str
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class NotificationCreate(BaseModel):
    """Payload used to insert a notification manually."""

    asset_id: str
    user_id: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1, max_length=40)
    title: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1)
    is_read: bool = False
    scheduled_date: datetime | None = None
    sent_date: datetime | None = None


class NotificationUpdate(BaseModel):
    """Payload used to mark a notification as read or unread."""

    is_read: bool

    model_config = ConfigDict(extra="forbid")


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: str
    asset_id: str
    user_id: str
    type: str
    title: str
    message: str
    is_read: bool
    scheduled_date: datetime | None = None
    sent_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    asset: NotificationAssetRead | None = None
    user: NotificationUserRead | None = None

    model_config = ConfigDict(from_attributes=True)


class NotificationGenerateResponse(BaseModel):
    """Outcome of one notification generation pass."""

    success: bool = True
    count: int
    notifications: list[NotificationRead] = Field(default_factory=list)


__all__ = [
    "NotificationAssetRead",
    "NotificationCreate",
    "NotificationGenerateResponse",
    "NotificationRead",
    "NotificationUpdate",
    "NotificationUserRead",
]
