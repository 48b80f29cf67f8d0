"""Schemas for notification rule endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.domain.entities import NotificationEventType, parse_notify_users


class NotificationRuleBase(BaseModel):
    asset_type: str = Field(default="all", min_length=1, max_length=50)
    event_type: NotificationEventType
    days_in_advance: int = Field(..., ge=1)
    notify_users: list[str] = Field(
        default_factory=list,
        description="Recipient user ids; a comma separated string is also accepted",
    )
    email_enabled: bool = False
    app_enabled: bool = True
    active: bool = True

    @field_validator("notify_users", mode="before")
    @classmethod
    def _split_notify_users(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return parse_notify_users(value)
        return value


class NotificationRuleCreate(NotificationRuleBase):
    """Payload required to create a rule."""


class NotificationRuleUpdate(NotificationRuleBase):
    """Full replacement of a rule's editable fields."""

    model_config = ConfigDict(extra="forbid")


class NotificationRuleRead(NotificationRuleBase):
    id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


__all__ = [
    "NotificationRuleCreate",
    "NotificationRuleRead",
    "NotificationRuleUpdate",
]
