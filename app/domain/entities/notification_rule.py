"""Domain entity describing when and whom to notify about asset events."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .asset_type import ALL_ASSET_TYPES


class UnsupportedEventTypeError(ValueError):
    """Raised when a stored rule references an event type that does not exist."""


class NotificationEventType(str, Enum):
    """Closed set of lifecycle events a rule can watch."""

    WARRANTY_EXPIRY = "warranty_expiry"
    RENEWAL_DUE = "renewal_due"
    RETURN_DUE = "return_due"
    DEPRECIATION_COMPLETE = "depreciation_complete"

    @classmethod
    def parse(cls, value: "str | NotificationEventType") -> "NotificationEventType":
        """Return the member for ``value`` or raise :class:`UnsupportedEventTypeError`."""

        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip())
        except ValueError as exc:
            raise UnsupportedEventTypeError(
                f"Unsupported notification event type '{value}'"
            ) from exc


def parse_notify_users(raw: str | Iterable[str] | None) -> list[str]:
    """Return the ordered recipient ids contained in ``raw``.

    ``raw`` may be the comma-joined representation used by the store or an
    iterable of ids. Blank entries are dropped; repeated ids are kept
    as given and the per-day duplicate check suppresses the extra notification.
    """

    if raw is None:
        return []
    candidates = raw.split(",") if isinstance(raw, str) else list(raw)

    recipients: list[str] = []
    for candidate in candidates:
        if candidate is None:
            continue
        user_id = str(candidate).strip()
        if user_id:
            recipients.append(user_id)
    return recipients


def join_notify_users(user_ids: Iterable[str]) -> str:
    """Flatten recipient ids to the comma-joined form stored in the database."""

    return ",".join(parse_notify_users(user_ids))


@dataclass
class NotificationRule:
    """Trigger configuration evaluated by the notification generation job."""

    id: str | None
    asset_type: str
    event_type: NotificationEventType
    days_in_advance: int
    notify_users: list[str] = field(default_factory=list)
    email_enabled: bool = False
    app_enabled: bool = True
    active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def applies_to_all_types(self) -> bool:
        return self.asset_type == ALL_ASSET_TYPES

    def asset_type_filter(self) -> str | None:
        """Return the asset type name to filter on, ``None`` meaning every type."""

        return None if self.applies_to_all_types() else self.asset_type

    def recipients(self) -> list[str]:
        return parse_notify_users(self.notify_users)


__all__ = [
    "NotificationEventType",
    "NotificationRule",
    "UnsupportedEventTypeError",
    "join_notify_users",
    "parse_notify_users",
]
