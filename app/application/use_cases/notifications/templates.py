"""Title and message templates for generated notifications."""

from __future__ import annotations

from dataclasses import dataclass

from app.domain.entities import NotificationEventType


@dataclass(frozen=True)
class NotificationTemplate:
    """Text used for one event type; placeholders are ``asset`` and ``days``."""

    label: str
    title: str
    message: str

    def render(self, *, asset_name: str, days: int) -> tuple[str, str]:
        values = {"label": self.label, "asset": asset_name, "days": days}
        return self.title.format(**values), self.message.format(**values)


NOTIFICATION_TEMPLATES: dict[NotificationEventType, NotificationTemplate] = {
    NotificationEventType.WARRANTY_EXPIRY: NotificationTemplate(
        label="Warranty expiry",
        title="{label} in {days} days: {asset}",
        message="The warranty for asset '{asset}' expires in {days} days.",
    ),
    NotificationEventType.RENEWAL_DUE: NotificationTemplate(
        label="Renewal due",
        title="{label} in {days} days: {asset}",
        message="Asset '{asset}' must be renewed in {days} days.",
    ),
    NotificationEventType.RETURN_DUE: NotificationTemplate(
        label="Return due",
        title="{label} in {days} days: {asset}",
        message="Rental asset '{asset}' must be returned in {days} days.",
    ),
    NotificationEventType.DEPRECIATION_COMPLETE: NotificationTemplate(
        label="Depreciation complete",
        title="{label} in {days} days: {asset}",
        message="Asset '{asset}' finishes its depreciation period in {days} days.",
    ),
}


def render_notification_text(
    event_type: NotificationEventType, *, asset_name: str, days: int
) -> tuple[str, str]:
    """Return the ``(title, message)`` pair for ``event_type``."""

    return NOTIFICATION_TEMPLATES[event_type].render(asset_name=asset_name, days=days)


__all__ = [
    "NOTIFICATION_TEMPLATES",
    "NotificationTemplate",
    "render_notification_text",
]
