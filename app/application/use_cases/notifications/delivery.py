"""Best-effort delivery of freshly generated notifications."""

from __future__ import annotations

import logging

from app.domain.entities import Notification, NotificationRule, User
from app.infrastructure.email import send_notification_email
from app.infrastructure.notifications import dispatch_notification

logger = logging.getLogger(__name__)


def deliver_notification(
    notification: Notification,
    *,
    rule: NotificationRule,
    recipient: User | None,
) -> None:
    """Push ``notification`` to open clients and relay it by email when enabled.

    Delivery problems are logged; the stored notification is never affected.
    """

    if rule.app_enabled:
        dispatch_notification(notification)

    if not rule.email_enabled:
        return
    if recipient is None:
        logger.debug(
            "Recipient %s is not a registered user; skipping email for notification %s",
            notification.user_id,
            notification.id,
        )
        return
    if not send_notification_email(
        recipient.email, title=notification.title, message=notification.message
    ):
        logger.warning(
            "Could not email notification %s to %s", notification.id, recipient.email
        )


__all__ = ["deliver_notification"]
