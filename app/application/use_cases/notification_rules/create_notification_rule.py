"""Use case for creating notification rules."""

from collections.abc import Iterable

from sqlalchemy.orm import Session

from app.domain.entities import NotificationEventType, NotificationRule
from app.infrastructure.repositories import NotificationRuleRepository
from .validators import validate_rule_fields


def create_notification_rule(
    session: Session,
    *,
    asset_type: str,
    event_type: NotificationEventType | str,
    days_in_advance: int,
    notify_users: Iterable[str] | str,
    email_enabled: bool = False,
    app_enabled: bool = True,
    active: bool = True,
) -> NotificationRule:
    """Create a new notification rule."""

    normalized_type, member, recipients = validate_rule_fields(
        asset_type=asset_type,
        event_type=event_type,
        days_in_advance=days_in_advance,
        notify_users=notify_users,
    )
    entity = NotificationRule(
        id=None,
        asset_type=normalized_type,
        event_type=member,
        days_in_advance=days_in_advance,
        notify_users=recipients,
        email_enabled=email_enabled,
        app_enabled=app_enabled,
        active=active,
    )
    return NotificationRuleRepository(session).create(entity)
