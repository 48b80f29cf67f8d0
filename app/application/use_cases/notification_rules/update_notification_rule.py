"""Use case for updating notification rules."""

from collections.abc import Iterable
from dataclasses import replace

from sqlalchemy.orm import Session

from app.domain.entities import NotificationEventType, NotificationRule
from app.infrastructure.repositories import NotificationRuleRepository
from .validators import validate_rule_fields


def update_notification_rule(
    session: Session,
    *,
    rule_id: str,
    asset_type: str,
    event_type: NotificationEventType | str,
    days_in_advance: int,
    notify_users: Iterable[str] | str,
    email_enabled: bool,
    app_enabled: bool,
    active: bool,
) -> NotificationRule:
    """Replace every editable field of a notification rule."""

    repository = NotificationRuleRepository(session)
    current = repository.get(rule_id)
    if current is None:
        raise ValueError("Notification rule not found")

    normalized_type, member, recipients = validate_rule_fields(
        asset_type=asset_type,
        event_type=event_type,
        days_in_advance=days_in_advance,
        notify_users=notify_users,
    )
    updated_rule = replace(
        current,
        asset_type=normalized_type,
        event_type=member,
        days_in_advance=days_in_advance,
        notify_users=recipients,
        email_enabled=email_enabled,
        app_enabled=app_enabled,
        active=active,
    )
    return repository.update(updated_rule)
