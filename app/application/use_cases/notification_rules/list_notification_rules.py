"""Use case for listing notification rules."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import NotificationRule
from app.infrastructure.repositories import NotificationRuleRepository


def list_notification_rules(
    session: Session, *, active_only: bool = False
) -> Sequence[NotificationRule]:
    """Return every rule, newest first, or only the active ones."""

    return NotificationRuleRepository(session).list(active_only=active_only)


__all__ = ["list_notification_rules"]
