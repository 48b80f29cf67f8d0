"""Use case for deleting notification rules."""

from sqlalchemy.orm import Session

from app.infrastructure.repositories import NotificationRuleRepository


def delete_notification_rule(session: Session, rule_id: str) -> None:
    """Delete the specified notification rule, even one with an unknown event type."""

    repository = NotificationRuleRepository(session)
    if not repository.exists(rule_id):
        raise ValueError("Notification rule not found")
    repository.delete(rule_id)
