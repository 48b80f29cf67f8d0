"""Persistence layer for notification rules."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from sqlalchemy import desc, true
from sqlalchemy.orm import Session

from app.domain.entities import (
    NotificationEventType,
    NotificationRule,
    UnsupportedEventTypeError,
    join_notify_users,
    parse_notify_users,
)
from app.infrastructure.models import NotificationRuleModel
from app.utils import ensure_app_naive_datetime

logger = logging.getLogger(__name__)


class NotificationRuleRepository:
    """Provide CRUD operations for notification rules."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, active_only: bool = False) -> Sequence[NotificationRule]:
        """Return rules newest first, leaving out rows with an unknown event type."""

        query = self.session.query(NotificationRuleModel)
        if active_only:
            query = query.filter(NotificationRuleModel.active == true())
        query = query.order_by(
            desc(NotificationRuleModel.created_at), desc(NotificationRuleModel.id)
        )
        return self._to_supported_entities(query.all())

    def list_active(self) -> Sequence[NotificationRule]:
        """Return every rule flagged as active, oldest first.

        Raises :class:`UnsupportedEventTypeError` when a stored rule has an
        unknown event type.
        """

        query = (
            self.session.query(NotificationRuleModel)
            .filter(NotificationRuleModel.active == true())
            .order_by(NotificationRuleModel.created_at.asc(), NotificationRuleModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, rule_id: str) -> NotificationRule | None:
        model = self.session.get(NotificationRuleModel, rule_id)
        return self._to_entity(model) if model else None

    def exists(self, rule_id: str) -> bool:
        return self.session.get(NotificationRuleModel, rule_id) is not None

    def create(self, rule: NotificationRule) -> NotificationRule:
        model = NotificationRuleModel()
        if rule.id:
            model.id = rule.id
        self._apply_entity_to_model(model, rule)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, rule: NotificationRule) -> NotificationRule:
        model = self.session.get(NotificationRuleModel, rule.id)
        if model is None:
            msg = f"Notification rule with id {rule.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, rule)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, rule_id: str) -> None:
        model = self.session.get(NotificationRuleModel, rule_id)
        if model is None:
            msg = f"Notification rule with id {rule_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    def _to_supported_entities(
        self, models: Iterable[NotificationRuleModel]
    ) -> list[NotificationRule]:
        rules: list[NotificationRule] = []
        for model in models:
            try:
                rules.append(self._to_entity(model))
            except UnsupportedEventTypeError:
                logger.warning(
                    "Skipping notification rule %s with unsupported event type '%s'",
                    model.id,
                    model.event_type,
                )
        return rules

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationRuleModel, rule: NotificationRule
    ) -> None:
        model.asset_type = rule.asset_type
        model.event_type = NotificationEventType.parse(rule.event_type).value
        model.days_in_advance = rule.days_in_advance
        model.notify_users = join_notify_users(rule.notify_users)
        model.email_enabled = rule.email_enabled
        model.app_enabled = rule.app_enabled
        model.active = rule.active

    @staticmethod
    def _to_entity(model: NotificationRuleModel) -> NotificationRule:
        return NotificationRule(
            id=model.id,
            asset_type=model.asset_type,
            event_type=NotificationEventType.parse(model.event_type),
            days_in_advance=model.days_in_advance,
            notify_users=parse_notify_users(model.notify_users),
            email_enabled=model.email_enabled,
            app_enabled=model.app_enabled,
            active=model.active,
            created_at=ensure_app_naive_datetime(model.created_at),
            updated_at=ensure_app_naive_datetime(model.updated_at),
        )


__all__ = ["NotificationRuleRepository"]
