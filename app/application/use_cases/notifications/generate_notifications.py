"""Use case that scans assets against the active rules and emits notifications."""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import Asset, Notification, NotificationRule, User
from app.infrastructure.repositories import (
    AssetRepository,
    NotificationRepository,
    NotificationRuleRepository,
    UserRepository,
)
from app.utils import ensure_app_naive_datetime, now_in_app_timezone

from .delivery import deliver_notification
from .errors import StoreReadFailure, StoreWriteFailure
from .event_matching import EventDefinition, MatchWindow, get_event_definition
from .templates import render_notification_text

logger = logging.getLogger(__name__)

DEDUP_WINDOW = timedelta(hours=24)

# Serializes overlapping passes inside one process. Separate processes can
# still race between the dedup check and the insert.
_generation_lock = threading.Lock()


@dataclass
class GenerationResult:
    """Notifications created by one generation pass."""

    notifications: list[Notification] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.notifications)


def compute_target_date(today: datetime, days_in_advance: int) -> datetime:
    """Return the moment ``days_in_advance`` days after ``today``."""

    return today + timedelta(days=days_in_advance)


def generate_notifications(
    session: Session, *, now: datetime | None = None
) -> GenerationResult:
    """Run one pass over every active rule and persist the due notifications.

    ``now`` is the reference instant of the pass; it defaults to the current
    time in the application timezone and is read only once, so every rule is
    evaluated against the same snapshot.

    Raises :class:`StoreReadFailure` or :class:`StoreWriteFailure` when the
    database fails. Notifications created before the failure stay stored.
    """

    today = ensure_app_naive_datetime(now or now_in_app_timezone())
    with _generation_lock:
        return _run_pass(session, today)


def _run_pass(session: Session, today: datetime) -> GenerationResult:
    result = GenerationResult()

    try:
        rules = NotificationRuleRepository(session).list_active()
    except SQLAlchemyError as exc:
        raise StoreReadFailure("Failed to load active notification rules") from exc

    if not rules:
        logger.info("No active notification rules; nothing to generate")
        return result

    logger.info(
        "Generating notifications for %d active rules at %s",
        len(rules),
        today.isoformat(),
    )
    for rule in rules:
        created = _process_rule(session, rule, today)
        result.notifications.extend(created)

    logger.info("Generated %d notifications", result.count)
    return result


def _process_rule(
    session: Session, rule: NotificationRule, today: datetime
) -> list[Notification]:
    definition = get_event_definition(rule.event_type)
    recipients = rule.recipients()
    if not recipients:
        logger.info("Rule %s has no recipients; skipping", rule.id)
        return []

    target_date = compute_target_date(today, rule.days_in_advance)
    window = MatchWindow.around(target_date)
    assets = _find_assets(session, definition, rule=rule, today=today, window=window)
    logger.debug(
        "Rule %s (%s, %d days) matched %d assets",
        rule.id,
        definition.event_type.value,
        rule.days_in_advance,
        len(assets),
    )
    if not assets:
        return []

    registered_users = _load_email_recipients(session, rule, recipients)
    repository = NotificationRepository(session)
    since = today - DEDUP_WINDOW

    created: list[Notification] = []
    for asset in assets:
        for user_id in recipients:
            if _already_notified(
                repository,
                asset_id=asset.id,
                user_id=user_id,
                event_type=definition.event_type.value,
                since=since,
            ):
                logger.debug(
                    "Notification already sent: %s to %s (%s)",
                    asset.name,
                    user_id,
                    definition.event_type.value,
                )
                continue

            notification = _create_notification(
                session,
                repository,
                _build_notification(
                    definition,
                    rule=rule,
                    asset=asset,
                    user_id=user_id,
                    today=today,
                    target_date=target_date,
                ),
            )
            created.append(notification)
            deliver_notification(
                notification, rule=rule, recipient=registered_users.get(user_id)
            )
    return created


def _find_assets(
    session: Session,
    definition: EventDefinition,
    *,
    rule: NotificationRule,
    today: datetime,
    window: MatchWindow,
) -> list[Asset]:
    try:
        return definition.find_assets(
            AssetRepository(session), rule=rule, today=today, window=window
        )
    except SQLAlchemyError as exc:
        msg = f"Failed to load assets for notification rule {rule.id}"
        raise StoreReadFailure(msg) from exc


def _load_email_recipients(
    session: Session, rule: NotificationRule, recipients: Sequence[str]
) -> dict[str, User]:
    if not rule.email_enabled:
        return {}
    try:
        return UserRepository(session).get_map_by_ids(recipients)
    except SQLAlchemyError as exc:
        msg = f"Failed to load recipients for notification rule {rule.id}"
        raise StoreReadFailure(msg) from exc


def _already_notified(
    repository: NotificationRepository,
    *,
    asset_id: str,
    user_id: str,
    event_type: str,
    since: datetime,
) -> bool:
    try:
        return repository.exists_recent(
            asset_id=asset_id, user_id=user_id, event_type=event_type, since=since
        )
    except SQLAlchemyError as exc:
        msg = f"Failed to check previous notifications for asset {asset_id}"
        raise StoreReadFailure(msg) from exc


def _build_notification(
    definition: EventDefinition,
    *,
    rule: NotificationRule,
    asset: Asset,
    user_id: str,
    today: datetime,
    target_date: datetime,
) -> Notification:
    title, message = render_notification_text(
        definition.event_type, asset_name=asset.name, days=rule.days_in_advance
    )
    return Notification(
        id=None,
        asset_id=asset.id,
        user_id=user_id,
        type=definition.event_type.value,
        title=title,
        message=message,
        is_read=False,
        scheduled_date=target_date,
        sent_date=today,
        created_at=today,
    )


def _create_notification(
    session: Session, repository: NotificationRepository, notification: Notification
) -> Notification:
    try:
        return repository.create(notification)
    except SQLAlchemyError as exc:
        session.rollback()
        msg = (
            f"Failed to store notification for asset {notification.asset_id} "
            f"and user {notification.user_id}"
        )
        raise StoreWriteFailure(msg) from exc


__all__ = [
    "DEDUP_WINDOW",
    "GenerationResult",
    "compute_target_date",
    "generate_notifications",
]
