"""Validation helpers for notification rule use cases."""

from collections.abc import Iterable

from app.domain.entities import NotificationEventType, parse_notify_users


def validate_rule_fields(
    *,
    asset_type: str,
    event_type: NotificationEventType | str,
    days_in_advance: int,
    notify_users: Iterable[str] | str,
) -> tuple[str, NotificationEventType, list[str]]:
    """Return the normalized ``(asset_type, event_type, notify_users)`` triple."""

    normalized_type = (asset_type or "").strip()
    if not normalized_type:
        raise ValueError("The rule must name an asset type or 'all'")
    if isinstance(days_in_advance, bool) or days_in_advance < 1:
        raise ValueError("days_in_advance must be a positive integer")
    member = NotificationEventType.parse(event_type)
    return normalized_type, member, parse_notify_users(notify_users)


__all__ = ["validate_rule_fields"]
