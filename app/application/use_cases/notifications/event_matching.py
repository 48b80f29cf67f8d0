"""Asset matching rules for each notification event type."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta

from app.domain.entities import (
    RENTAL_ASSET_TYPE,
    Asset,
    NotificationEventType,
    NotificationRule,
    UnsupportedEventTypeError,
)
from app.infrastructure.repositories import AssetRepository
from app.utils import add_months, days_until

MATCH_WINDOW_TOLERANCE = timedelta(hours=12)


@dataclass(frozen=True)
class MatchWindow:
    """Inclusive interval of datetimes an asset date must fall in to match."""

    start: datetime
    end: datetime

    @classmethod
    def around(
        cls, target: datetime, tolerance: timedelta = MATCH_WINDOW_TOLERANCE
    ) -> "MatchWindow":
        return cls(start=target - tolerance, end=target + tolerance)

    def contains(self, value: datetime | None) -> bool:
        return value is not None and self.start <= value <= self.end


def depreciation_end_date(asset: Asset) -> datetime | None:
    """Return the date ``asset`` becomes fully depreciated."""

    if asset.purchase_date is None or not asset.depreciation_period:
        return None
    return add_months(asset.purchase_date, asset.depreciation_period)


def depreciation_days_remaining(asset: Asset, today: datetime) -> int | None:
    """Return the whole days (rounded up) left until depreciation completes."""

    end_date = depreciation_end_date(asset)
    if end_date is None:
        return None
    return days_until(end_date, today)


@dataclass(frozen=True)
class EventDefinition:
    """How a rule of a given event type selects its assets.

    ``date_field`` is the asset date compared against the match window.
    ``forced_asset_type`` replaces the rule's own asset type filter.
    ``exact_depreciation_day`` keeps only assets whose depreciation ends
    exactly ``days_in_advance`` days after the run.
    """

    event_type: NotificationEventType
    date_field: str | None = None
    forced_asset_type: str | None = None
    exact_depreciation_day: bool = False

    def asset_type_filter(self, rule: NotificationRule) -> str | None:
        if self.forced_asset_type is not None:
            return self.forced_asset_type
        return rule.asset_type_filter()

    def find_assets(
        self,
        repository: AssetRepository,
        *,
        rule: NotificationRule,
        today: datetime,
        window: MatchWindow,
    ) -> list[Asset]:
        assets: Sequence[Asset] = repository.find_for_notification(
            asset_type_name=self.asset_type_filter(rule),
            date_field=self.date_field,
            date_range=(window.start, window.end) if self.date_field else None,
            require_depreciation_period=self.exact_depreciation_day,
        )
        if not self.exact_depreciation_day:
            return list(assets)
        return [
            asset
            for asset in assets
            if depreciation_days_remaining(asset, today) == rule.days_in_advance
        ]


EVENT_DEFINITIONS: dict[NotificationEventType, EventDefinition] = {
    NotificationEventType.WARRANTY_EXPIRY: EventDefinition(
        event_type=NotificationEventType.WARRANTY_EXPIRY,
        date_field="warranty_expiry_date",
    ),
    NotificationEventType.RENEWAL_DUE: EventDefinition(
        event_type=NotificationEventType.RENEWAL_DUE,
        date_field="renewal_date",
    ),
    NotificationEventType.RETURN_DUE: EventDefinition(
        event_type=NotificationEventType.RETURN_DUE,
        date_field="renewal_date",
        forced_asset_type=RENTAL_ASSET_TYPE,
    ),
    NotificationEventType.DEPRECIATION_COMPLETE: EventDefinition(
        event_type=NotificationEventType.DEPRECIATION_COMPLETE,
        exact_depreciation_day=True,
    ),
}

_undefined_event_types = set(NotificationEventType) - set(EVENT_DEFINITIONS)
if _undefined_event_types:  # pragma: no cover - guards future enum members
    raise RuntimeError(
        "Missing event definitions for: "
        + ", ".join(sorted(member.value for member in _undefined_event_types))
    )


def get_event_definition(event_type: NotificationEventType | str) -> EventDefinition:
    """Return the definition for ``event_type`` or raise for unknown tags."""

    member = NotificationEventType.parse(event_type)
    definition = EVENT_DEFINITIONS.get(member)
    if definition is None:  # pragma: no cover - prevented by the import check
        raise UnsupportedEventTypeError(f"Unsupported notification event type '{event_type}'")
    return definition


__all__ = [
    "EVENT_DEFINITIONS",
    "EventDefinition",
    "MATCH_WINDOW_TOLERANCE",
    "MatchWindow",
    "depreciation_days_remaining",
    "depreciation_end_date",
    "get_event_definition",
]
