"""Tests for the per event type matching definitions."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from app.application.use_cases.notifications.event_matching import (
    EVENT_DEFINITIONS,
    MatchWindow,
    depreciation_days_remaining,
    depreciation_end_date,
    get_event_definition,
)
from app.domain.entities import (
    Asset,
    NotificationEventType,
    NotificationRule,
    UnsupportedEventTypeError,
)


def _asset(**fields) -> Asset:
    return Asset(
        id="a1",
        name="Server",
        asset_type_id="t1",
        purchase_date=fields.pop("purchase_date", datetime(2023, 1, 1)),
        purchased_by_id="u1",
        current_user_id="u1",
        **fields,
    )


def test_every_event_type_has_a_definition() -> None:
    assert set(EVENT_DEFINITIONS) == set(NotificationEventType)


def test_match_window_bounds_are_inclusive() -> None:
    target = datetime(2025, 7, 1, 9, 0)
    window = MatchWindow.around(target)

    assert window.contains(target - timedelta(hours=12))
    assert window.contains(target + timedelta(hours=12))
    assert not window.contains(target + timedelta(hours=12, seconds=1))
    assert not window.contains(None)


def test_return_due_forces_rental_type() -> None:
    rule = NotificationRule(
        id="r1",
        asset_type="hardware",
        event_type=NotificationEventType.RETURN_DUE,
        days_in_advance=7,
    )

    assert get_event_definition("return_due").asset_type_filter(rule) == "rental"
    assert get_event_definition("renewal_due").asset_type_filter(rule) == "hardware"


def test_all_asset_types_disable_the_filter() -> None:
    rule = NotificationRule(
        id="r1",
        asset_type="all",
        event_type=NotificationEventType.WARRANTY_EXPIRY,
        days_in_advance=7,
    )

    assert get_event_definition(rule.event_type).asset_type_filter(rule) is None


def test_unknown_event_type_is_rejected() -> None:
    with pytest.raises(UnsupportedEventTypeError):
        get_event_definition("license_audit")


def test_depreciation_end_date() -> None:
    assert depreciation_end_date(_asset(depreciation_period=36)) == datetime(2026, 1, 1)
    assert depreciation_end_date(_asset()) is None
    assert (
        depreciation_days_remaining(
            _asset(depreciation_period=36), datetime(2025, 12, 2, 9, 0)
        )
        == 30
    )


def test_depreciation_end_date_rolls_over_missing_days() -> None:
    asset = _asset(purchase_date=datetime(2023, 1, 31), depreciation_period=1)

    assert depreciation_end_date(asset) == datetime(2023, 3, 3)
