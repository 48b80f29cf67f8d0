"""Unit tests for the datetime helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from app.utils import add_months, days_until, ensure_app_naive_datetime


@pytest.mark.parametrize(
    ("value", "months", "expected"),
    [
        (datetime(2023, 1, 1), 36, datetime(2026, 1, 1)),
        (datetime(2024, 1, 31), 1, datetime(2024, 3, 2)),
        (datetime(2023, 1, 31), 1, datetime(2023, 3, 3)),
        (datetime(2024, 1, 29), 1, datetime(2024, 2, 29)),
        (datetime(2023, 8, 31), 6, datetime(2024, 3, 2)),
        (datetime(2023, 11, 15, 8, 30), 3, datetime(2024, 2, 15, 8, 30)),
        (datetime(2024, 3, 31), -1, datetime(2024, 3, 2)),
    ],
)
def test_add_months(value: datetime, months: int, expected: datetime) -> None:
    assert add_months(value, months) == expected


def test_days_until_rounds_partial_days_up() -> None:
    target = datetime(2026, 1, 1)

    assert days_until(target, datetime(2025, 12, 2)) == 30
    assert days_until(target, datetime(2025, 12, 2, 9, 0)) == 30
    assert days_until(target, datetime(2025, 12, 1, 9, 0)) == 31
    assert days_until(target, target + timedelta(hours=1)) == 0


def test_days_until_accepts_aware_values() -> None:
    target = datetime(2026, 1, 1, tzinfo=timezone.utc)

    assert days_until(target, datetime(2025, 12, 31)) == 1


def test_ensure_app_naive_datetime_converts_to_app_timezone() -> None:
    value = datetime(2025, 6, 1, 9, 0, tzinfo=timezone(timedelta(hours=9)))

    assert ensure_app_naive_datetime(value) == datetime(2025, 6, 1, 0, 0)
    assert ensure_app_naive_datetime(None) is None
