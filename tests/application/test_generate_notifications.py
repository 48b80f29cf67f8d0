"""Tests for the notification generation pass."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest
from sqlalchemy.exc import OperationalError

import app.application.use_cases.notifications.delivery as delivery_module
from app.application.use_cases.notifications import (
    StoreReadFailure,
    StoreWriteFailure,
    generate_notifications,
)
from app.domain.entities import (
    Notification,
    NotificationEventType,
    UnsupportedEventTypeError,
)
from app.infrastructure.models import NotificationRuleModel
from app.infrastructure.repositories import (
    NotificationRepository,
    NotificationRuleRepository,
)

TODAY = datetime(2025, 6, 1, 9, 0)
TARGET = TODAY + timedelta(days=30)


@pytest.fixture(autouse=True)
def record_deliveries(monkeypatch: pytest.MonkeyPatch) -> dict[str, list]:
    calls: dict[str, list] = {"push": [], "email": []}

    def fake_dispatch(notification):
        calls["push"].append(notification)
        return False

    def fake_send(recipient, *, title, message):
        calls["email"].append((recipient, title))
        return True

    monkeypatch.setattr(delivery_module, "dispatch_notification", fake_dispatch)
    monkeypatch.setattr(delivery_module, "send_notification_email", fake_send)
    return calls


def test_warranty_rule_creates_notification(session, make_asset, make_rule) -> None:
    asset = make_asset("Laptop", warranty_expiry_date=TARGET)
    make_rule(notify_users=["u1"])

    result = generate_notifications(session, now=TODAY)

    assert result.count == 1
    notification = result.notifications[0]
    assert notification.id
    assert notification.asset_id == asset.id
    assert notification.user_id == "u1"
    assert notification.type == "warranty_expiry"
    assert notification.is_read is False
    assert notification.scheduled_date == TARGET
    assert notification.sent_date == TODAY
    assert notification.created_at == TODAY
    assert notification.title == "Warranty expiry in 30 days: Laptop"
    assert "Laptop" in notification.message


def test_second_run_on_same_day_creates_nothing(session, make_asset, make_rule) -> None:
    make_asset("Laptop", warranty_expiry_date=TARGET)
    make_rule(notify_users=["u1", "u2"])

    first = generate_notifications(session, now=TODAY)
    second = generate_notifications(session, now=TODAY + timedelta(hours=1))

    assert first.count == 2
    assert second.count == 0
    assert len(NotificationRepository(session).list()) == 2


def test_previous_notification_older_than_a_day_does_not_block(
    session, make_asset, make_rule
) -> None:
    asset = make_asset("Laptop", warranty_expiry_date=TARGET)
    make_rule(notify_users=["u1", "u2"])
    repository = NotificationRepository(session)
    for user_id, age in (("u1", timedelta(hours=25)), ("u2", timedelta(hours=23))):
        repository.create(
            Notification(
                id=None,
                asset_id=asset.id,
                user_id=user_id,
                type="warranty_expiry",
                title="Earlier",
                message="Earlier",
                created_at=TODAY - age,
            )
        )

    result = generate_notifications(session, now=TODAY)

    assert [notification.user_id for notification in result.notifications] == ["u1"]


@pytest.mark.parametrize(
    ("offset", "expected"),
    [
        (timedelta(0), 1),
        (timedelta(hours=-11), 1),
        (timedelta(hours=12), 1),
        (timedelta(hours=-12), 1),
        (timedelta(hours=13), 0),
        (timedelta(hours=-13), 0),
    ],
)
def test_match_window_is_twelve_hours_around_target(
    session, make_asset, make_rule, offset, expected
) -> None:
    make_asset("Laptop", warranty_expiry_date=TARGET + offset)
    make_rule()

    assert generate_notifications(session, now=TODAY).count == expected


def test_rule_for_all_types_matches_every_asset_type(session, make_asset, make_rule) -> None:
    make_asset("Laptop", asset_type="hardware", warranty_expiry_date=TARGET)
    make_asset("Office", asset_type="software", warranty_expiry_date=TARGET)
    make_asset("Phone", asset_type="rental", warranty_expiry_date=TARGET)
    make_rule(asset_type="all")

    result = generate_notifications(session, now=TODAY)

    assert sorted(n.asset.name for n in result.notifications) == ["Laptop", "Office", "Phone"]


def test_rule_only_matches_its_asset_type(session, make_asset, make_rule) -> None:
    make_asset("Laptop", asset_type="hardware", warranty_expiry_date=TARGET)
    make_asset("Office", asset_type="software", warranty_expiry_date=TARGET)
    make_rule(asset_type="software")

    result = generate_notifications(session, now=TODAY)

    assert [n.asset.name for n in result.notifications] == ["Office"]


def test_renewal_rule_uses_renewal_date(session, make_asset, make_rule) -> None:
    make_asset("CRM", asset_type="subscription", renewal_date=TARGET)
    make_asset("Laptop", asset_type="subscription", warranty_expiry_date=TARGET)
    make_rule(asset_type="subscription", event_type=NotificationEventType.RENEWAL_DUE)

    result = generate_notifications(session, now=TODAY)

    assert [n.asset.name for n in result.notifications] == ["CRM"]
    assert result.notifications[0].title == "Renewal due in 30 days: CRM"


def test_return_rule_only_matches_rental_assets(session, make_asset, make_rule) -> None:
    make_asset("Projector", asset_type="rental", renewal_date=TARGET)
    make_asset("Laptop", asset_type="hardware", renewal_date=TARGET)
    make_rule(asset_type="hardware", event_type=NotificationEventType.RETURN_DUE)

    result = generate_notifications(session, now=TODAY)

    assert [n.asset.name for n in result.notifications] == ["Projector"]
    assert result.notifications[0].type == "return_due"


@pytest.mark.parametrize(
    ("run_at", "expected"),
    [
        (datetime(2025, 12, 2, 9, 0), 1),
        (datetime(2025, 12, 1, 9, 0), 0),
        (datetime(2025, 12, 3, 9, 0), 0),
    ],
)
def test_depreciation_matches_exact_day(
    session, make_asset, make_rule, run_at, expected
) -> None:
    make_asset("Server", purchase_date=datetime(2023, 1, 1), depreciation_period=36)
    make_asset("No period", purchase_date=datetime(2023, 1, 1))
    make_rule(event_type=NotificationEventType.DEPRECIATION_COMPLETE)

    result = generate_notifications(session, now=run_at)

    assert result.count == expected
    if expected:
        assert result.notifications[0].asset.name == "Server"


def test_depreciation_end_rolls_past_short_months(session, make_asset, make_rule) -> None:
    make_asset("Tablet", purchase_date=datetime(2023, 1, 31), depreciation_period=1)
    make_rule(event_type=NotificationEventType.DEPRECIATION_COMPLETE)

    assert generate_notifications(session, now=datetime(2023, 2, 1, 9, 0)).count == 1
    assert generate_notifications(session, now=datetime(2023, 1, 29, 9, 0)).count == 0


def test_each_recipient_gets_one_notification_per_asset(
    session, make_asset, make_rule
) -> None:
    make_asset("Laptop", warranty_expiry_date=TARGET)
    make_asset("Monitor", warranty_expiry_date=TARGET)
    make_rule(notify_users=["u1", "u2"])

    result = generate_notifications(session, now=TODAY)

    pairs = {(n.asset.name, n.user_id) for n in result.notifications}
    assert result.count == 4
    assert pairs == {
        ("Laptop", "u1"),
        ("Laptop", "u2"),
        ("Monitor", "u1"),
        ("Monitor", "u2"),
    }


def test_repeated_recipient_gets_one_notification(session, make_asset, make_rule) -> None:
    make_asset("Laptop", warranty_expiry_date=TARGET)
    make_rule(notify_users=[" u1 ", "", "u1", "u2"])

    result = generate_notifications(session, now=TODAY)

    assert [n.user_id for n in result.notifications] == ["u1", "u2"]


def test_rule_without_recipients_creates_nothing(session, make_asset, make_rule) -> None:
    make_asset("Laptop", warranty_expiry_date=TARGET)
    make_rule(notify_users=[])

    assert generate_notifications(session, now=TODAY).count == 0


def test_inactive_rules_and_assets_are_skipped(session, make_asset, make_rule) -> None:
    make_asset("Disposed", status="disposed", warranty_expiry_date=TARGET)
    make_asset("Software", asset_type="software", warranty_expiry_date=TARGET)
    make_rule(asset_type="software", active=False)
    make_rule(asset_type="hardware")

    assert generate_notifications(session, now=TODAY).count == 0


def test_no_rules_creates_nothing(session, make_asset) -> None:
    make_asset("Laptop", warranty_expiry_date=TARGET)

    result = generate_notifications(session, now=TODAY)

    assert result.count == 0
    assert result.notifications == []


def test_aware_reference_time_is_normalized(session, make_asset, make_rule) -> None:
    from datetime import timezone

    make_asset("Laptop", warranty_expiry_date=TARGET)
    make_rule()

    result = generate_notifications(session, now=TODAY.replace(tzinfo=timezone.utc))

    assert result.count == 1
    assert result.notifications[0].sent_date == TODAY


def test_disabled_app_delivery_still_stores_notification(
    session, make_asset, make_rule, record_deliveries
) -> None:
    make_asset("Laptop", warranty_expiry_date=TARGET)
    make_rule(app_enabled=False)

    result = generate_notifications(session, now=TODAY)

    assert result.count == 1
    assert record_deliveries["push"] == []


def test_enabled_app_delivery_pushes_notification(
    session, make_asset, make_rule, record_deliveries
) -> None:
    make_asset("Laptop", warranty_expiry_date=TARGET)
    make_rule()

    result = generate_notifications(session, now=TODAY)

    assert [n.id for n in record_deliveries["push"]] == [result.notifications[0].id]


def test_email_is_sent_only_to_registered_recipients(
    session, make_asset, make_rule, make_user, record_deliveries
) -> None:
    user = make_user(email="buyer@example.com")
    make_asset("Laptop", warranty_expiry_date=TARGET)
    make_rule(notify_users=[user.id, "ghost"], email_enabled=True)

    result = generate_notifications(session, now=TODAY)

    assert result.count == 2
    assert record_deliveries["email"] == [
        ("buyer@example.com", "Warranty expiry in 30 days: Laptop")
    ]


def test_email_delivery_failure_does_not_abort_the_pass(
    session, make_asset, make_rule, make_user, monkeypatch
) -> None:
    user = make_user()
    make_asset("Laptop", warranty_expiry_date=TARGET)
    make_rule(notify_users=[user.id], email_enabled=True)
    monkeypatch.setattr(
        delivery_module, "send_notification_email", lambda *args, **kwargs: False
    )

    assert generate_notifications(session, now=TODAY).count == 1


def test_read_failure_is_reported(session, make_rule, monkeypatch) -> None:
    make_rule()

    def failing_list_active(self):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(NotificationRuleRepository, "list_active", failing_list_active)

    with pytest.raises(StoreReadFailure):
        generate_notifications(session, now=TODAY)


def test_write_failure_keeps_earlier_notifications(
    session, make_asset, make_rule, monkeypatch
) -> None:
    make_asset("Laptop", warranty_expiry_date=TARGET)
    make_rule(notify_users=["u1", "u2"])
    original_create = NotificationRepository.create

    def create_once(self, notification):
        if notification.user_id == "u2":
            raise OperationalError("INSERT", {}, Exception("disk full"))
        return original_create(self, notification)

    monkeypatch.setattr(NotificationRepository, "create", create_once)

    with pytest.raises(StoreWriteFailure):
        generate_notifications(session, now=TODAY)

    stored = NotificationRepository(session).list()
    assert [n.user_id for n in stored] == ["u1"]


def test_unknown_event_type_fails_loudly(session, make_asset) -> None:
    make_asset("Laptop", warranty_expiry_date=TARGET)
    session.add(
        NotificationRuleModel(
            asset_type="hardware",
            event_type="license_audit",
            days_in_advance=30,
            notify_users="u1",
            email_enabled=False,
            app_enabled=True,
            active=True,
        )
    )
    session.commit()

    with pytest.raises(UnsupportedEventTypeError):
        generate_notifications(session, now=TODAY)
