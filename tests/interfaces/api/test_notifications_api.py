"""Integration tests for notification rules and notification endpoints."""

from __future__ import annotations

import importlib
from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from app.application.use_cases.notifications import StoreReadFailure
from app.utils import now_in_app_naive_datetime

generation_module = importlib.import_module(
    "app.application.use_cases.notifications.generate_notifications"
)


@pytest.fixture()
def owner_and_asset(client: TestClient) -> tuple[str, str]:
    user = client.post("/users/", json={"name": "Buyer", "email": "buyer@example.com"})
    user_id = user.json()["id"]
    asset_type = client.post("/asset-types/", json={"name": "hardware"})
    asset = client.post(
        "/assets/",
        json={
            "name": "Laptop",
            "asset_type_id": asset_type.json()["id"],
            "purchase_date": "2024-01-01T00:00:00",
            "purchased_by_id": user_id,
            "current_user_id": user_id,
            "warranty_expiry_date": (
                now_in_app_naive_datetime() + timedelta(days=30)
            ).isoformat(),
        },
    )
    assert asset.status_code == 201
    return user_id, asset.json()["id"]


def test_notification_rule_crud(client: TestClient) -> None:
    response = client.post(
        "/notification-rules/",
        json={
            "asset_type": "hardware",
            "event_type": "warranty_expiry",
            "days_in_advance": 30,
            "notify_users": "u1, u2,u1",
        },
    )
    assert response.status_code == 201
    rule = response.json()
    assert rule["notify_users"] == ["u1", "u2", "u1"]
    assert rule["app_enabled"] is True
    assert rule["email_enabled"] is False

    update_response = client.put(
        f"/notification-rules/{rule['id']}",
        json={
            "asset_type": "all",
            "event_type": "renewal_due",
            "days_in_advance": 7,
            "notify_users": ["u3"],
            "active": False,
        },
    )
    assert update_response.status_code == 200
    assert update_response.json()["event_type"] == "renewal_due"
    assert update_response.json()["active"] is False

    assert client.get("/notification-rules/", params={"active_only": True}).json() == []
    assert len(client.get("/notification-rules/").json()) == 1

    assert client.delete(f"/notification-rules/{rule['id']}").status_code == 204
    assert client.get(f"/notification-rules/{rule['id']}").status_code == 404


def test_notification_rule_validation(client: TestClient) -> None:
    unknown_event = client.post(
        "/notification-rules/",
        json={"event_type": "license_audit", "days_in_advance": 30, "notify_users": ["u1"]},
    )
    assert unknown_event.status_code == 422

    zero_days = client.post(
        "/notification-rules/",
        json={"event_type": "warranty_expiry", "days_in_advance": 0, "notify_users": ["u1"]},
    )
    assert zero_days.status_code == 422


def test_generate_endpoint_creates_and_deduplicates(
    client: TestClient, owner_and_asset
) -> None:
    user_id, asset_id = owner_and_asset
    client.post(
        "/notification-rules/",
        json={
            "asset_type": "hardware",
            "event_type": "warranty_expiry",
            "days_in_advance": 30,
            "notify_users": [user_id, "orphan"],
        },
    )

    response = client.post("/notifications/generate")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["count"] == 2
    assert {item["user_id"] for item in body["notifications"]} == {user_id, "orphan"}
    assert all(item["asset_id"] == asset_id for item in body["notifications"])

    second = client.post("/notifications/generate")
    assert second.json()["count"] == 0
    assert second.json()["notifications"] == []


def test_generate_endpoint_reports_store_failure(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    def failing_pass(session, today):
        raise StoreReadFailure("Failed to load active notification rules")

    monkeypatch.setattr(generation_module, "_run_pass", failing_pass)

    response = client.post("/notifications/generate")

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to generate notifications"}


def test_notification_read_state_and_filters(client: TestClient, owner_and_asset) -> None:
    user_id, asset_id = owner_and_asset

    created = client.post(
        "/notifications/",
        json={
            "asset_id": asset_id,
            "user_id": user_id,
            "type": "warranty_expiry",
            "title": "Check warranty",
            "message": "Please review the warranty.",
        },
    )
    assert created.status_code == 201
    notification = created.json()
    assert notification["is_read"] is False
    assert notification["sent_date"] is not None
    assert notification["asset"]["name"] == "Laptop"
    assert notification["user"]["email"] == "buyer@example.com"

    missing_asset = client.post(
        "/notifications/",
        json={
            "asset_id": "missing",
            "user_id": user_id,
            "type": "warranty_expiry",
            "title": "Check warranty",
            "message": "Please review the warranty.",
        },
    )
    assert missing_asset.status_code == 404

    patch_response = client.patch(
        f"/notifications/{notification['id']}", json={"is_read": True}
    )
    assert patch_response.status_code == 200
    assert patch_response.json()["is_read"] is True

    unread = client.get("/notifications/", params={"user_id": user_id, "is_read": False})
    assert unread.json() == []
    read = client.get("/notifications/", params={"user_id": user_id, "is_read": True})
    assert [item["id"] for item in read.json()] == [notification["id"]]

    assert client.delete(f"/notifications/{notification['id']}").status_code == 204
    assert client.get(f"/notifications/{notification['id']}").status_code == 404


def test_deleting_asset_removes_its_notifications(
    client: TestClient, owner_and_asset
) -> None:
    user_id, asset_id = owner_and_asset
    client.post(
        "/notifications/",
        json={
            "asset_id": asset_id,
            "user_id": user_id,
            "type": "warranty_expiry",
            "title": "Check warranty",
            "message": "Please review the warranty.",
        },
    )

    assert client.delete(f"/assets/{asset_id}").status_code == 204
    assert client.get("/notifications/").json() == []


def test_websocket_sends_unread_notifications(client: TestClient, owner_and_asset) -> None:
    user_id, asset_id = owner_and_asset
    created = client.post(
        "/notifications/",
        json={
            "asset_id": asset_id,
            "user_id": user_id,
            "type": "warranty_expiry",
            "title": "Check warranty",
            "message": "Please review the warranty.",
        },
    ).json()

    with client.websocket_connect(f"/notifications/ws?user_id={user_id}") as websocket:
        init = websocket.receive_json()
        assert init["type"] == "init"
        assert [item["id"] for item in init["data"]] == [created["id"]]

        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}

        websocket.send_json({"type": "ack", "ids": [created["id"]]})
        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}

    assert client.get(f"/notifications/{created['id']}").json()["is_read"] is True


def test_rule_with_unknown_event_type_can_be_removed(client: TestClient) -> None:
    from app.infrastructure.database import SessionLocal
    from app.infrastructure.models import NotificationRuleModel

    session = SessionLocal()
    try:
        session.add(
            NotificationRuleModel(
                id="legacy",
                asset_type="hardware",
                event_type="license_audit",
                days_in_advance=30,
                notify_users="u1",
            )
        )
        session.commit()
    finally:
        session.close()

    assert client.get("/notification-rules/").json() == []
    assert client.post("/notifications/generate").status_code == 500

    assert client.delete("/notification-rules/legacy").status_code == 204
    assert client.get("/notification-rules/legacy").status_code == 404
    assert client.post("/notifications/generate").json()["count"] == 0
