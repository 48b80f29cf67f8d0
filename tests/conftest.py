"""Shared fixtures for the test suite."""

from __future__ import annotations

import os
from collections.abc import Iterator
from datetime import datetime

import pytest

# Configure an in-memory database before the application modules are imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["APP_TIMEZONE"] = "UTC"
os.environ.pop("SENDGRID_API_KEY", None)
os.environ.pop("SENDGRID_SENDER", None)

from sqlalchemy.orm import Session

from app.config import reset_settings_cache

reset_settings_cache()

from app.domain.entities import (
    Asset,
    AssetType,
    NotificationEventType,
    NotificationRule,
    User,
)
from app.infrastructure import database
from app.infrastructure.repositories import (
    AssetRepository,
    AssetTypeRepository,
    NotificationRuleRepository,
    UserRepository,
)


@pytest.fixture(autouse=True)
def reset_database() -> Iterator[None]:
    """Recreate every table so each test starts from an empty store."""

    from app.infrastructure import models  # noqa: F401

    database.Base.metadata.drop_all(bind=database.engine)
    database.Base.metadata.create_all(bind=database.engine)
    yield
    database.Base.metadata.drop_all(bind=database.engine)


@pytest.fixture()
def session() -> Iterator[Session]:
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client() -> Iterator:
    """Return a test client bound to a fresh application instance."""

    pytest.importorskip("httpx")
    from fastapi.testclient import TestClient

    from main import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def make_user(session: Session):
    counter = {"value": 0}

    def _make_user(name: str | None = None, email: str | None = None) -> User:
        counter["value"] += 1
        index = counter["value"]
        return UserRepository(session).create(
            User(
                id=None,
                name=name or f"User {index}",
                email=email or f"user{index}@example.com",
                role="user",
            )
        )

    return _make_user


@pytest.fixture()
def make_asset_type(session: Session):
    def _make_asset_type(name: str, default_depreciation_period: int | None = None) -> AssetType:
        repository = AssetTypeRepository(session)
        existing = repository.get_by_name(name)
        if existing is not None:
            return existing
        return repository.create(
            AssetType(
                id=None,
                name=name,
                default_depreciation_period=default_depreciation_period,
            )
        )

    return _make_asset_type


@pytest.fixture()
def make_asset(session: Session, make_user, make_asset_type):
    owner: dict[str, User] = {}

    def _make_asset(
        name: str,
        *,
        asset_type: str = "hardware",
        purchase_date: datetime = datetime(2023, 1, 1),
        **fields,
    ) -> Asset:
        if "user" not in owner:
            owner["user"] = make_user(name="Asset Owner", email="owner@example.com")
        user = owner["user"]
        type_entity = make_asset_type(asset_type)
        return AssetRepository(session).create(
            Asset(
                id=None,
                name=name,
                asset_type_id=type_entity.id,
                purchase_date=purchase_date,
                purchased_by_id=user.id,
                current_user_id=user.id,
                **fields,
            )
        )

    return _make_asset


@pytest.fixture()
def make_rule(session: Session):
    def _make_rule(
        *,
        asset_type: str = "hardware",
        event_type: NotificationEventType = NotificationEventType.WARRANTY_EXPIRY,
        days_in_advance: int = 30,
        notify_users: list[str] | None = None,
        **fields,
    ) -> NotificationRule:
        return NotificationRuleRepository(session).create(
            NotificationRule(
                id=None,
                asset_type=asset_type,
                event_type=event_type,
                days_in_advance=days_in_advance,
                notify_users=notify_users if notify_users is not None else ["u1"],
                **fields,
            )
        )

    return _make_rule
