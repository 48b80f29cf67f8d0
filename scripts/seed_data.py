"""Populate the database with sample users, assets and notification rules.

Running the script twice does not duplicate data: records are looked up by
their unique name or email first.
"""

from __future__ import annotations

import logging
from datetime import timedelta

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.use_cases.asset_types import create_asset_type
from app.application.use_cases.assets import create_asset
from app.application.use_cases.notification_rules import (
    create_notification_rule,
    list_notification_rules,
)
from app.application.use_cases.users import create_user
from app.domain.entities import AssetType, User
from app.infrastructure.database import SessionLocal, initialize_database
from app.infrastructure.repositories import (
    AssetRepository,
    AssetTypeRepository,
    UserRepository,
)
from app.utils import add_months, now_in_app_naive_datetime

logger = logging.getLogger(__name__)

USERS = [
    {"name": "Admin User", "email": "admin@example.com", "role": "admin"},
    {"name": "Tanaka Taro", "email": "tanaka@example.com", "role": "buyer"},
    {"name": "Sato Hanako", "email": "sato@example.com", "role": "user"},
    {"name": "Suzuki Ichiro", "email": "suzuki@example.com", "role": "user"},
]

ASSET_TYPES = [
    {
        "name": "hardware",
        "description": "Computers, monitors and other physical equipment",
        "default_depreciation_period": 36,
    },
    {"name": "software", "description": "Perpetual software licenses"},
    {"name": "subscription", "description": "Recurring SaaS subscriptions"},
    {"name": "domain", "description": "Registered internet domains"},
    {"name": "ssl_certificate", "description": "TLS certificates"},
    {"name": "rental", "description": "Leased equipment that must be returned"},
]


def _ensure_users(session: Session) -> dict[str, User]:
    repository = UserRepository(session)
    users: dict[str, User] = {}
    for payload in USERS:
        user = repository.get_by_email(payload["email"])
        if user is None:
            user = create_user(session, **payload)
            logger.info("Created user %s", user.email)
        users[payload["email"]] = user
    return users


def _ensure_asset_types(session: Session) -> dict[str, AssetType]:
    repository = AssetTypeRepository(session)
    asset_types: dict[str, AssetType] = {}
    for payload in ASSET_TYPES:
        asset_type = repository.get_by_name(payload["name"])
        if asset_type is None:
            asset_type = create_asset_type(session, **payload)
            logger.info("Created asset type %s", asset_type.name)
        asset_types[payload["name"]] = asset_type
    return asset_types


def _ensure_assets(
    session: Session, users: dict[str, User], asset_types: dict[str, AssetType]
) -> None:
    repository = AssetRepository(session)
    if repository.list():
        logger.info("Assets already present; skipping asset seed")
        return

    today = now_in_app_naive_datetime().replace(hour=0, minute=0, second=0, microsecond=0)
    buyer = users["tanaka@example.com"]
    samples = [
        {
            "name": "MacBook Pro 14",
            "asset_type": "hardware",
            "holder": "sato@example.com",
            "purchase_date": add_months(today, -36) + timedelta(days=30),
            "serial_number": "C02XYZ123",
            "purchase_price": 298000,
            "warranty_expiry_date": today + timedelta(days=30),
        },
        {
            "name": "Dell UltraSharp 27",
            "asset_type": "hardware",
            "holder": "suzuki@example.com",
            "purchase_date": add_months(today, -12),
            "serial_number": "CN0ABC456",
            "purchase_price": 65000,
            "warranty_expiry_date": today + timedelta(days=7),
        },
        {
            "name": "Adobe Creative Cloud",
            "asset_type": "subscription",
            "holder": "sato@example.com",
            "purchase_date": add_months(today, -11),
            "purchase_price": 86880,
            "renewal_date": today + timedelta(days=30),
        },
        {
            "name": "example.com",
            "asset_type": "domain",
            "holder": "admin@example.com",
            "purchase_date": add_months(today, -12),
            "purchase_price": 1500,
            "renewal_date": today + timedelta(days=60),
        },
        {
            "name": "Wildcard certificate",
            "asset_type": "ssl_certificate",
            "holder": "admin@example.com",
            "purchase_date": add_months(today, -11),
            "purchase_price": 30000,
            "renewal_date": today + timedelta(days=30),
        },
        {
            "name": "Projector (leased)",
            "asset_type": "rental",
            "holder": "suzuki@example.com",
            "purchase_date": add_months(today, -6),
            "purchase_price": 12000,
            "renewal_date": today + timedelta(days=7),
        },
    ]
    for sample in samples:
        asset_type = asset_types[sample.pop("asset_type")]
        holder = users[sample.pop("holder")]
        asset = create_asset(
            session,
            asset_type_id=asset_type.id,
            purchased_by_id=buyer.id,
            current_user_id=holder.id,
            **sample,
        )
        logger.info("Created asset %s", asset.name)


def _ensure_rules(session: Session, users: dict[str, User]) -> None:
    if list_notification_rules(session):
        logger.info("Notification rules already present; skipping rule seed")
        return

    admin = users["admin@example.com"]
    buyer = users["tanaka@example.com"]
    rules = [
        {"asset_type": "hardware", "event_type": "warranty_expiry", "days_in_advance": 30},
        {"asset_type": "all", "event_type": "warranty_expiry", "days_in_advance": 7},
        {"asset_type": "subscription", "event_type": "renewal_due", "days_in_advance": 30},
        {"asset_type": "domain", "event_type": "renewal_due", "days_in_advance": 60},
        {"asset_type": "ssl_certificate", "event_type": "renewal_due", "days_in_advance": 30},
        {"asset_type": "rental", "event_type": "return_due", "days_in_advance": 7},
        {"asset_type": "hardware", "event_type": "depreciation_complete", "days_in_advance": 30},
    ]
    for payload in rules:
        rule = create_notification_rule(
            session, notify_users=[admin.id, buyer.id], **payload
        )
        logger.info(
            "Created rule %s: %s %s days before",
            rule.id,
            rule.event_type,
            rule.days_in_advance,
        )


def main() -> None:
    """Seed the database with sample data."""

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    initialize_database()

    session = SessionLocal()
    try:
        users = _ensure_users(session)
        asset_types = _ensure_asset_types(session)
        _ensure_assets(session, users, asset_types)
        _ensure_rules(session, users)
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Could not seed the database: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Database error while seeding: {exc}") from exc
    else:
        print("Sample data ready")
    finally:
        session.close()


if __name__ == "__main__":
    main()
