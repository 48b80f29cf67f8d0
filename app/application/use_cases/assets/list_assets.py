"""Use case for listing assets with their remaining days until expiry."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.orm import Session

from app.domain.entities import Asset
from app.infrastructure.repositories import AssetRepository
from app.utils import days_until, now_in_app_timezone


@dataclass(frozen=True)
class AssetListing:
    asset: Asset
    days_until_expiry: int | None


def compute_days_until_expiry(asset: Asset, now: datetime) -> int | None:
    """Return the days left until the warranty (or else renewal) date."""

    expiry = asset.expiry_date()
    if expiry is None:
        return None
    return days_until(expiry, now)


def list_assets(
    session: Session,
    *,
    search: str | None = None,
    asset_type: str | None = None,
    user_id: str | None = None,
    now: datetime | None = None,
) -> list[AssetListing]:
    """Return matching assets, most recently updated first."""

    reference = now or now_in_app_timezone()
    assets = AssetRepository(session).list(
        search=search, asset_type_name=asset_type, user_id=user_id
    )
    return [
        AssetListing(asset=asset, days_until_expiry=compute_days_until_expiry(asset, reference))
        for asset in assets
    ]


__all__ = ["AssetListing", "compute_days_until_expiry", "list_assets"]
