"""Use case for registering assets."""

from datetime import datetime
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import ASSET_STATUS_ACTIVE, Asset
from app.infrastructure.repositories import AssetRepository, AssetTypeRepository
from .validators import ensure_asset_references


def create_asset(
    session: Session,
    *,
    name: str,
    asset_type_id: str,
    purchase_date: datetime,
    purchased_by_id: str,
    current_user_id: str,
    status: str = ASSET_STATUS_ACTIVE,
    depreciation_period: int | None = None,
    **details: Any,
) -> Asset:
    """Create an asset after checking its type and owners exist.

    When no depreciation period is given the asset type default is used.
    """

    if depreciation_period is None:
        asset_type = AssetTypeRepository(session).get(asset_type_id)
        if asset_type is not None:
            depreciation_period = asset_type.default_depreciation_period

    entity = Asset(
        id=None,
        name=name,
        asset_type_id=asset_type_id,
        purchase_date=purchase_date,
        purchased_by_id=purchased_by_id,
        current_user_id=current_user_id,
        status=status,
        depreciation_period=depreciation_period,
        **details,
    )
    ensure_asset_references(session, entity)
    return AssetRepository(session).create(entity)
