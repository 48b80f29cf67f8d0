"""Use case for retrieving a single asset."""

from sqlalchemy.orm import Session

from app.domain.entities import Asset
from app.infrastructure.repositories import AssetRepository


def get_asset(session: Session, asset_id: str) -> Asset:
    """Return the asset identified by ``asset_id`` or raise an error."""

    asset = AssetRepository(session).get(asset_id)
    if asset is None:
        raise ValueError("Asset not found")
    return asset
