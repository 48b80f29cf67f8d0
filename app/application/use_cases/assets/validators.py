"""Validation helpers for asset use cases."""

from sqlalchemy.orm import Session

from app.domain.entities import Asset
from app.infrastructure.repositories import AssetTypeRepository, UserRepository


def ensure_asset_references(session: Session, asset: Asset) -> None:
    """Raise ``ValueError`` when ``asset`` points to missing records or has bad values."""

    if not asset.name or not asset.name.strip():
        raise ValueError("The asset name is required")
    if asset.depreciation_period is not None and asset.depreciation_period < 1:
        raise ValueError("depreciation_period must be a positive number of months")
    if AssetTypeRepository(session).get(asset.asset_type_id) is None:
        raise ValueError("Asset type not found")

    users = UserRepository(session).get_map_by_ids(
        [asset.purchased_by_id, asset.current_user_id]
    )
    if asset.purchased_by_id not in users:
        raise ValueError("Purchasing user not found")
    if asset.current_user_id not in users:
        raise ValueError("Current user not found")
