"""Use case for deleting assets."""

from sqlalchemy.orm import Session

from app.infrastructure.repositories import AssetRepository


def delete_asset(session: Session, asset_id: str) -> None:
    """Delete the asset together with its notifications."""

    repository = AssetRepository(session)
    if repository.get(asset_id) is None:
        raise ValueError("Asset not found")
    repository.delete(asset_id)
