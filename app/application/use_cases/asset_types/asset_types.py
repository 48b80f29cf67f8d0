"""Use cases for listing and registering asset types."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import ALL_ASSET_TYPES, AssetType
from app.infrastructure.repositories import AssetTypeRepository


def list_asset_types(session: Session) -> Sequence[AssetType]:
    """Return every asset type ordered by name."""

    return AssetTypeRepository(session).list()


def get_asset_type(session: Session, asset_type_id: str) -> AssetType:
    asset_type = AssetTypeRepository(session).get(asset_type_id)
    if asset_type is None:
        raise ValueError("Asset type not found")
    return asset_type


def create_asset_type(
    session: Session,
    *,
    name: str,
    description: str | None = None,
    default_depreciation_period: int | None = None,
    required_fields: str | None = None,
    optional_fields: str | None = None,
) -> AssetType:
    """Register a new asset type with a unique name."""

    normalized = name.strip()
    if not normalized:
        raise ValueError("The asset type name is required")
    if normalized == ALL_ASSET_TYPES:
        raise ValueError(f"'{ALL_ASSET_TYPES}' is reserved for rules matching every type")
    if default_depreciation_period is not None and default_depreciation_period < 1:
        raise ValueError("default_depreciation_period must be a positive number of months")

    repository = AssetTypeRepository(session)
    if repository.get_by_name(normalized) is not None:
        raise ValueError(f"Asset type '{normalized}' already exists")

    entity = AssetType(
        id=None,
        name=normalized,
        description=description,
        default_depreciation_period=default_depreciation_period,
        required_fields=required_fields,
        optional_fields=optional_fields,
    )
    return repository.create(entity)
