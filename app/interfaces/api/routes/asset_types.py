"""Routes for asset types."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.application.use_cases.asset_types import (
    create_asset_type as create_asset_type_uc,
    get_asset_type as get_asset_type_uc,
    list_asset_types as list_asset_types_uc,
)
from app.infrastructure.database import get_db
from app.interfaces.api.routes_helpers import http_error_from_value_error
from app.interfaces.api.schemas import AssetTypeCreate, AssetTypeRead

router = APIRouter(prefix="/asset-types", tags=["asset-types"])


@router.get("/", response_model=list[AssetTypeRead])
def list_asset_types(db: Session = Depends(get_db)) -> list[AssetTypeRead]:
    """Return every asset type ordered by name."""

    return [AssetTypeRead.model_validate(item) for item in list_asset_types_uc(db)]


@router.post("/", response_model=AssetTypeRead, status_code=status.HTTP_201_CREATED)
def create_asset_type(
    payload: AssetTypeCreate, db: Session = Depends(get_db)
) -> AssetTypeRead:
    try:
        asset_type = create_asset_type_uc(db, **payload.model_dump())
    except ValueError as exc:
        raise http_error_from_value_error(exc) from exc
    return AssetTypeRead.model_validate(asset_type)


@router.get("/{asset_type_id}", response_model=AssetTypeRead)
def read_asset_type(asset_type_id: str, db: Session = Depends(get_db)) -> AssetTypeRead:
    try:
        asset_type = get_asset_type_uc(db, asset_type_id)
    except ValueError as exc:
        raise http_error_from_value_error(exc) from exc
    return AssetTypeRead.model_validate(asset_type)
