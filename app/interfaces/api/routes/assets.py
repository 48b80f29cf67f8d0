"""Routes for managing assets."""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.assets import (
    compute_days_until_expiry,
    create_asset as create_asset_uc,
    delete_asset as delete_asset_uc,
    get_asset as get_asset_uc,
    list_assets as list_assets_uc,
    update_asset as update_asset_uc,
)
from app.domain.entities import Asset
from app.infrastructure.database import get_db
from app.interfaces.api.routes_helpers import http_error_from_value_error
from app.interfaces.api.schemas import AssetCreate, AssetRead, AssetUpdate
from app.utils import now_in_app_timezone

router = APIRouter(prefix="/assets", tags=["assets"])


def _to_read_model(asset: Asset, days_until_expiry: int | None = None) -> AssetRead:
    read = AssetRead.model_validate(asset)
    return read.model_copy(update={"days_until_expiry": days_until_expiry})


@router.get("/", response_model=list[AssetRead])
def list_assets(
    search: str | None = Query(
        None, description="Text searched in the name, serial number and description"
    ),
    asset_type: str | None = Query(
        None, description="Asset type name; 'all' disables the filter"
    ),
    user_id: str | None = Query(
        None, description="Only assets purchased or currently held by this user"
    ),
    db: Session = Depends(get_db),
) -> list[AssetRead]:
    """Return assets with the days left until their warranty or renewal date."""

    listings = list_assets_uc(db, search=search, asset_type=asset_type, user_id=user_id)
    return [
        _to_read_model(listing.asset, listing.days_until_expiry) for listing in listings
    ]


@router.post("/", response_model=AssetRead, status_code=status.HTTP_201_CREATED)
def create_asset(payload: AssetCreate, db: Session = Depends(get_db)) -> AssetRead:
    try:
        asset = create_asset_uc(db, **payload.model_dump())
    except ValueError as exc:
        raise http_error_from_value_error(exc) from exc
    return _to_read_model(asset, compute_days_until_expiry(asset, now_in_app_timezone()))


@router.get("/{asset_id}", response_model=AssetRead)
def read_asset(asset_id: str, db: Session = Depends(get_db)) -> AssetRead:
    try:
        asset = get_asset_uc(db, asset_id)
    except ValueError as exc:
        raise http_error_from_value_error(exc) from exc
    return _to_read_model(asset, compute_days_until_expiry(asset, now_in_app_timezone()))


@router.put("/{asset_id}", response_model=AssetRead)
def update_asset(
    asset_id: str, payload: AssetUpdate, db: Session = Depends(get_db)
) -> AssetRead:
    try:
        asset = update_asset_uc(db, asset_id, payload.model_dump(exclude_unset=True))
    except ValueError as exc:
        raise http_error_from_value_error(exc) from exc
    return _to_read_model(asset, compute_days_until_expiry(asset, now_in_app_timezone()))


@router.delete("/{asset_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_asset(asset_id: str, db: Session = Depends(get_db)) -> Response:
    try:
        delete_asset_uc(db, asset_id)
    except ValueError as exc:
        raise http_error_from_value_error(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
