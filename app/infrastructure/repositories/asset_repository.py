"""Persistence layer for tracked assets."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.domain.entities import ASSET_STATUS_ACTIVE, ALL_ASSET_TYPES, Asset
from app.infrastructure.models import AssetModel, AssetTypeModel
from app.utils import ensure_app_naive_datetime

from .asset_type_repository import AssetTypeRepository
from .user_repository import UserRepository

_DATE_FIELDS: dict[str, object] = {
    "purchase_date": AssetModel.purchase_date,
    "warranty_expiry_date": AssetModel.warranty_expiry_date,
    "renewal_date": AssetModel.renewal_date,
}


class AssetRepository:
    """Provide CRUD operations and filtered lookups for :class:`Asset` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        search: str | None = None,
        asset_type_name: str | None = None,
        user_id: str | None = None,
    ) -> Sequence[Asset]:
        query = self.session.query(AssetModel)
        if search:
            pattern = f"%{search}%"
            query = query.filter(
                or_(
                    AssetModel.name.like(pattern),
                    AssetModel.serial_number.like(pattern),
                    AssetModel.description.like(pattern),
                )
            )
        if asset_type_name and asset_type_name != ALL_ASSET_TYPES:
            query = query.filter(
                AssetModel.asset_type.has(AssetTypeModel.name == asset_type_name)
            )
        if user_id and user_id != "all":
            query = query.filter(
                or_(
                    AssetModel.purchased_by_id == user_id,
                    AssetModel.current_user_id == user_id,
                )
            )
        query = query.order_by(AssetModel.updated_at.desc(), AssetModel.id.desc())
        return [self._to_entity(model) for model in query.all()]

    def find_for_notification(
        self,
        *,
        asset_type_name: str | None = None,
        status: str = ASSET_STATUS_ACTIVE,
        date_field: str | None = None,
        date_range: tuple[datetime, datetime] | None = None,
        require_depreciation_period: bool = False,
    ) -> Sequence[Asset]:
        """Return assets matching the notification filters.

        ``asset_type_name`` of ``None`` matches every type. ``date_range`` bounds
        are inclusive and only apply when ``date_field`` is given.
        """

        query = self.session.query(AssetModel).filter(AssetModel.status == status)
        if asset_type_name is not None:
            query = query.filter(
                AssetModel.asset_type.has(AssetTypeModel.name == asset_type_name)
            )
        if date_field is not None:
            column = _DATE_FIELDS.get(date_field)
            if column is None:
                msg = f"Unknown asset date field '{date_field}'"
                raise ValueError(msg)
            if date_range is not None:
                start, end = date_range
                query = query.filter(
                    column >= ensure_app_naive_datetime(start),
                    column <= ensure_app_naive_datetime(end),
                )
        if require_depreciation_period:
            query = query.filter(AssetModel.depreciation_period.is_not(None))
        query = query.order_by(AssetModel.created_at.asc(), AssetModel.id.asc())
        return [self._to_entity(model) for model in query.all()]

    def get(self, asset_id: str) -> Asset | None:
        model = self.session.get(AssetModel, asset_id)
        return self._to_entity(model) if model else None

    def create(self, asset: Asset) -> Asset:
        model = AssetModel()
        if asset.id:
            model.id = asset.id
        self._apply_entity_to_model(model, asset)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, asset: Asset) -> Asset:
        model = self.session.get(AssetModel, asset.id)
        if model is None:
            msg = f"Asset with id {asset.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, asset)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, asset_id: str) -> None:
        model = self.session.get(AssetModel, asset_id)
        if model is None:
            msg = f"Asset with id {asset_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(model: AssetModel, asset: Asset) -> None:
        model.name = asset.name
        model.description = asset.description
        model.serial_number = asset.serial_number
        model.asset_type_id = asset.asset_type_id
        model.purchase_date = ensure_app_naive_datetime(asset.purchase_date)
        model.purchase_price = asset.purchase_price
        model.currency = asset.currency
        model.purchased_by_id = asset.purchased_by_id
        model.current_user_id = asset.current_user_id
        model.status = asset.status
        model.location = asset.location
        model.notes = asset.notes
        model.warranty_expiry_date = ensure_app_naive_datetime(asset.warranty_expiry_date)
        model.depreciation_period = asset.depreciation_period
        model.renewal_date = ensure_app_naive_datetime(asset.renewal_date)
        model.license_key = asset.license_key
        model.tags = asset.tags

    @staticmethod
    def _to_entity(model: AssetModel) -> Asset:
        return Asset(
            id=model.id,
            name=model.name,
            description=model.description,
            serial_number=model.serial_number,
            asset_type_id=model.asset_type_id,
            purchase_date=ensure_app_naive_datetime(model.purchase_date),
            purchase_price=model.purchase_price,
            currency=model.currency,
            purchased_by_id=model.purchased_by_id,
            current_user_id=model.current_user_id,
            status=model.status,
            location=model.location,
            notes=model.notes,
            warranty_expiry_date=ensure_app_naive_datetime(model.warranty_expiry_date),
            depreciation_period=model.depreciation_period,
            renewal_date=ensure_app_naive_datetime(model.renewal_date),
            license_key=model.license_key,
            tags=model.tags,
            created_at=ensure_app_naive_datetime(model.created_at),
            updated_at=ensure_app_naive_datetime(model.updated_at),
            asset_type=AssetTypeRepository.to_entity(model.asset_type)
            if model.asset_type
            else None,
            purchased_by=UserRepository._to_entity(model.purchased_by)
            if model.purchased_by
            else None,
            current_user=UserRepository._to_entity(model.current_user)
            if model.current_user
            else None,
        )


__all__ = ["AssetRepository"]
