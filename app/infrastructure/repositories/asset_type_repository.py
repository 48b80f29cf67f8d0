"""Persistence layer for asset types."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import AssetType
from app.infrastructure.models import AssetTypeModel
from app.utils import ensure_app_naive_datetime


class AssetTypeRepository:
    """Provide read and create operations for :class:`AssetType` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[AssetType]:
        query = self.session.query(AssetTypeModel).order_by(AssetTypeModel.name.asc())
        return [self.to_entity(model) for model in query.all()]

    def get(self, asset_type_id: str) -> AssetType | None:
        model = self.session.get(AssetTypeModel, asset_type_id)
        return self.to_entity(model) if model else None

    def get_by_name(self, name: str) -> AssetType | None:
        model = (
            self.session.query(AssetTypeModel)
            .filter(AssetTypeModel.name == name)
            .first()
        )
        return self.to_entity(model) if model else None

    def create(self, asset_type: AssetType) -> AssetType:
        model = AssetTypeModel(
            name=asset_type.name,
            description=asset_type.description,
            default_depreciation_period=asset_type.default_depreciation_period,
            required_fields=asset_type.required_fields,
            optional_fields=asset_type.optional_fields,
        )
        if asset_type.id:
            model.id = asset_type.id
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self.to_entity(model)

    @staticmethod
    def to_entity(model: AssetTypeModel) -> AssetType:
        return AssetType(
            id=model.id,
            name=model.name,
            description=model.description,
            default_depreciation_period=model.default_depreciation_period,
            required_fields=model.required_fields,
            optional_fields=model.optional_fields,
            created_at=ensure_app_naive_datetime(model.created_at),
            updated_at=ensure_app_naive_datetime(model.updated_at),
        )


__all__ = ["AssetTypeRepository"]
