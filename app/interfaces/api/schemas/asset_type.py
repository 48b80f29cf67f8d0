"""Pydantic models for asset type endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class AssetTypeBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    description: str | None = None
    default_depreciation_period: int | None = Field(default=None, ge=1)
    required_fields: str | None = None
    optional_fields: str | None = None


class AssetTypeCreate(AssetTypeBase):
    """Payload required to register an asset type."""


class AssetTypeRead(AssetTypeBase):
    id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["AssetTypeCreate", "AssetTypeRead"]
