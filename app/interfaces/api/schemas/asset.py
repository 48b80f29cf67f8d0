"""Pydantic models for asset endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .asset_type import AssetTypeRead
from .user import UserRead


class AssetDetails(BaseModel):
    """Optional descriptive fields shared by create and update payloads."""

    description: str | None = None
    serial_number: str | None = Field(default=None, max_length=120)
    purchase_price: float | None = Field(default=None, ge=0)
    currency: str = Field(default="JPY", max_length=10)
    location: str | None = Field(default=None, max_length=200)
    notes: str | None = None
    warranty_expiry_date: datetime | None = None
    renewal_date: datetime | None = None
    license_key: str | None = Field(default=None, max_length=255)
    tags: str | None = Field(default=None, max_length=255)


class AssetCreate(AssetDetails):
    """Payload required to register an asset."""

    name: str = Field(..., min_length=1, max_length=200)
    asset_type_id: str
    purchase_date: datetime
    purchased_by_id: str
    current_user_id: str
    status: str = Field(default="active", max_length=30)
    depreciation_period: int | None = Field(default=None, ge=1)


class AssetUpdate(BaseModel):
    """Partial update; only the fields sent by the client are changed."""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    asset_type_id: str | None = None
    purchase_date: datetime | None = None
    purchased_by_id: str | None = None
    current_user_id: str | None = None
    status: str | None = Field(default=None, max_length=30)
    depreciation_period: int | None = Field(default=None, ge=1)
    description: str | None = None
    serial_number: str | None = Field(default=None, max_length=120)
    purchase_price: float | None = Field(default=None, ge=0)
    currency: str | None = Field(default=None, max_length=10)
    location: str | None = Field(default=None, max_length=200)
    notes: str | None = None
    warranty_expiry_date: datetime | None = None
    renewal_date: datetime | None = None
    license_key: str | None = Field(default=None, max_length=255)
    tags: str | None = Field(default=None, max_length=255)

    model_config = ConfigDict(extra="forbid")


class AssetRead(AssetDetails):
    id: str
    name: str
    asset_type_id: str
    purchase_date: datetime
    purchased_by_id: str
    current_user_id: str
    status: str
    depreciation_period: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    asset_type: AssetTypeRead | None = None
    purchased_by: UserRead | None = None
    current_user: UserRead | None = None
    days_until_expiry: int | None = None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["AssetCreate", "AssetRead", "AssetUpdate"]
