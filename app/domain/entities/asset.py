"""Domain entity representing a tracked organizational asset."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .asset_type import AssetType
from .user import User

ASSET_STATUS_ACTIVE = "active"
ASSET_STATUS_EXPIRED = "expired"
ASSET_STATUS_DISPOSED = "disposed"


@dataclass
class Asset:
    """Hardware, license, subscription or rental owned by the organization."""

    id: str | None
    name: str
    asset_type_id: str
    purchase_date: datetime
    purchased_by_id: str
    current_user_id: str
    status: str = ASSET_STATUS_ACTIVE
    description: str | None = None
    serial_number: str | None = None
    purchase_price: float | None = None
    currency: str = "JPY"
    location: str | None = None
    notes: str | None = None
    warranty_expiry_date: datetime | None = None
    depreciation_period: int | None = None
    renewal_date: datetime | None = None
    license_key: str | None = None
    tags: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    asset_type: AssetType | None = None
    purchased_by: User | None = None
    current_user: User | None = None

    def is_active(self) -> bool:
        return self.status == ASSET_STATUS_ACTIVE

    def expiry_date(self) -> datetime | None:
        """Return the warranty expiry date, falling back to the renewal date."""

        return self.warranty_expiry_date or self.renewal_date


__all__ = [
    "ASSET_STATUS_ACTIVE",
    "ASSET_STATUS_DISPOSED",
    "ASSET_STATUS_EXPIRED",
    "Asset",
]
