"""Domain entity representing a category of assets."""

from dataclasses import dataclass
from datetime import datetime

ALL_ASSET_TYPES = "all"
RENTAL_ASSET_TYPE = "rental"


@dataclass
class AssetType:
    """Category such as ``hardware``, ``subscription`` or ``rental``."""

    id: str | None
    name: str
    description: str | None = None
    default_depreciation_period: int | None = None
    required_fields: str | None = None
    optional_fields: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["ALL_ASSET_TYPES", "AssetType", "RENTAL_ASSET_TYPE"]
