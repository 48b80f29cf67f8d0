"""Use cases for managing assets."""

from .create_asset import create_asset
from .delete_asset import delete_asset
from .get_asset import get_asset
from .list_assets import AssetListing, compute_days_until_expiry, list_assets
from .update_asset import update_asset

__all__ = [
    "AssetListing",
    "compute_days_until_expiry",
    "create_asset",
    "delete_asset",
    "get_asset",
    "list_assets",
    "update_asset",
]
