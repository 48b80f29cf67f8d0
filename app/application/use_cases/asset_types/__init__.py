"""Use cases for asset types."""

from .asset_types import create_asset_type, get_asset_type, list_asset_types

__all__ = ["create_asset_type", "get_asset_type", "list_asset_types"]
