from .asset import AssetCreate, AssetRead, AssetUpdate
from .asset_type import AssetTypeCreate, AssetTypeRead
from .notification import (
    NotificationAssetRead,
    NotificationCreate,
    NotificationGenerateResponse,
    NotificationRead,
    NotificationUpdate,
    NotificationUserRead,
)
from .notification_rule import (
    NotificationRuleCreate,
    NotificationRuleRead,
    NotificationRuleUpdate,
)
from .user import UserCreate, UserRead, UserUpdate

__all__ = [
    "AssetCreate",
    "AssetRead",
    "AssetTypeCreate",
    "AssetTypeRead",
    "AssetUpdate",
    "NotificationAssetRead",
    "NotificationCreate",
    "NotificationGenerateResponse",
    "NotificationRead",
    "NotificationRuleCreate",
    "NotificationRuleRead",
    "NotificationRuleUpdate",
    "NotificationUpdate",
    "NotificationUserRead",
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
