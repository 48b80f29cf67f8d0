"""Domain entities exposed by the application."""

from .asset import (
    ASSET_STATUS_ACTIVE,
    ASSET_STATUS_DISPOSED,
    ASSET_STATUS_EXPIRED,
    Asset,
)
from .asset_type import ALL_ASSET_TYPES, RENTAL_ASSET_TYPE, AssetType
from .notification import (
    Notification,
    NotificationAssetSummary,
    NotificationUserSummary,
)
from .notification_rule import (
    NotificationEventType,
    NotificationRule,
    UnsupportedEventTypeError,
    join_notify_users,
    parse_notify_users,
)
from .user import User

__all__ = [
    "ALL_ASSET_TYPES",
    "ASSET_STATUS_ACTIVE",
    "ASSET_STATUS_DISPOSED",
    "ASSET_STATUS_EXPIRED",
    "Asset",
    "AssetType",
    "Notification",
    "NotificationAssetSummary",
    "NotificationEventType",
    "NotificationRule",
    "NotificationUserSummary",
    "RENTAL_ASSET_TYPE",
    "UnsupportedEventTypeError",
    "User",
    "join_notify_users",
    "parse_notify_users",
]
