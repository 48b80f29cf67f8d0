"""ORM models used by the application infrastructure."""

from .asset import AssetModel
from .asset_type import AssetTypeModel
from .notification import NotificationModel
from .notification_rule import NotificationRuleModel
from .user import UserModel

__all__ = [
    "AssetModel",
    "AssetTypeModel",
    "NotificationModel",
    "NotificationRuleModel",
    "UserModel",
]
