"""Repository implementations for infrastructure layer."""

from .asset_repository import AssetRepository
from .asset_type_repository import AssetTypeRepository
from .notification_repository import NotificationRepository
from .notification_rule_repository import NotificationRuleRepository
from .user_repository import UserRepository

__all__ = [
    "AssetRepository",
    "AssetTypeRepository",
    "NotificationRepository",
    "NotificationRuleRepository",
    "UserRepository",
]
