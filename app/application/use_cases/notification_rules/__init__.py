"""Use cases for managing notification rules."""

from .create_notification_rule import create_notification_rule
from .delete_notification_rule import delete_notification_rule
from .get_notification_rule import get_notification_rule
from .list_notification_rules import list_notification_rules
from .update_notification_rule import update_notification_rule

__all__ = [
    "create_notification_rule",
    "delete_notification_rule",
    "get_notification_rule",
    "list_notification_rules",
    "update_notification_rule",
]
