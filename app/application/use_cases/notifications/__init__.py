"""Use cases for generating and managing asset notifications."""

from .create_notification import create_notification
from .delete_notification import delete_notification
from .errors import (
    NotificationGenerationError,
    StoreReadFailure,
    StoreWriteFailure,
)
from .generate_notifications import (
    DEDUP_WINDOW,
    GenerationResult,
    compute_target_date,
    generate_notifications,
)
from .get_notification import get_notification
from .list_notifications import list_notifications
from .update_notification import update_notification

__all__ = [
    "DEDUP_WINDOW",
    "GenerationResult",
    "NotificationGenerationError",
    "StoreReadFailure",
    "StoreWriteFailure",
    "compute_target_date",
    "create_notification",
    "delete_notification",
    "generate_notifications",
    "get_notification",
    "list_notifications",
    "update_notification",
]
