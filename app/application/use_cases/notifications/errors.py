"""Errors raised while generating notifications."""

from __future__ import annotations


class NotificationGenerationError(RuntimeError):
    """Base error for a generation pass that could not run to completion."""


class StoreReadFailure(NotificationGenerationError):
    """A rule, asset or notification lookup failed."""


class StoreWriteFailure(NotificationGenerationError):
    """A notification could not be persisted."""


__all__ = [
    "NotificationGenerationError",
    "StoreReadFailure",
    "StoreWriteFailure",
]
