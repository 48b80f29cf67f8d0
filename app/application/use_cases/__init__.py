"""Aggregate application use cases."""

from .notifications import generate_notifications
from .users import create_user

__all__ = [
    "create_user",
    "generate_notifications",
]
