"""Identifier helpers shared by the ORM models."""

from uuid import uuid4


def generate_id() -> str:
    """Return a new random identifier for a database row."""

    return uuid4().hex


__all__ = ["generate_id"]
