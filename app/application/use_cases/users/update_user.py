"""Use case for updating users."""

from dataclasses import replace

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.repositories import UserRepository
from .validators import ensure_valid_role, normalize_email


def update_user(
    session: Session,
    user_id: str,
    *,
    name: str | None = None,
    email: str | None = None,
    role: str | None = None,
) -> User:
    """Update the provided fields of an existing user."""

    repository = UserRepository(session)
    current = repository.get(user_id)
    if current is None:
        raise ValueError("User not found")

    new_email = current.email
    if email is not None:
        new_email = normalize_email(email)
        existing = repository.get_by_email(new_email)
        if existing is not None and existing.id != user_id:
            raise ValueError("The email address is already registered")

    updated = replace(
        current,
        name=name.strip() if name is not None else current.name,
        email=new_email,
        role=ensure_valid_role(role) if role is not None else current.role,
    )
    return repository.update(updated)
