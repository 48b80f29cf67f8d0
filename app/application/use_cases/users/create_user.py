"""Use case for creating users."""

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.repositories import UserRepository
from .validators import ensure_valid_role, normalize_email


def create_user(
    session: Session,
    *,
    name: str,
    email: str,
    role: str = "user",
) -> User:
    """Create a new user ensuring unique email addresses."""

    repository = UserRepository(session)
    normalized_email = normalize_email(email)
    if repository.get_by_email(normalized_email):
        raise ValueError("The email address is already registered")

    user = User(
        id=None,
        name=name.strip(),
        email=normalized_email,
        role=ensure_valid_role(role),
    )
    return repository.create(user)
