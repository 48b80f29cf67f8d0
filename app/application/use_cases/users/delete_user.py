"""Use case for deleting users."""

from sqlalchemy.orm import Session

from app.infrastructure.repositories import AssetRepository, UserRepository


def delete_user(session: Session, user_id: str) -> None:
    """Delete a user that no longer purchases or holds any asset."""

    repository = UserRepository(session)
    if repository.get(user_id) is None:
        raise ValueError("User not found")
    if AssetRepository(session).list(user_id=user_id):
        raise ValueError("Cannot delete a user who purchased or holds assets")
    repository.delete(user_id)
