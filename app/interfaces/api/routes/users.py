"""Routes for managing users."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.users import (
    create_user as create_user_uc,
    delete_user as delete_user_uc,
    get_user as get_user_uc,
    list_users as list_users_uc,
    update_user as update_user_uc,
)
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.interfaces.api.routes_helpers import http_error_from_value_error
from app.interfaces.api.schemas import UserCreate, UserRead, UserUpdate

router = APIRouter(prefix="/users", tags=["users"])


def _to_read_model(user: User) -> UserRead:
    return UserRead.model_validate(user)


@router.get("/", response_model=list[UserRead])
def list_users(db: Session = Depends(get_db)) -> list[UserRead]:
    """Return every user ordered by name."""

    return [_to_read_model(user) for user in list_users_uc(db)]


@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(user_in: UserCreate, db: Session = Depends(get_db)) -> UserRead:
    """Register a user who can own assets or receive notifications."""

    try:
        user = create_user_uc(
            db, name=user_in.name, email=user_in.email, role=user_in.role
        )
    except ValueError as exc:
        raise http_error_from_value_error(exc) from exc
    return _to_read_model(user)


@router.get("/{user_id}", response_model=UserRead)
def read_user(user_id: str, db: Session = Depends(get_db)) -> UserRead:
    try:
        user = get_user_uc(db, user_id)
    except ValueError as exc:
        raise http_error_from_value_error(exc) from exc
    return _to_read_model(user)


@router.put("/{user_id}", response_model=UserRead)
def update_user(
    user_id: str, user_in: UserUpdate, db: Session = Depends(get_db)
) -> UserRead:
    try:
        user = update_user_uc(
            db,
            user_id,
            name=user_in.name,
            email=user_in.email,
            role=user_in.role,
        )
    except ValueError as exc:
        raise http_error_from_value_error(exc) from exc
    return _to_read_model(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: str, db: Session = Depends(get_db)) -> Response:
    try:
        delete_user_uc(db, user_id)
    except ValueError as exc:
        raise http_error_from_value_error(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
