"""Endpoints and websocket handler for asset notifications."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import (
    APIRouter,
    Depends,
    HTTPException,
    Query,
    Response,
    WebSocket,
    WebSocketDisconnect,
    status,
)
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    NotificationGenerationError,
    create_notification as create_notification_uc,
    delete_notification as delete_notification_uc,
    generate_notifications as generate_notifications_uc,
    get_notification as get_notification_uc,
    list_notifications as list_notifications_uc,
    update_notification as update_notification_uc,
)
from app.domain.entities import Notification, UnsupportedEventTypeError
from app.infrastructure.database import SessionLocal, get_db
from app.infrastructure.notifications import notification_manager, serialize_notification
from app.infrastructure.repositories import NotificationRepository
from app.interfaces.api.routes_helpers import http_error_from_value_error
from app.interfaces.api.schemas import (
    NotificationCreate,
    NotificationGenerateResponse,
    NotificationRead,
    NotificationUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead.model_validate(notification)


def _notification_to_payload(notification: Notification) -> dict[str, Any]:
    return serialize_notification(notification)


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    user_id: str | None = Query(None, description="Only notifications for this user"),
    is_read: bool | None = Query(None, description="Filter by read state"),
    db: Session = Depends(get_db),
) -> list[NotificationRead]:
    """Return notifications newest first."""

    notifications = list_notifications_uc(db, user_id=user_id, is_read=is_read)
    return [_notification_to_schema(notification) for notification in notifications]


@router.post(
    "/", response_model=NotificationRead, status_code=status.HTTP_201_CREATED
)
def create_notification(
    payload: NotificationCreate, db: Session = Depends(get_db)
) -> NotificationRead:
    try:
        notification = create_notification_uc(db, **payload.model_dump())
    except ValueError as exc:
        raise http_error_from_value_error(exc) from exc
    return _notification_to_schema(notification)


@router.post("/generate", response_model=NotificationGenerateResponse)
def generate_notifications(db: Session = Depends(get_db)) -> NotificationGenerateResponse:
    """Run one generation pass and return the notifications it created."""

    try:
        result = generate_notifications_uc(db)
    except (NotificationGenerationError, UnsupportedEventTypeError) as exc:
        logger.exception("Notification generation failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate notifications",
        ) from exc

    return NotificationGenerateResponse(
        success=True,
        count=result.count,
        notifications=[
            _notification_to_schema(notification) for notification in result.notifications
        ],
    )


@router.get("/{notification_id}", response_model=NotificationRead)
def read_notification(
    notification_id: str, db: Session = Depends(get_db)
) -> NotificationRead:
    try:
        notification = get_notification_uc(db, notification_id)
    except ValueError as exc:
        raise http_error_from_value_error(exc) from exc
    return _notification_to_schema(notification)


@router.patch("/{notification_id}", response_model=NotificationRead)
def update_notification(
    notification_id: str,
    payload: NotificationUpdate,
    db: Session = Depends(get_db),
) -> NotificationRead:
    try:
        notification = update_notification_uc(
            db, notification_id=notification_id, is_read=payload.is_read
        )
    except ValueError as exc:
        raise http_error_from_value_error(exc) from exc
    return _notification_to_schema(notification)


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_notification(notification_id: str, db: Session = Depends(get_db)) -> Response:
    try:
        delete_notification_uc(db, notification_id)
    except ValueError as exc:
        raise http_error_from_value_error(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.websocket("/ws")
async def notifications_websocket(websocket: WebSocket) -> None:
    """Websocket endpoint that streams new notifications to one user."""

    user_id = (websocket.query_params.get("user_id") or "").strip()
    if not user_id:
        await websocket.close(code=1008)
        return

    session = SessionLocal()
    try:
        pending_notifications = NotificationRepository(session).list_unread_for_user(
            user_id
        )
    except SQLAlchemyError:
        logger.exception("Failed to load unread notifications for user %s", user_id)
        await websocket.close(code=1011)
        return
    finally:
        session.close()

    await notification_manager.connect(user_id, websocket)
    try:
        if pending_notifications:
            await websocket.send_json(
                {
                    "type": "init",
                    "data": [_notification_to_payload(n) for n in pending_notifications],
                }
            )
        while True:
            try:
                message = await websocket.receive_json()
            except WebSocketDisconnect:
                raise
            except ValueError:
                continue

            if not isinstance(message, dict):
                continue

            message_type = message.get("type")
            if message_type == "ping":
                await websocket.send_json({"type": "pong"})
                continue

            if message_type == "ack":
                ids = message.get("ids", [])
                if isinstance(ids, list) and ids:
                    ack_session = SessionLocal()
                    try:
                        NotificationRepository(ack_session).mark_as_read(
                            [str(value) for value in ids], user_id=user_id
                        )
                    finally:
                        ack_session.close()
                continue
    except WebSocketDisconnect:
        notification_manager.disconnect(user_id, websocket)
    except Exception:  # pragma: no cover - depends on client state
        notification_manager.disconnect(user_id, websocket)
        raise
