"""Routes for managing notification rules."""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.notification_rules import (
    create_notification_rule as create_rule_uc,
    delete_notification_rule as delete_rule_uc,
    get_notification_rule as get_rule_uc,
    list_notification_rules as list_rules_uc,
    update_notification_rule as update_rule_uc,
)
from app.domain.entities import NotificationRule
from app.infrastructure.database import get_db
from app.interfaces.api.routes_helpers import http_error_from_value_error
from app.interfaces.api.schemas import (
    NotificationRuleCreate,
    NotificationRuleRead,
    NotificationRuleUpdate,
)

router = APIRouter(prefix="/notification-rules", tags=["notification-rules"])


def _to_read_model(rule: NotificationRule) -> NotificationRuleRead:
    return NotificationRuleRead.model_validate(rule)


@router.get("/", response_model=list[NotificationRuleRead])
def list_rules(
    active_only: bool = Query(False, description="Return only the active rules"),
    db: Session = Depends(get_db),
) -> list[NotificationRuleRead]:
    return [_to_read_model(rule) for rule in list_rules_uc(db, active_only=active_only)]


@router.post(
    "/", response_model=NotificationRuleRead, status_code=status.HTTP_201_CREATED
)
def create_rule(
    payload: NotificationRuleCreate, db: Session = Depends(get_db)
) -> NotificationRuleRead:
    """Create a rule that the generation job will evaluate on its next run."""

    try:
        rule = create_rule_uc(db, **payload.model_dump())
    except ValueError as exc:
        raise http_error_from_value_error(exc) from exc
    return _to_read_model(rule)


@router.get("/{rule_id}", response_model=NotificationRuleRead)
def read_rule(rule_id: str, db: Session = Depends(get_db)) -> NotificationRuleRead:
    try:
        rule = get_rule_uc(db, rule_id)
    except ValueError as exc:
        raise http_error_from_value_error(exc) from exc
    return _to_read_model(rule)


@router.put("/{rule_id}", response_model=NotificationRuleRead)
def update_rule(
    rule_id: str, payload: NotificationRuleUpdate, db: Session = Depends(get_db)
) -> NotificationRuleRead:
    try:
        rule = update_rule_uc(db, rule_id=rule_id, **payload.model_dump())
    except ValueError as exc:
        raise http_error_from_value_error(exc) from exc
    return _to_read_model(rule)


@router.delete("/{rule_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_rule(rule_id: str, db: Session = Depends(get_db)) -> Response:
    try:
        delete_rule_uc(db, rule_id)
    except ValueError as exc:
        raise http_error_from_value_error(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
