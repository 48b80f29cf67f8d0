"""SQLAlchemy model for notification rules."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.sql import expression

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime

from ._ids import generate_id


class NotificationRuleModel(Base):
    """Database representation of a notification rule.

    ``notify_users`` keeps the recipient ids comma-joined.
    """

    __tablename__ = "notification_rule"

    id = Column(String(36), primary_key=True, default=generate_id)
    asset_type = Column(String(50), nullable=False, default="all")
    event_type = Column(String(40), nullable=False)
    days_in_advance = Column(Integer, nullable=False)
    notify_users = Column(Text, nullable=False, default="")
    email_enabled = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    app_enabled = Column(
        Boolean, nullable=False, default=True, server_default=expression.true()
    )
    active = Column(
        Boolean, nullable=False, default=True, server_default=expression.true(), index=True
    )
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime,
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )


__all__ = ["NotificationRuleModel"]
