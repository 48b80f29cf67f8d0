"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime

from ._ids import generate_id


class NotificationModel(Base):
    """Database representation for user notifications.

    ``user_id`` has no foreign key: rules may name recipients that are not
    registered users and those notifications are still stored.
    """

    __tablename__ = "notification"
    __table_args__ = (
        Index(
            "ix_notification_dedup",
            "asset_id",
            "user_id",
            "type",
            "created_at",
        ),
    )

    id = Column(String(36), primary_key=True, default=generate_id)
    asset_id = Column(
        String(36), ForeignKey("asset.id", ondelete="CASCADE"), nullable=False
    )
    user_id = Column(String(36), nullable=False, index=True)
    type = Column(String(40), nullable=False)
    title = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    is_read = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    scheduled_date = Column(DateTime, nullable=True)
    sent_date = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime,
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )

    asset = relationship("AssetModel", back_populates="notifications", lazy="joined")
    user = relationship(
        "UserModel",
        primaryjoin="foreign(NotificationModel.user_id) == UserModel.id",
        lazy="joined",
        viewonly=True,
    )


__all__ = ["NotificationModel"]
