"""SQLAlchemy model for tracked assets."""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime

from ._ids import generate_id


class AssetModel(Base):
    """Database representation of an organizational asset."""

    __tablename__ = "asset"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    serial_number = Column(String(120), nullable=True)
    asset_type_id = Column(
        String(36), ForeignKey("asset_type.id"), nullable=False, index=True
    )
    purchase_date = Column(DateTime, nullable=False)
    purchase_price = Column(Float, nullable=True)
    currency = Column(String(10), nullable=False, default="JPY")
    purchased_by_id = Column(String(36), ForeignKey("user.id"), nullable=False)
    current_user_id = Column(String(36), ForeignKey("user.id"), nullable=False)
    status = Column(String(30), nullable=False, default="active", index=True)
    location = Column(String(200), nullable=True)
    notes = Column(Text, nullable=True)
    warranty_expiry_date = Column(DateTime, nullable=True, index=True)
    depreciation_period = Column(Integer, nullable=True)
    renewal_date = Column(DateTime, nullable=True, index=True)
    license_key = Column(String(255), nullable=True)
    tags = Column(String(255), nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime,
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )

    asset_type = relationship("AssetTypeModel", lazy="joined")
    purchased_by = relationship(
        "UserModel", foreign_keys=[purchased_by_id], lazy="joined"
    )
    current_user = relationship(
        "UserModel", foreign_keys=[current_user_id], lazy="joined"
    )
    notifications = relationship(
        "NotificationModel",
        back_populates="asset",
        cascade="all, delete-orphan",
    )


__all__ = ["AssetModel"]
