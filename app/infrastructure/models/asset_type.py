"""SQLAlchemy model for asset categories."""

from sqlalchemy import Column, DateTime, Integer, String, Text

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime

from ._ids import generate_id


class AssetTypeModel(Base):
    """Database representation of an asset type."""

    __tablename__ = "asset_type"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(50), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=True)
    default_depreciation_period = Column(Integer, nullable=True)
    required_fields = Column(Text, nullable=True)
    optional_fields = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime,
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )


__all__ = ["AssetTypeModel"]
