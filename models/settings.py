from sqlalchemy import Column, String, JSON, DateTime
from datetime import datetime
from .base import Base


class Setting(Base):
    """Bảng cấu hình dạng key/value (VD: key='regulations')."""
    __tablename__ = "settings"

    key = Column(String(50), primary_key=True)
    value = Column(JSON, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
