from datetime import datetime
from sqlalchemy import Column, DateTime
from sqlalchemy.orm import declarative_base


class _ModelBase:
    def to_dict(self) -> dict:
        return {c.name: getattr(self, c.name) for c in self.__table__.columns}


Base = declarative_base(cls=_ModelBase)


class TimestampMixin:
    # Thời điểm tạo/cập nhật do server gán khi ghi
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
