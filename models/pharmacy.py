from sqlalchemy import Column, String, Integer, Date, Text, Uuid
import uuid
from .base import Base, TimestampMixin


class Medicine(TimestampMixin, Base):
    """Danh mục thuốc trong kho của phòng khám."""
    __tablename__ = "medicines"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    unit = Column(String(20), nullable=False)
    quantity = Column(Integer, default=0)
    usage = Column(Text, default="")
    expiry_date = Column(Date, nullable=True)
    pharmacy = Column(String(255), default="")
    price = Column(Integer, default=0)
