from sqlalchemy import Column, String, Integer, Boolean, Date, Uuid
import uuid
from .base import Base, TimestampMixin


class Invoice(TimestampMixin, Base):
    __tablename__ = "invoices"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    patient_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    patient_name = Column(String(255), nullable=False, default="")
    # Phiếu khám dùng để tính tiền thuốc (nếu có)
    examination_id = Column(Uuid(as_uuid=True), nullable=True)
    exam_date = Column(Date, nullable=False, index=True)

    # Số tiền tính bằng VND (số nguyên)
    consultation_fee = Column(Integer, nullable=False, default=0)
    medicine_fee = Column(Integer, nullable=False, default=0)
    other_fees = Column(Integer, nullable=False, default=0)
    total_amount = Column(Integer, nullable=False, default=0)

    is_paid = Column(Boolean, default=False, nullable=False)
    payment_date = Column(Date, nullable=True)
    payment_method = Column(String(50), nullable=True)
