from sqlalchemy import Column, String, Date, Text, JSON, Enum, Uuid
import uuid
from .base import Base, TimestampMixin
from .enums import Gender, PatientStatus


class Patient(TimestampMixin, Base):
    __tablename__ = "patients"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    gender = Column(Enum(Gender, values_callable=lambda x: [e.value for e in x]), nullable=False)
    date_of_birth = Column(Date)
    address = Column(Text, default="")
    phone_number = Column(String(20), nullable=False)
    # Ngày/giờ tiếp nhận: gán khi tạo, không sửa được
    registration_date = Column(Date, nullable=False, index=True)
    registration_time = Column(String(8))
    status = Column(
        Enum(PatientStatus, values_callable=lambda x: [e.value for e in x]),
        default=PatientStatus.WAITING,
    )


class Examination(TimestampMixin, Base):
    __tablename__ = "examinations"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    # Không khai báo ForeignKey: hồ sơ chỉ liên kết qua patient_id, không cascade
    patient_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    # Bản chụp tên bệnh nhân tại thời điểm khám, có thể khác Patient.name về sau
    patient_name = Column(String(255), nullable=False)
    exam_date = Column(Date, nullable=False, index=True)
    symptoms = Column(Text, default="")
    diagnosis = Column(Text, default="")
    # Danh sách thuốc kê đơn [{id, name, unit, quantity, usage}, ...]
    medicines = Column(JSON, default=list)
