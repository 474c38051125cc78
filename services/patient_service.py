import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from core.exceptions import NotFoundError, ValidationFailed
from models.enums import Gender, PatientStatus
from models.medical import Patient
from repositories.medical_repo import PatientRepository
from services.regulation_service import regulation_cache
from utils.helpers import is_valid_phone_number

logger = logging.getLogger(__name__)

GENDER_VALUES = [g.value for g in Gender]
STATUS_VALUES = [s.value for s in PatientStatus]


def validate_patient_data(data: Dict[str, Any]) -> List[str]:
    """Kiểm tra hồ sơ tiếp nhận, trả về toàn bộ lỗi (list rỗng = hợp lệ)."""
    errors = []

    if not (data.get("name") or "").strip():
        errors.append("Họ và tên không được để trống")

    gender = data.get("gender")
    if isinstance(gender, Gender):
        gender = gender.value
    if not gender:
        errors.append("Giới tính không được để trống")
    elif gender not in GENDER_VALUES:
        errors.append("Giới tính phải là Nam hoặc Nữ")

    if not data.get("date_of_birth"):
        errors.append("Ngày sinh không được để trống")

    phone = (data.get("phone_number") or "").strip()
    if not phone:
        errors.append("Số điện thoại không được để trống")
    elif not is_valid_phone_number(phone):
        errors.append("Số điện thoại phải có 10 số và bắt đầu bằng số 0")

    return errors


class PatientService:
    def __init__(self, db: Session):
        self.repo = PatientRepository(db)

    # --- 1. TIẾP NHẬN ---
    def register_patient(self, data: Dict[str, Any]) -> Patient:
        errors = validate_patient_data(data)
        if errors:
            raise ValidationFailed(errors)

        registration_date = data.get("registration_date") or date.today()

        # Giới hạn tính trên danh sách chờ của ngày tiếp nhận
        max_patients = regulation_cache.value("max_patients_per_day")
        waiting = self.repo.get_waiting_patients(registration_date)
        if len(waiting) >= max_patients:
            raise ValidationFailed([
                f"Không thể thêm bệnh nhân. Đã đạt giới hạn số lượng tối đa ({max_patients}) trong ngày."
            ])

        new_id = self.repo.insert({
            "name": data["name"].strip(),
            "gender": Gender(data["gender"]),
            "date_of_birth": data["date_of_birth"],
            "address": (data.get("address") or "").strip(),
            "phone_number": data["phone_number"].strip(),
            "registration_date": registration_date,
            "registration_time": datetime.now().strftime("%H:%M:%S"),
            "status": PatientStatus.WAITING,
        })
        logger.info("✅ Đã tiếp nhận bệnh nhân %s", new_id)
        return self.repo.get_by_id(new_id)

    # --- 2. DANH SÁCH ---
    def list_waiting(self, registration_date: Optional[date] = None) -> List[Patient]:
        return self.repo.get_waiting_patients(registration_date or date.today())

    def list_by_date(self, registration_date: Optional[date] = None) -> List[Patient]:
        return self.repo.get_patients_by_date(registration_date or date.today())

    def search(self, term: str) -> List[Patient]:
        term = (term or "").strip()
        if not term:
            return []
        lowered = term.lower()
        return [
            p for p in self.repo.list_all()
            if lowered in (p.name or "").lower() or term in (p.phone_number or "")
        ]

    def get(self, patient_id: UUID) -> Patient:
        patient = self.repo.get_by_id(patient_id)
        if not patient:
            raise NotFoundError("Không tìm thấy bệnh nhân")
        return patient

    # --- 3. CẬP NHẬT / XÓA ---
    def update(self, patient_id: UUID, fields: Dict[str, Any]) -> Patient:
        patient = self.get(patient_id)

        # Ngày/giờ tiếp nhận không sửa được
        changes = {
            k: v for k, v in fields.items()
            if v is not None and k not in ("registration_date", "registration_time")
        }
        merged = {
            "name": patient.name,
            "gender": patient.gender,
            "date_of_birth": patient.date_of_birth,
            "phone_number": patient.phone_number,
            **changes,
        }
        errors = validate_patient_data(merged)
        if errors:
            raise ValidationFailed(errors)

        if "gender" in changes:
            changes["gender"] = Gender(changes["gender"])
        for key in ("name", "address", "phone_number"):
            if key in changes:
                changes[key] = changes[key].strip()

        self.repo.update(patient_id, changes)
        return self.repo.get_by_id(patient_id)

    def update_status(self, patient_id: UUID, status: str) -> Patient:
        if status not in STATUS_VALUES:
            raise ValidationFailed([f"Trạng thái không hợp lệ: {status}"])
        if not self.repo.update(patient_id, {"status": PatientStatus(status)}):
            raise NotFoundError("Không tìm thấy bệnh nhân")
        return self.repo.get_by_id(patient_id)

    def delete(self, patient_id: UUID):
        if not self.repo.delete(patient_id):
            raise NotFoundError("Không tìm thấy bệnh nhân")
        logger.info("🗑️ Đã xóa bệnh nhân %s", patient_id)
