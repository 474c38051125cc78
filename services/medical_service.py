import logging
from datetime import date
from typing import Any, Dict, List
from uuid import UUID

from sqlalchemy.orm import Session

from core.config import (
    COMMON_DIAGNOSES,
    COMMON_MEDICINES,
    DEFAULT_MEDICINE_QUANTITY,
    DEFAULT_MEDICINE_USAGE,
    MEDICINE_UNITS,
)
from core.exceptions import NotFoundError, ValidationFailed
from repositories.medical_repo import ExaminationRepository
from services.prescription_service import normalize_examination
from utils.helpers import generate_id

logger = logging.getLogger(__name__)


def validate_prescription(medicines: List[Dict[str, Any]]) -> List[str]:
    errors = []
    for index, med in enumerate(medicines, start=1):
        if not (med.get("name") or "").strip():
            errors.append(f"Thuốc thứ {index}: tên thuốc không được để trống")
        if med.get("unit") not in MEDICINE_UNITS:
            errors.append(f"Thuốc thứ {index}: đơn vị tính không hợp lệ")
        quantity = med.get("quantity", 1)
        if isinstance(quantity, bool) or not isinstance(quantity, (int, float)) or quantity < 0:
            errors.append(f"Thuốc thứ {index}: số lượng phải là số không âm")
    return errors


def validate_examination_data(data: Dict[str, Any]) -> List[str]:
    errors = []
    if not data.get("patient_id"):
        errors.append("Vui lòng chọn bệnh nhân")
    if not (data.get("patient_name") or "").strip():
        errors.append("Tên bệnh nhân không được để trống")
    if not (data.get("symptoms") or "").strip():
        errors.append("Triệu chứng không được để trống")
    if not (data.get("diagnosis") or "").strip():
        errors.append("Chẩn đoán không được để trống")
    errors.extend(validate_prescription(data.get("medicines") or []))
    return errors


class ExaminationService:
    """Lập và tra cứu phiếu khám. Phiếu khám chỉ tạo một lần, không sửa, không xóa."""

    def __init__(self, db: Session):
        self.repo = ExaminationRepository(db)

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        errors = validate_examination_data(data)
        if errors:
            raise ValidationFailed(errors)

        medicines = []
        for med in data.get("medicines") or []:
            medicines.append({
                "id": (med.get("id") or "").strip() or generate_id(),
                "name": med["name"].strip(),
                "unit": med["unit"],
                "quantity": med.get("quantity", 1),
                "usage": (med.get("usage") or "").strip() or DEFAULT_MEDICINE_USAGE,
            })

        new_id = self.repo.insert({
            "patient_id": data["patient_id"],
            "patient_name": data["patient_name"].strip(),
            "exam_date": data.get("exam_date") or date.today(),
            "symptoms": data["symptoms"].strip(),
            "diagnosis": data["diagnosis"].strip(),
            "medicines": medicines,
        })
        logger.info("✅ Đã lưu phiếu khám %s (%d thuốc)", new_id, len(medicines))
        return self.get(new_id)

    # Mọi thao tác đọc đều trả về phiếu khám đã chuẩn hóa đơn thuốc
    def get(self, exam_id: UUID) -> Dict[str, Any]:
        exam = self.repo.get_by_id(exam_id)
        if not exam:
            raise NotFoundError("Không tìm thấy phiếu khám")
        return normalize_examination(exam.to_dict())

    def list_all(self) -> List[Dict[str, Any]]:
        return [normalize_examination(e.to_dict()) for e in self.repo.list_all()]

    def list_by_patient(self, patient_id: UUID) -> List[Dict[str, Any]]:
        exams = [normalize_examination(e.to_dict()) for e in self.repo.get_by_patient(patient_id)]
        return sorted(exams, key=lambda e: e["exam_date"], reverse=True)

    @staticmethod
    def get_presets() -> Dict[str, Any]:
        return {
            "medicine_units": list(MEDICINE_UNITS),
            "common_diagnoses": list(COMMON_DIAGNOSES),
            "common_medicines": [dict(m) for m in COMMON_MEDICINES],
            "default_medicine_quantity": DEFAULT_MEDICINE_QUANTITY,
        }
