import logging
from typing import Any, Dict, List
from uuid import UUID

from sqlalchemy.orm import Session

from core.config import MEDICINE_UNITS
from core.exceptions import NotFoundError, ValidationFailed
from models.pharmacy import Medicine
from repositories.medicine_repo import MedicineRepository

logger = logging.getLogger(__name__)


def validate_medicine_data(data: Dict[str, Any]) -> List[str]:
    errors = []
    if not (data.get("name") or "").strip():
        errors.append("Tên thuốc không được để trống")
    if data.get("unit") not in MEDICINE_UNITS:
        errors.append(f"Đơn vị tính phải là một trong: {', '.join(MEDICINE_UNITS)}")
    return errors


class MedicineService:
    """Danh mục thuốc trong kho (độc lập với bảng giá ước tính khi lập hóa đơn)."""

    def __init__(self, db: Session):
        self.repo = MedicineRepository(db)

    def add(self, data: Dict[str, Any]) -> Medicine:
        errors = validate_medicine_data(data)
        if errors:
            raise ValidationFailed(errors)
        new_id = self.repo.insert({**data, "name": data["name"].strip()})
        logger.info("✅ Đã thêm thuốc %s vào danh mục", data["name"])
        return self.repo.get_by_id(new_id)

    def list_all(self) -> List[Medicine]:
        return sorted(self.repo.list_all(), key=lambda m: m.name.lower())

    def get(self, medicine_id: UUID) -> Medicine:
        medicine = self.repo.get_by_id(medicine_id)
        if not medicine:
            raise NotFoundError("Không tìm thấy thuốc")
        return medicine

    def update(self, medicine_id: UUID, fields: Dict[str, Any]) -> Medicine:
        medicine = self.get(medicine_id)
        changes = {k: v for k, v in fields.items() if v is not None}
        errors = validate_medicine_data({"name": medicine.name, "unit": medicine.unit, **changes})
        if errors:
            raise ValidationFailed(errors)
        self.repo.update(medicine_id, changes)
        return self.repo.get_by_id(medicine_id)

    def delete(self, medicine_id: UUID):
        if not self.repo.delete(medicine_id):
            raise NotFoundError("Không tìm thấy thuốc")
