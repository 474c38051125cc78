# File: services/fee_calculator.py
from datetime import date
from typing import Any, Dict, List, Optional

from core.exceptions import ValidationFailed
from services.prescription_service import normalize_medicines
from services.price_estimator import estimate_price
from services.regulation_service import regulation_cache
from utils.helpers import round_half_up


def price_medicines(exam: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Chi tiết tiền thuốc theo từng dòng: đơn giá ước tính x số lượng."""
    lines = []
    for med in normalize_medicines((exam or {}).get("medicines")):
        unit_price = estimate_price(med["name"], med["unit"])
        lines.append({
            "id": med["id"],
            "name": med["name"],
            "unit": med["unit"],
            "quantity": med["quantity"],
            "unit_price": unit_price,
            "line_cost": round_half_up(unit_price * med["quantity"]),
        })
    return lines


def calculate_medicine_fee(exam: Dict[str, Any]) -> int:
    return sum(line["line_cost"] for line in price_medicines(exam))


def calculate_total(consultation_fee: int, medicine_fee: int, other_fees: int) -> int:
    return int(consultation_fee or 0) + int(medicine_fee or 0) + int(other_fees or 0)


class InvoiceDraft:
    """
    Hóa đơn đang lập (chưa lưu).

    Khi chưa chọn phiếu khám, tiền thuốc do người dùng nhập tay.
    Khi đã chọn phiếu khám, tiền thuốc luôn được tính lại từ đơn thuốc và
    không sửa tay được. Tổng tiền luôn tính lại từ 3 khoản.
    """

    def __init__(
        self,
        patient_id=None,
        patient_name: str = "",
        exam_date: Optional[date] = None,
        consultation_fee: Optional[int] = None,
        other_fees: int = 0,
    ):
        self.patient_id = patient_id
        self.patient_name = patient_name
        self.exam_date = exam_date or date.today()
        if consultation_fee is None:
            consultation_fee = regulation_cache.value("consultation_fee")
        self.consultation_fee = consultation_fee
        self.other_fees = other_fees
        self.examination: Optional[Dict[str, Any]] = None
        self._medicine_fee = 0

    @property
    def is_medicine_fee_locked(self) -> bool:
        return self.examination is not None

    @property
    def medicine_fee(self) -> int:
        return self._medicine_fee

    @medicine_fee.setter
    def medicine_fee(self, value: int):
        if self.is_medicine_fee_locked:
            raise ValidationFailed(["Tiền thuốc được tính tự động theo phiếu khám đã chọn"])
        self._medicine_fee = int(value or 0)

    @property
    def total_amount(self) -> int:
        return calculate_total(self.consultation_fee, self._medicine_fee, self.other_fees)

    def select_examination(self, exam: Dict[str, Any]) -> int:
        # Chọn phiếu khám khác -> bỏ giá trị cũ, tính lại từ đầu
        self.examination = exam
        if exam.get("patient_id"):
            self.patient_id = exam["patient_id"]
        if exam.get("patient_name"):
            self.patient_name = exam["patient_name"]
        if exam.get("exam_date"):
            self.exam_date = exam["exam_date"]
        return self.recalculate()

    def clear_examination(self):
        self.examination = None

    def recalculate(self) -> int:
        if self.examination is not None:
            self._medicine_fee = calculate_medicine_fee(self.examination)
        return self._medicine_fee

    def to_invoice_data(self) -> Dict[str, Any]:
        return {
            "patient_id": self.patient_id,
            "patient_name": self.patient_name,
            "examination_id": self.examination.get("id") if self.examination else None,
            "exam_date": self.exam_date,
            "consultation_fee": int(self.consultation_fee),
            "medicine_fee": self._medicine_fee,
            "other_fees": int(self.other_fees),
            "total_amount": self.total_amount,
            "is_paid": False,
        }
