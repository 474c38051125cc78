import logging
from datetime import date
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from core.config import PAYMENT_METHODS
from core.exceptions import NotFoundError, PersistenceError, ValidationFailed
from models.billing import Invoice
from models.enums import PatientStatus
from repositories.billing_repo import InvoiceRepository
from repositories.medical_repo import PatientRepository
from services.fee_calculator import InvoiceDraft, price_medicines
from services.medical_service import ExaminationService

logger = logging.getLogger(__name__)


class InvoiceService:
    def __init__(self, db: Session):
        self.repo = InvoiceRepository(db)
        self.patient_repo = PatientRepository(db)
        self.exam_service = ExaminationService(db)

    def _load_examination(self, examination_id: UUID) -> Dict[str, Any]:
        try:
            return self.exam_service.get(examination_id)
        except NotFoundError:
            raise ValidationFailed(["Phiếu khám đã chọn không tồn tại"])

    # --- 1. XEM TRƯỚC ---
    def preview(
        self,
        examination_id: UUID,
        consultation_fee: Optional[int] = None,
        other_fees: int = 0,
    ) -> Dict[str, Any]:
        exam = self.exam_service.get(examination_id)
        draft = InvoiceDraft(consultation_fee=consultation_fee, other_fees=other_fees)
        draft.select_examination(exam)
        return {
            "examination_id": exam["id"],
            "patient_id": draft.patient_id,
            "patient_name": draft.patient_name,
            "exam_date": draft.exam_date,
            "consultation_fee": draft.consultation_fee,
            "medicine_fee": draft.medicine_fee,
            "other_fees": draft.other_fees,
            "total_amount": draft.total_amount,
            "lines": price_medicines(exam),
        }

    # --- 2. LẬP HÓA ĐƠN ---
    def create(self, data: Dict[str, Any]) -> Invoice:
        draft = InvoiceDraft(
            patient_id=data.get("patient_id"),
            patient_name=(data.get("patient_name") or "").strip(),
            exam_date=data.get("exam_date"),
            consultation_fee=data.get("consultation_fee"),
            other_fees=data.get("other_fees") or 0,
        )
        if data.get("examination_id"):
            # Tiền thuốc tính lại từ đơn thuốc, bỏ qua giá trị client gửi lên
            draft.select_examination(self._load_examination(data["examination_id"]))
        else:
            draft.medicine_fee = data.get("medicine_fee") or 0

        errors = []
        if not draft.patient_id:
            errors.append("Vui lòng chọn bệnh nhân")
        if not data.get("exam_date") and not draft.examination:
            errors.append("Ngày khám không được để trống")
        if errors:
            raise ValidationFailed(errors)

        new_id = self.repo.insert(draft.to_invoice_data())
        logger.info("✅ Đã lập hóa đơn %s, tổng tiền %d", new_id, draft.total_amount)

        # Bước phụ: đưa bệnh nhân ra khỏi danh sách chờ. Lỗi ở đây không hủy hóa đơn.
        try:
            if not self.patient_repo.update(draft.patient_id, {"status": PatientStatus.PROCESSED}):
                logger.warning("⚠️ Không tìm thấy bệnh nhân %s để cập nhật trạng thái", draft.patient_id)
        except PersistenceError as e:
            logger.warning("⚠️ Không cập nhật được trạng thái bệnh nhân %s: %s", draft.patient_id, e)

        return self.repo.get_by_id(new_id)

    # --- 3. THANH TOÁN ---
    def mark_paid(self, invoice_id: UUID, payment_method: Optional[str] = None) -> Invoice:
        invoice = self.get(invoice_id)
        if invoice.is_paid:
            raise ValidationFailed(["Hóa đơn đã được thanh toán"])

        method = payment_method or PAYMENT_METHODS[0]
        if method not in PAYMENT_METHODS:
            raise ValidationFailed([f"Phương thức thanh toán không hợp lệ: {method}"])

        self.repo.update(invoice_id, {
            "is_paid": True,
            "payment_date": date.today(),
            "payment_method": method,
        })
        logger.info("💰 Hóa đơn %s đã thanh toán (%s)", invoice_id, method)
        return self.repo.get_by_id(invoice_id)

    # --- 4. TRA CỨU ---
    def get(self, invoice_id: UUID) -> Invoice:
        invoice = self.repo.get_by_id(invoice_id)
        if not invoice:
            raise NotFoundError("Không tìm thấy hóa đơn")
        return invoice

    def list_all(self) -> List[Invoice]:
        return self.repo.list_all()

    def list_by_patient(self, patient_id: UUID) -> List[Invoice]:
        return sorted(self.repo.get_by_patient(patient_id), key=lambda i: i.exam_date, reverse=True)
