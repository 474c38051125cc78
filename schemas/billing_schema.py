from pydantic import BaseModel, Field
from typing import Optional, List, Union
from uuid import UUID
from datetime import date, datetime

# 1. Input tạo hóa đơn
class InvoiceCreate(BaseModel):
    patient_id: Optional[UUID] = None
    patient_name: str = ""
    exam_date: Optional[date] = None
    # Để trống -> lấy tiền khám theo quy định hiện hành
    consultation_fee: Optional[int] = Field(default=None, ge=0)
    # Bị bỏ qua nếu có examination_id (server tự tính lại)
    medicine_fee: int = Field(default=0, ge=0)
    other_fees: int = Field(default=0, ge=0)
    examination_id: Optional[UUID] = None

# 2. Xem trước tiền thuốc của một phiếu khám
class InvoicePreviewRequest(BaseModel):
    examination_id: UUID
    consultation_fee: Optional[int] = Field(default=None, ge=0)
    other_fees: int = Field(default=0, ge=0)

class MedicineCostLine(BaseModel):
    id: str
    name: str
    unit: str
    quantity: Union[int, float]
    unit_price: int
    line_cost: int

class InvoicePreviewResponse(BaseModel):
    examination_id: UUID
    patient_id: Optional[UUID] = None
    patient_name: str
    exam_date: date
    consultation_fee: int
    medicine_fee: int
    other_fees: int
    total_amount: int
    lines: List[MedicineCostLine] = []

# 3. Thanh toán
class PaymentRequest(BaseModel):
    payment_method: Optional[str] = None  # Mặc định: phương thức đầu tiên trong cấu hình

# 4. Output
class InvoiceResponse(BaseModel):
    id: UUID
    patient_id: UUID
    patient_name: str
    examination_id: Optional[UUID] = None
    exam_date: date
    consultation_fee: int
    medicine_fee: int
    other_fees: int
    total_amount: int
    is_paid: bool
    payment_date: Optional[date] = None
    payment_method: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
