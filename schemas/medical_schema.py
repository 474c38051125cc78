from pydantic import BaseModel, Field
from typing import Optional, List, Union
from uuid import UUID
from datetime import date, datetime

# 1. Dòng thuốc trong đơn
class PrescriptionItemCreate(BaseModel):
    id: Optional[str] = None     # Client có thể tự sinh (timestamp); thiếu thì server sinh
    name: str = ""
    unit: str = ""
    quantity: int = Field(default=1, ge=0)
    usage: Optional[str] = None

class PrescriptionItem(BaseModel):
    id: str
    name: str
    unit: str
    quantity: Union[int, float]
    usage: str

# 2. Phiếu khám bệnh
class ExaminationCreate(BaseModel):
    patient_id: Optional[UUID] = None
    patient_name: str = ""
    exam_date: Optional[date] = None  # Mặc định là hôm nay
    symptoms: str = ""
    diagnosis: str = ""
    medicines: List[PrescriptionItemCreate] = []

class ExaminationResponse(BaseModel):
    id: UUID
    patient_id: UUID
    patient_name: str
    exam_date: date
    symptoms: Optional[str] = ""
    diagnosis: Optional[str] = ""
    medicines: List[PrescriptionItem] = []
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

# 3. Dữ liệu gợi ý cho form khám bệnh (chẩn đoán, thuốc thông dụng)
class CommonMedicine(BaseModel):
    name: str
    unit: str
    default_usage: str

class ExaminationPresets(BaseModel):
    medicine_units: List[str]
    common_diagnoses: List[str]
    common_medicines: List[CommonMedicine]
    default_medicine_quantity: int
