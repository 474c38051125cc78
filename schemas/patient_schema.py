from pydantic import BaseModel
from typing import Optional
from uuid import UUID
from datetime import date, datetime
from models.enums import Gender, PatientStatus

# --- INPUT ---
# Các trường để kiểu lỏng (mặc định rỗng) để service gom đủ thông báo lỗi một lần
class PatientCreate(BaseModel):
    name: str = ""
    gender: str = ""
    date_of_birth: Optional[date] = None
    address: str = ""
    phone_number: str = ""
    registration_date: Optional[date] = None  # Mặc định là hôm nay

# Không có registration_date/registration_time: hai trường này không sửa được
class PatientUpdate(BaseModel):
    name: Optional[str] = None
    gender: Optional[str] = None
    date_of_birth: Optional[date] = None
    address: Optional[str] = None
    phone_number: Optional[str] = None

class PatientStatusUpdate(BaseModel):
    status: str

# --- OUTPUT ---
class PatientResponse(BaseModel):
    id: UUID
    name: str
    gender: Gender
    date_of_birth: Optional[date] = None
    address: Optional[str] = ""
    phone_number: str
    registration_date: date
    registration_time: Optional[str] = None
    status: PatientStatus = PatientStatus.WAITING
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
