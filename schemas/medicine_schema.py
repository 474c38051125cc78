from pydantic import BaseModel, Field
from typing import Optional
from uuid import UUID
from datetime import date

class MedicineCreate(BaseModel):
    name: str = ""
    unit: str = ""
    quantity: int = Field(default=0, ge=0)
    usage: str = ""
    expiry_date: Optional[date] = None
    pharmacy: str = ""
    price: int = Field(default=0, ge=0)

class MedicineUpdate(BaseModel):
    name: Optional[str] = None
    unit: Optional[str] = None
    quantity: Optional[int] = Field(default=None, ge=0)
    usage: Optional[str] = None
    expiry_date: Optional[date] = None
    pharmacy: Optional[str] = None
    price: Optional[int] = Field(default=None, ge=0)

class MedicineResponse(BaseModel):
    id: UUID
    name: str
    unit: str
    quantity: int = 0
    usage: Optional[str] = ""
    expiry_date: Optional[date] = None
    pharmacy: Optional[str] = ""
    price: int = 0

    class Config:
        from_attributes = True
