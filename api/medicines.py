from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from core.database import get_db
from core.exceptions import NotFoundError, ValidationFailed
from schemas.medicine_schema import MedicineCreate, MedicineUpdate, MedicineResponse
from services.medicine_service import MedicineService

router = APIRouter()

@router.post("", response_model=MedicineResponse, status_code=201)
def add_medicine(req: MedicineCreate, db: Session = Depends(get_db)):
    try:
        return MedicineService(db).add(req.model_dump())
    except ValidationFailed as e:
        raise HTTPException(status_code=400, detail=e.errors)

@router.get("", response_model=List[MedicineResponse])
def list_medicines(db: Session = Depends(get_db)):
    return MedicineService(db).list_all()

@router.get("/{medicine_id}", response_model=MedicineResponse)
def get_medicine(medicine_id: UUID, db: Session = Depends(get_db)):
    try:
        return MedicineService(db).get(medicine_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.put("/{medicine_id}", response_model=MedicineResponse)
def update_medicine(medicine_id: UUID, req: MedicineUpdate, db: Session = Depends(get_db)):
    try:
        return MedicineService(db).update(medicine_id, req.model_dump(exclude_unset=True))
    except ValidationFailed as e:
        raise HTTPException(status_code=400, detail=e.errors)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.delete("/{medicine_id}")
def delete_medicine(medicine_id: UUID, db: Session = Depends(get_db)):
    try:
        MedicineService(db).delete(medicine_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"message": "Đã xóa thuốc khỏi danh mục"}
