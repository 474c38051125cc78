from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from core.database import get_db
from core.exceptions import NotFoundError, ValidationFailed
from schemas.patient_schema import PatientCreate, PatientUpdate, PatientStatusUpdate, PatientResponse
from services.patient_service import PatientService

router = APIRouter()

# --- 1. TIẾP NHẬN BỆNH NHÂN ---
@router.post("", response_model=PatientResponse, status_code=201)
def register_patient(req: PatientCreate, db: Session = Depends(get_db)):
    service = PatientService(db)
    try:
        return service.register_patient(req.model_dump())
    except ValidationFailed as e:
        raise HTTPException(status_code=400, detail=e.errors)

# --- 2. DANH SÁCH CHỜ KHÁM (mặc định hôm nay) ---
@router.get("", response_model=List[PatientResponse])
def list_waiting_patients(registration_date: Optional[date] = Query(None, alias="date"), db: Session = Depends(get_db)):
    return PatientService(db).list_waiting(registration_date)

@router.get("/all", response_model=List[PatientResponse])
def list_patients_by_date(registration_date: Optional[date] = Query(None, alias="date"), db: Session = Depends(get_db)):
    return PatientService(db).list_by_date(registration_date)

@router.get("/search", response_model=List[PatientResponse])
def search_patients(q: str = Query(""), db: Session = Depends(get_db)):
    return PatientService(db).search(q)

# --- 3. CHI TIẾT / SỬA / XÓA ---
@router.get("/{patient_id}", response_model=PatientResponse)
def get_patient(patient_id: UUID, db: Session = Depends(get_db)):
    try:
        return PatientService(db).get(patient_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.put("/{patient_id}", response_model=PatientResponse)
def update_patient(patient_id: UUID, req: PatientUpdate, db: Session = Depends(get_db)):
    service = PatientService(db)
    try:
        return service.update(patient_id, req.model_dump(exclude_unset=True))
    except ValidationFailed as e:
        raise HTTPException(status_code=400, detail=e.errors)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.put("/{patient_id}/status", response_model=PatientResponse)
def update_patient_status(patient_id: UUID, req: PatientStatusUpdate, db: Session = Depends(get_db)):
    service = PatientService(db)
    try:
        return service.update_status(patient_id, req.status)
    except ValidationFailed as e:
        raise HTTPException(status_code=400, detail=e.errors)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.delete("/{patient_id}")
def delete_patient(patient_id: UUID, db: Session = Depends(get_db)):
    try:
        PatientService(db).delete(patient_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"message": "Đã xóa bệnh nhân"}
