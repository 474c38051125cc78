from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from core.database import get_db
from core.exceptions import NotFoundError, ValidationFailed
from schemas.medical_schema import ExaminationCreate, ExaminationResponse, ExaminationPresets
from services.medical_service import ExaminationService

router = APIRouter()

@router.post("", response_model=ExaminationResponse, status_code=201)
def create_examination(req: ExaminationCreate, db: Session = Depends(get_db)):
    service = ExaminationService(db)
    try:
        return service.create(req.model_dump())
    except ValidationFailed as e:
        raise HTTPException(status_code=400, detail=e.errors)

@router.get("", response_model=List[ExaminationResponse])
def list_examinations(db: Session = Depends(get_db)):
    return ExaminationService(db).list_all()

# Gợi ý cho form khám: đơn vị tính, chẩn đoán và thuốc thông dụng
@router.get("/presets", response_model=ExaminationPresets)
def get_presets():
    return ExaminationService.get_presets()

@router.get("/by-patient/{patient_id}", response_model=List[ExaminationResponse])
def list_patient_examinations(patient_id: UUID, db: Session = Depends(get_db)):
    return ExaminationService(db).list_by_patient(patient_id)

@router.get("/{exam_id}", response_model=ExaminationResponse)
def get_examination(exam_id: UUID, db: Session = Depends(get_db)):
    try:
        return ExaminationService(db).get(exam_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
