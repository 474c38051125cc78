from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from core.database import get_db
from schemas.regulation_schema import Regulations, RegulationsState
from services.regulation_service import RegulationService, regulation_cache

router = APIRouter()

def _cached_state():
    return {**regulation_cache.regulations, "loading": regulation_cache.loading}

# Trả về quy định đang dùng (bộ nhớ đệm), kèm cờ loading
@router.get("", response_model=RegulationsState)
def get_regulations():
    return _cached_state()

@router.put("", response_model=RegulationsState)
def update_regulations(req: Regulations, db: Session = Depends(get_db)):
    service = RegulationService(db)
    if not service.update_regulations(req.model_dump()):
        raise HTTPException(status_code=500, detail="Lỗi khi lưu quy định. Vui lòng thử lại.")
    regulation_cache.refresh(service)
    return _cached_state()

@router.post("/refresh", response_model=RegulationsState)
def refresh_regulations(db: Session = Depends(get_db)):
    regulation_cache.refresh(RegulationService(db))
    return _cached_state()
