import io

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from core.database import get_db
from core.exceptions import ValidationFailed
from schemas.report_schema import MonthlyReportResponse
from services.report_service import ReportService
from utils.helpers import get_current_month

router = APIRouter()

@router.get("/monthly", response_model=MonthlyReportResponse)
def get_monthly_report(month: str = Query(None), db: Session = Depends(get_db)):
    try:
        return ReportService(db).get_monthly_report(month or get_current_month())
    except ValidationFailed as e:
        raise HTTPException(status_code=400, detail=e.errors)

@router.get("/monthly/export")
def export_monthly_report(
    month: str = Query(None),
    kind: str = Query("revenue"),
    db: Session = Depends(get_db),
):
    month = month or get_current_month()
    try:
        content = ReportService(db).export_monthly_csv(month, kind)
    except ValidationFailed as e:
        raise HTTPException(status_code=400, detail=e.errors)

    # utf-8-sig để Excel đọc đúng tiếng Việt
    stream = io.BytesIO(content.encode("utf-8-sig"))
    filename = f"bao_cao_{kind}_{month}.csv"
    return StreamingResponse(
        stream,
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
