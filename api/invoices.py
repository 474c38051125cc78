from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from core.database import get_db
from core.exceptions import NotFoundError, ValidationFailed
from schemas.billing_schema import (
    InvoiceCreate,
    InvoicePreviewRequest,
    InvoicePreviewResponse,
    InvoiceResponse,
    PaymentRequest,
)
from services.billing_service import InvoiceService

router = APIRouter()

# --- 1. LẬP HÓA ĐƠN ---
@router.post("", response_model=InvoiceResponse, status_code=201)
def create_invoice(req: InvoiceCreate, db: Session = Depends(get_db)):
    service = InvoiceService(db)
    try:
        return service.create(req.model_dump())
    except ValidationFailed as e:
        raise HTTPException(status_code=400, detail=e.errors)

# Tính thử tiền thuốc theo phiếu khám, chưa lưu gì
@router.post("/preview", response_model=InvoicePreviewResponse)
def preview_invoice(req: InvoicePreviewRequest, db: Session = Depends(get_db)):
    service = InvoiceService(db)
    try:
        return service.preview(req.examination_id, req.consultation_fee, req.other_fees)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

# --- 2. TRA CỨU ---
@router.get("", response_model=List[InvoiceResponse])
def list_invoices(db: Session = Depends(get_db)):
    return InvoiceService(db).list_all()

@router.get("/by-patient/{patient_id}", response_model=List[InvoiceResponse])
def list_patient_invoices(patient_id: UUID, db: Session = Depends(get_db)):
    return InvoiceService(db).list_by_patient(patient_id)

@router.get("/{invoice_id}", response_model=InvoiceResponse)
def get_invoice(invoice_id: UUID, db: Session = Depends(get_db)):
    try:
        return InvoiceService(db).get(invoice_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

# --- 3. THANH TOÁN ---
@router.put("/{invoice_id}/pay", response_model=InvoiceResponse)
def pay_invoice(invoice_id: UUID, req: PaymentRequest, db: Session = Depends(get_db)):
    service = InvoiceService(db)
    try:
        return service.mark_paid(invoice_id, req.payment_method)
    except ValidationFailed as e:
        raise HTTPException(status_code=400, detail=e.errors)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
