# backend/main.py  (chạy: python main.py hoặc uvicorn main:app --reload)
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from core.config import CORS_ORIGINS
from core.database import SessionLocal, engine
from core.exceptions import PersistenceError
from core.logging_config import setup_logging
from models import Base
from services.regulation_service import RegulationService, regulation_cache
from api import patients, examinations, invoices, medicines, regulations, reports

# 1. Cấu hình log
setup_logging()
logger = logging.getLogger(__name__)

# 2. Khởi tạo App
app = FastAPI(title="Clinic Management API")

# 3. Cấu hình CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 4. Lỗi CSDL -> 500 với thông báo thân thiện
@app.exception_handler(PersistenceError)
def persistence_error_handler(request: Request, exc: PersistenceError):
    return JSONResponse(status_code=500, content={"detail": str(exc)})

# 5. Khởi động: tạo bảng còn thiếu, nạp quy định vào bộ nhớ đệm
@app.on_event("startup")
def startup():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        regulation_cache.refresh(RegulationService(db))
        logger.info("✅ Đã nạp quy định: %s", regulation_cache.regulations)
    finally:
        db.close()

# 6. Đăng ký router
app.include_router(patients.router, prefix="/api/patients", tags=["Patients"])
app.include_router(examinations.router, prefix="/api/examinations", tags=["Examinations"])
app.include_router(invoices.router, prefix="/api/invoices", tags=["Invoices"])
app.include_router(medicines.router, prefix="/api/medicines", tags=["Medicines"])
app.include_router(regulations.router, prefix="/api/regulations", tags=["Regulations"])
app.include_router(reports.router, prefix="/api/reports", tags=["Reports"])

@app.get("/api/health")
def health_check():
    return {"status": "ok"}

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
