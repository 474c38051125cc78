from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from core.config import DATABASE_URL

# Lấy URL từ biến môi trường (.env hoặc Docker)
if not DATABASE_URL:
    raise ValueError("LỖI CẤU HÌNH: Không tìm thấy DATABASE_URL trong biến môi trường (.env)")

# SQLite (dùng khi chạy thử/kiểm thử) không cho chia sẻ kết nối giữa các thread
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
