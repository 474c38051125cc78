# File: core/config.py
import os
import re
from dotenv import load_dotenv

# Nạp biến môi trường từ file .env (nếu có)
load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL")

# Giá trị mặc định của quy định phòng khám (khi chưa có bản ghi trong CSDL)
DEFAULT_CONSULTATION_FEE = int(os.getenv("DEFAULT_CONSULTATION_FEE", 150000))
DEFAULT_MAX_PATIENTS_PER_DAY = int(os.getenv("DEFAULT_MAX_PATIENTS_PER_DAY", 40))

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# --- CẤU HÌNH NGHIỆP VỤ KHÁM BỆNH ---
PAYMENT_METHODS = ["Tiền mặt", "Chuyển khoản", "Thẻ tín dụng"]

MEDICINE_UNITS = ["Viên", "Ống", "Chai", "Gói", "Vỉ"]
DEFAULT_MEDICINE_UNIT = "Viên"
DEFAULT_MEDICINE_USAGE = "Theo chỉ dẫn"
DEFAULT_MEDICINE_NAME = "Unknown Medicine"
DEFAULT_MEDICINE_QUANTITY = 10  # Số lượng gợi ý khi chọn thuốc thông dụng

COMMON_DIAGNOSES = [
    "Viêm họng",
    "Cảm cúm",
    "Đau dạ dày",
    "Viêm xoang",
    "Viêm phế quản",
    "Đau đầu",
    "Tiêu chảy",
]

COMMON_MEDICINES = [
    {"name": "Paracetamol", "unit": "Viên", "default_usage": "Uống 1 viên sau khi ăn, ngày 3 lần"},
    {"name": "Amoxicillin", "unit": "Viên", "default_usage": "Uống 1 viên sau khi ăn, ngày 2 lần"},
    {"name": "Cetirizine", "unit": "Viên", "default_usage": "Uống 1 viên sau khi ăn tối"},
    {"name": "Omeprazole", "unit": "Viên", "default_usage": "Uống 1 viên trước khi ăn sáng"},
    {"name": "Vitamin C", "unit": "Viên", "default_usage": "Uống 1 viên sau khi ăn, ngày 1 lần"},
]

# Số điện thoại Việt Nam: 10 số, bắt đầu bằng 0
PHONE_REGEX = re.compile(r"^0\d{9}$")
