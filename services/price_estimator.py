# File: services/price_estimator.py
from core.config import DEFAULT_MEDICINE_UNIT

# Bảng giá tham khảo (VND / đơn vị). Thứ tự khai báo quyết định thứ tự so khớp một phần.
MEDICINE_PRICES = {
    "Paracetamol": 5000,
    "Amoxicillin": 15000,
    "Cetirizine": 8000,
    "Omeprazole": 12000,
    "Vitamin C": 3000,
    "Ibuprofen": 7000,
    "Loratadine": 9000,
    "Metformin": 6000,
    "Azithromycin": 25000,
    "Dexamethasone": 4000,
}

# Giá mặc định theo đơn vị khi không tìm thấy tên thuốc
UNIT_PRICES = {
    "viên": 10000,
    "ống": 15000,
    "chai": 25000,
    "gói": 8000,
    "vỉ": 20000,
}
DEFAULT_UNIT_PRICE = 10000

_PRICE_INDEX = [(name.lower(), price) for name, price in MEDICINE_PRICES.items()]
_EXACT_PRICES = dict(_PRICE_INDEX)


def estimate_price(name: str, unit: str = DEFAULT_MEDICINE_UNIT) -> int:
    """
    Ước tính đơn giá thuốc theo thứ tự ưu tiên:
    1. Trùng tên (không phân biệt hoa thường, bỏ khoảng trắng hai đầu)
    2. Trùng một phần (tên tham khảo chứa tên nhập hoặc ngược lại), theo thứ tự bảng
    3. Giá mặc định theo đơn vị tính
    Hàm không bao giờ ném lỗi.
    """
    key = name.strip().lower() if isinstance(name, str) else ""

    if key:
        if key in _EXACT_PRICES:
            return _EXACT_PRICES[key]

        for ref_name, price in _PRICE_INDEX:
            if key in ref_name or ref_name in key:
                return price

    unit_key = unit.strip().lower() if isinstance(unit, str) else ""
    return UNIT_PRICES.get(unit_key, DEFAULT_UNIT_PRICE)
