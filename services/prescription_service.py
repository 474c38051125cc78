# File: services/prescription_service.py
"""
Chuẩn hóa đơn thuốc đọc từ CSDL.

Cột JSON không đảm bảo kiểu mảng khi đọc lại (mảng có thể thành dict
{"0": {...}, "1": {...}}, hoặc null). Mọi thành phần đọc đơn thuốc
(phiếu khám, tính tiền thuốc, báo cáo) đều đi qua đây trước.
"""
import math
from typing import Any, Dict, List

from core.config import (
    MEDICINE_UNITS,
    DEFAULT_MEDICINE_NAME,
    DEFAULT_MEDICINE_UNIT,
    DEFAULT_MEDICINE_USAGE,
)

DEFAULT_QUANTITY = 1


def coerce_medicine_list(raw: Any) -> List[Any]:
    """Đưa dữ liệu thô về list: list giữ nguyên, dict lấy values theo thứ tự key, còn lại -> []."""
    if isinstance(raw, list):
        return list(raw)
    if isinstance(raw, dict):
        return list(raw.values())
    return []


def parse_quantity(value: Any, default: int = DEFAULT_QUANTITY):
    """Ép số lượng về số >= 0; thiếu hoặc không phải số thì dùng default."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        number = value
    else:
        try:
            number = float(str(value).strip())
        except ValueError:
            return default
    if isinstance(number, float):
        if math.isnan(number) or math.isinf(number):
            return default
        if number.is_integer():
            number = int(number)
    return max(number, 0)


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def normalize_medicine(entry: Dict[str, Any], index: int) -> Dict[str, Any]:
    unit = _text(entry.get("unit"))
    med = dict(entry)
    med["id"] = _text(entry.get("id")) or f"med_{index}"
    med["name"] = _text(entry.get("name")) or DEFAULT_MEDICINE_NAME
    med["unit"] = unit if unit in MEDICINE_UNITS else DEFAULT_MEDICINE_UNIT
    med["quantity"] = parse_quantity(entry.get("quantity"))
    med["usage"] = _text(entry.get("usage")) or DEFAULT_MEDICINE_USAGE
    return med


def normalize_medicines(raw: Any) -> List[Dict[str, Any]]:
    # Bỏ hẳn các phần tử không phải dict (kể cả None), không để lại chỗ trống
    return [
        normalize_medicine(entry, index)
        for index, entry in enumerate(coerce_medicine_list(raw))
        if isinstance(entry, dict)
    ]


def normalize_examination(exam: Dict[str, Any]) -> Dict[str, Any]:
    """Trả về bản sao phiếu khám với medicines luôn là list hợp lệ. Hàm thuần, idempotent."""
    normalized = dict(exam)
    normalized["medicines"] = normalize_medicines(exam.get("medicines"))
    return normalized
