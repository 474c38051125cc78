# File: utils/helpers.py
import calendar
import math
import random
import string
import time
from datetime import date
from typing import Tuple, Union

from core.config import PHONE_REGEX


def round_half_up(value: float) -> int:
    """Làm tròn .5 lên (giống Math.round), dùng cho tiền VND và phần trăm."""
    return int(math.floor(value + 0.5))


def is_valid_phone_number(phone: str) -> bool:
    return bool(phone) and PHONE_REGEX.match(phone) is not None


def generate_id() -> str:
    """Sinh id cho dòng thuốc: mốc thời gian (ms) + 5 ký tự ngẫu nhiên."""
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=5))
    return f"{int(time.time() * 1000)}{suffix}"


def get_current_month() -> str:
    return date.today().strftime("%Y-%m")


def month_range(month: str) -> Tuple[date, date]:
    """
    'YYYY-MM' -> (ngày đầu tháng, ngày cuối tháng).
    Ném ValueError nếu chuỗi tháng không hợp lệ.
    """
    try:
        year_str, month_str = month.strip().split("-")
        year, month_num = int(year_str), int(month_str)
        last_day = calendar.monthrange(year, month_num)[1]
    except (ValueError, AttributeError, calendar.IllegalMonthError):
        raise ValueError(f"Tháng không hợp lệ: {month!r} (định dạng YYYY-MM)")
    return date(year, month_num, 1), date(year, month_num, last_day)


def format_date(value: Union[date, str]) -> str:
    """Định dạng hiển thị dd/mm/yyyy."""
    if isinstance(value, str):
        value = date.fromisoformat(value[:10])
    return value.strftime("%d/%m/%Y")
