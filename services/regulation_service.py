# File: services/regulation_service.py
import logging
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from core.config import DEFAULT_CONSULTATION_FEE, DEFAULT_MAX_PATIENTS_PER_DAY
from core.exceptions import PersistenceError
from repositories.settings_repo import SettingsRepository

logger = logging.getLogger(__name__)

REGULATIONS_KEY = "regulations"

DEFAULT_REGULATIONS = {
    "max_patients_per_day": DEFAULT_MAX_PATIENTS_PER_DAY,
    "consultation_fee": DEFAULT_CONSULTATION_FEE,
}


class RegulationService:
    def __init__(self, db: Session):
        self.repo = SettingsRepository(db)

    def get_regulations(self) -> Dict[str, int]:
        """
        Lấy quy định hiện tại. Nếu chưa có thì khởi tạo bằng giá trị mặc định.
        Không bao giờ ném lỗi: lỗi đọc CSDL -> trả về mặc định.
        """
        try:
            stored = self.repo.read(REGULATIONS_KEY)
            if stored is not None:
                return {**DEFAULT_REGULATIONS, **stored}

            self.repo.write(REGULATIONS_KEY, DEFAULT_REGULATIONS)
            return dict(DEFAULT_REGULATIONS)
        except (PersistenceError, TypeError, ValueError) as e:
            # TypeError/ValueError: bản ghi lưu sai định dạng
            logger.warning("⚠️ Không đọc được quy định, dùng giá trị mặc định: %s", e)
            return dict(DEFAULT_REGULATIONS)

    def update_regulations(self, values: Dict[str, int]) -> bool:
        try:
            return self.repo.write(REGULATIONS_KEY, {
                "max_patients_per_day": int(values["max_patients_per_day"]),
                "consultation_fee": int(values["consultation_fee"]),
            })
        except PersistenceError as e:
            logger.error("❌ Lỗi khi cập nhật quy định: %s", e)
            return False


class RegulationCache:
    """
    Bộ nhớ đệm quy định dùng chung cho toàn tiến trình.
    Trạng thái ban đầu là 'loading' với giá trị mặc định cứng,
    được thay bằng kết quả đọc thành công đầu tiên qua refresh().
    """

    def __init__(self):
        self.reset()

    def reset(self):
        self.regulations = dict(DEFAULT_REGULATIONS)
        self.loading = True

    def refresh(self, service: RegulationService) -> Dict[str, int]:
        # Giữ giá trị cũ trong lúc đọc; chỉ lần nạp đầu tiên chạy ở trạng thái loading
        regulations = service.get_regulations()
        self.regulations, self.loading = regulations, False
        return regulations

    def value(self, key: str, default: Optional[Any] = None):
        if self.loading:
            if default is not None:
                return default
            if key == "consultation_fee":
                return DEFAULT_CONSULTATION_FEE
            if key == "max_patients_per_day":
                return 40
        return self.regulations[key]


regulation_cache = RegulationCache()
