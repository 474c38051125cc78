from typing import Any, Dict, Optional

from models.settings import Setting
from repositories.base_repo import BaseRepository


class SettingsRepository(BaseRepository):
    model = Setting
    id_field = "key"

    def read(self, key: str) -> Optional[Dict[str, Any]]:
        row = self.get_by_id(key)
        return dict(row.value) if row else None

    def write(self, key: str, value: Dict[str, Any]) -> bool:
        """Ghi đè toàn bộ giá trị của key (không patch từng phần)."""
        with self._guard("lưu"):
            row = self.db.query(Setting).filter(Setting.key == key).first()
            if row:
                row.value = dict(value)
            else:
                self.db.add(Setting(key=key, value=dict(value)))
            self.db.commit()
            return True
