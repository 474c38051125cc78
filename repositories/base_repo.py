import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class BaseRepository:
    """
    CRUD chung cho một collection (bảng):
    insert / get_by_id / list_all / list_where / update / delete.
    Lỗi CSDL được rollback, ghi log và đổi thành PersistenceError.
    """

    model = None
    id_field = "id"

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _guard(self, action: str):
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("❌ Repo Error (%s %s): %s", action, self.model.__tablename__, e)
            raise PersistenceError(f"Lỗi khi {action} dữ liệu. Vui lòng thử lại.") from e

    def _id_column(self):
        return getattr(self.model, self.id_field)

    def insert(self, record: Dict[str, Any]):
        """Thêm bản ghi mới, trả về id do CSDL sinh."""
        with self._guard("thêm"):
            obj = self.model(**record)
            self.db.add(obj)
            self.db.commit()
            self.db.refresh(obj)
            return getattr(obj, self.id_field)

    def get_by_id(self, record_id) -> Optional[Any]:
        with self._guard("đọc"):
            return self.db.query(self.model).filter(self._id_column() == record_id).first()

    def list_all(self) -> List[Any]:
        with self._guard("đọc"):
            return self.db.query(self.model).all()

    def list_where(self, field: str, value) -> List[Any]:
        # Chỉ hỗ trợ lọc bằng trên một trường
        with self._guard("đọc"):
            return self.db.query(self.model).filter(getattr(self.model, field) == value).all()

    def update(self, record_id, fields: Dict[str, Any]) -> bool:
        with self._guard("cập nhật"):
            obj = self.db.query(self.model).filter(self._id_column() == record_id).first()
            if not obj:
                return False
            for key, value in fields.items():
                setattr(obj, key, value)
            self.db.commit()
            return True

    def delete(self, record_id) -> bool:
        with self._guard("xóa"):
            obj = self.db.query(self.model).filter(self._id_column() == record_id).first()
            if not obj:
                return False
            self.db.delete(obj)
            self.db.commit()
            return True
