# File: core/exceptions.py
from typing import List


class ValidationFailed(ValueError):
    """Dữ liệu đầu vào không hợp lệ. Gom toàn bộ thông báo lỗi để trả về một lần."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("\n".join(self.errors))


class NotFoundError(LookupError):
    pass


class PersistenceError(RuntimeError):
    """Lỗi khi đọc/ghi CSDL. Thông điệp dùng để hiển thị cho người dùng."""
