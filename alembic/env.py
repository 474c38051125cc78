import os
import sys
from logging.config import fileConfig

from sqlalchemy import engine_from_config
from sqlalchemy import pool

from alembic import context
from dotenv import load_dotenv

# ----------------------------------------------------------------------
# [PHẦN 1: CẤU HÌNH ĐƯỜNG DẪN & IMPORT]
# ----------------------------------------------------------------------

# Thêm đường dẫn root vào sys.path
root_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(root_path)
load_dotenv(os.path.join(root_path, ".env"))

# Import DATABASE_URL từ core/database (để đồng bộ kết nối)
from core.database import DATABASE_URL
# models/__init__.py import toàn bộ model nên Base.metadata đã đủ bảng
from models import Base, Patient, Examination, Invoice, Medicine, Setting  # noqa: F401
# ----------------------------------------------------------------------

# Lấy config từ alembic.ini
config = context.config
# Ghi đè sqlalchemy.url bằng URL thực tế từ biến môi trường
config.set_main_option("sqlalchemy.url", DATABASE_URL)

# Thiết lập log
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Gán metadata của Base vào target để Alembic so sánh
target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Chế độ Offline: sinh file SQL mà không cần kết nối DB."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Chế độ Online: kết nối trực tiếp vào DB."""
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection, target_metadata=target_metadata
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
