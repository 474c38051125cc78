import logging

from core.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = LOG_LEVEL):
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # SQLAlchemy in câu lệnh SQL ở mức INFO, quá nhiều cho log ứng dụng
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
