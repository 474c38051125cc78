from models.pharmacy import Medicine
from repositories.base_repo import BaseRepository


class MedicineRepository(BaseRepository):
    model = Medicine
