from typing import List
from uuid import UUID

from models.billing import Invoice
from repositories.base_repo import BaseRepository


class InvoiceRepository(BaseRepository):
    model = Invoice

    def get_by_patient(self, patient_id: UUID) -> List[Invoice]:
        return self.list_where("patient_id", patient_id)
