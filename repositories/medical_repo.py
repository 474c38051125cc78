from datetime import date
from typing import List
from uuid import UUID

from models.medical import Patient, Examination
from models.enums import PatientStatus
from repositories.base_repo import BaseRepository


class PatientRepository(BaseRepository):
    model = Patient

    # --- Phần xử lý danh sách chờ khám ---
    def get_patients_by_date(self, registration_date: date) -> List[Patient]:
        return self.list_where("registration_date", registration_date)

    def get_waiting_patients(self, registration_date: date) -> List[Patient]:
        # Bệnh nhân không có status cũng coi là đang chờ
        return [
            p for p in self.get_patients_by_date(registration_date)
            if (p.status or PatientStatus.WAITING) == PatientStatus.WAITING
        ]


class ExaminationRepository(BaseRepository):
    model = Examination

    def get_by_patient(self, patient_id: UUID) -> List[Examination]:
        return self.list_where("patient_id", patient_id)
