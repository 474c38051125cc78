from datetime import date
from uuid import uuid4

import pytest

from models.billing import Invoice
from models.medical import Examination


@pytest.fixture
def march_data(db_session):
    patient_id = uuid4()

    def invoice(day, total):
        return Invoice(patient_id=patient_id, patient_name="Nguyễn Văn An", exam_date=day,
                       consultation_fee=total, medicine_fee=0, other_fees=0, total_amount=total)

    def exam(day, medicines):
        return Examination(patient_id=patient_id, patient_name="Nguyễn Văn An", exam_date=day,
                           symptoms="Sốt", diagnosis="Cảm cúm", medicines=medicines)

    db_session.add_all([
        invoice(date(2024, 3, 1), 600000),
        invoice(date(2024, 3, 1), 400000),
        invoice(date(2024, 3, 3), 500000),
        invoice(date(2024, 4, 1), 999000),
        exam(date(2024, 3, 1), [{"id": "m1", "name": "Paracetamol", "unit": "Viên", "quantity": 10}]),
        exam(date(2024, 3, 3), {"0": {"id": "m1", "name": "Paracetamol", "unit": "Viên", "quantity": 5}}),
        exam(date(2024, 3, 3), [{"id": "m2", "name": "Vitamin C", "unit": "Viên", "quantity": 5}]),
        exam(date(2024, 4, 2), [{"id": "m3", "name": "Ibuprofen", "unit": "Viên", "quantity": 50}]),
    ])
    db_session.commit()


class TestMonthlyReport:
    def test_monthly_report(self, client, march_data):
        response = client.get("/api/reports/monthly", params={"month": "2024-03"})
        assert response.status_code == 200
        data = response.json()

        assert data["start_date"] == "2024-03-01"
        assert data["end_date"] == "2024-03-31"
        assert len(data["revenue"]) == 31
        assert data["revenue"][0] == {
            "date": "2024-03-01", "patient_count": 2, "revenue": 1000000, "percentage": 67,
        }
        assert data["revenue"][2]["percentage"] == 33
        assert data["summary"] == {
            "total_revenue": 1500000,
            "total_patients": 3,
            "average_per_day": 48387,
        }

        medicines = data["medicines"]
        assert [m["id"] for m in medicines] == ["m1", "m2"]
        assert medicines[0]["quantity"] == 15
        assert medicines[0]["usage_count"] == 2
        assert medicines[0]["percentage"] == 75

    def test_empty_month(self, client):
        data = client.get("/api/reports/monthly", params={"month": "2024-02"}).json()
        assert len(data["revenue"]) == 29
        assert data["medicines"] == []
        assert data["summary"]["total_revenue"] == 0

    def test_invalid_month(self, client):
        response = client.get("/api/reports/monthly", params={"month": "2024-13"})
        assert response.status_code == 400


class TestExport:
    def test_revenue_csv(self, client, march_data):
        response = client.get("/api/reports/monthly/export", params={"month": "2024-03", "kind": "revenue"})
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "bao_cao_revenue_2024-03.csv" in response.headers["content-disposition"]

        lines = response.content.decode("utf-8-sig").splitlines()
        assert lines[0] == "STT,Ngày,Số bệnh nhân,Doanh thu,Tỷ lệ (%)"
        assert lines[1] == "1,01/03/2024,2,1000000,67"
        assert len(lines) == 32

    def test_medicines_csv(self, client, march_data):
        response = client.get("/api/reports/monthly/export", params={"month": "2024-03", "kind": "medicines"})
        lines = response.content.decode("utf-8-sig").splitlines()
        assert lines[1] == "1,Paracetamol,Viên,15,2,75"

    def test_unknown_kind(self, client):
        response = client.get("/api/reports/monthly/export", params={"month": "2024-03", "kind": "pdf"})
        assert response.status_code == 400
