from datetime import date

import pytest

from services.fee_calculator import price_medicines
from services.report_service import (
    MEDICINE_COLUMNS,
    REVENUE_COLUMNS,
    build_medicine_usage_report,
    build_revenue_report,
    filter_by_exam_date,
    rows_to_csv,
    summarize_revenue,
)


def _invoice(day, amount):
    return {"exam_date": day, "total_amount": amount}


class TestRevenueReport:
    def test_five_day_range(self):
        invoices = [
            _invoice(date(2024, 3, 1), 600000),
            _invoice(date(2024, 3, 1), 400000),
            _invoice(date(2024, 3, 3), 500000),
        ]
        rows = build_revenue_report(invoices, date(2024, 3, 1), date(2024, 3, 5))

        assert len(rows) == 5
        assert [r["date"] for r in rows] == [date(2024, 3, d) for d in range(1, 6)]
        assert rows[0]["patient_count"] == 2
        assert rows[0]["revenue"] == 1000000
        assert rows[2]["patient_count"] == 1
        assert rows[2]["revenue"] == 500000
        assert rows[0]["percentage"] + rows[2]["percentage"] == 100
        for row in (rows[1], rows[3], rows[4]):
            assert row["patient_count"] == 0
            assert row["revenue"] == 0
            assert row["percentage"] == 0

    def test_no_invoices(self):
        rows = build_revenue_report([], date(2024, 2, 1), date(2024, 2, 29))
        assert len(rows) == 29
        assert all(r["percentage"] == 0 and r["revenue"] == 0 for r in rows)

    def test_ignores_invoices_outside_range(self):
        invoices = [
            _invoice(date(2024, 2, 29), 100000),
            _invoice(date(2024, 3, 2), 200000),
            _invoice(date(2024, 4, 1), 300000),
        ]
        rows = build_revenue_report(invoices, date(2024, 3, 1), date(2024, 3, 31))
        assert sum(r["revenue"] for r in rows) == 200000

    def test_accepts_iso_strings(self):
        invoices = [_invoice("2024-03-02", 100000), _invoice("2024-03-02T09:30:00", 50000)]
        rows = build_revenue_report(invoices, "2024-03-01", "2024-03-03")
        assert rows[1]["revenue"] == 150000
        assert rows[1]["percentage"] == 100

    def test_invalid_range(self):
        with pytest.raises(ValueError):
            build_revenue_report([], "not-a-date", date(2024, 3, 1))

    def test_summary(self):
        rows = build_revenue_report(
            [_invoice(date(2024, 3, 1), 300000), _invoice(date(2024, 3, 2), 100000)],
            date(2024, 3, 1), date(2024, 3, 3),
        )
        assert summarize_revenue(rows) == {
            "total_revenue": 400000,
            "total_patients": 2,
            "average_per_day": 133333,
        }
        assert summarize_revenue([])["average_per_day"] == 0


class TestMedicineUsageReport:
    def test_merges_same_id(self):
        exams = [
            {"medicines": [{"id": "m1", "name": "Paracetamol", "unit": "Viên", "quantity": 10}]},
            {"medicines": [{"id": "m1", "name": "Paracetamol", "unit": "Viên", "quantity": 5}]},
        ]
        rows = build_medicine_usage_report(exams)
        assert len(rows) == 1
        assert rows[0]["quantity"] == 15
        assert rows[0]["usage_count"] == 2
        assert rows[0]["percentage"] == 100

    def test_sorted_by_quantity_descending(self):
        exams = [{"medicines": [
            {"id": "a", "name": "Vitamin C", "unit": "Viên", "quantity": 3},
            {"id": "b", "name": "Paracetamol", "unit": "Viên", "quantity": 12},
            {"id": "c", "name": "Siro ho", "unit": "Chai", "quantity": 5},
        ]}]
        rows = build_medicine_usage_report(exams)
        assert [r["id"] for r in rows] == ["b", "c", "a"]
        assert [r["percentage"] for r in rows] == [60, 25, 15]

    def test_latest_non_empty_name_wins(self):
        exams = [
            {"medicines": [{"id": "m1", "name": "Paracetamol", "unit": "Viên", "quantity": 1}]},
            {"medicines": [{"id": "m1", "name": "Paracetamol 500mg", "unit": "", "quantity": 1}]},
            {"medicines": [{"id": "m1", "name": "", "unit": "Vỉ", "quantity": 1}]},
        ]
        row = build_medicine_usage_report(exams)[0]
        assert row["name"] == "Paracetamol 500mg"
        assert row["unit"] == "Vỉ"

    def test_skips_entries_without_id_or_name(self):
        exams = [
            {"medicines": [
                {"name": "Không có id", "unit": "Viên", "quantity": 4},
                {"id": "x", "name": "", "unit": "Viên", "quantity": 4},
                None,
                {"id": "ok", "name": "Cetirizine", "unit": "Viên", "quantity": 2},
            ]},
            {"medicines": None},
            {},
        ]
        rows = build_medicine_usage_report(exams)
        assert [r["id"] for r in rows] == ["ok"]

    def test_dict_shaped_medicines(self):
        exams = [{"medicines": {"0": {"id": "m1", "name": "Ibuprofen", "unit": "Viên", "quantity": 6}}}]
        assert build_medicine_usage_report(exams)[0]["quantity"] == 6

    def test_empty(self):
        assert build_medicine_usage_report([]) == []

    def test_unit_matches_invoice_pricing(self):
        exam = {"medicines": [{"id": "m1", "name": "Siro ho", "unit": "hộp", "quantity": "2"}]}
        row = build_medicine_usage_report([exam])[0]
        line = price_medicines(exam)[0]
        assert row["unit"] == line["unit"] == "Viên"
        assert row["quantity"] == line["quantity"] == 2


def test_filter_by_exam_date_is_inclusive():
    records = [
        {"exam_date": date(2024, 2, 29)},
        {"exam_date": date(2024, 3, 1)},
        {"exam_date": "2024-03-31"},
        {"exam_date": None},
    ]
    result = filter_by_exam_date(records, date(2024, 3, 1), date(2024, 3, 31))
    assert len(result) == 2


class TestCsvExport:
    def test_revenue_csv(self):
        rows = [{"date": date(2024, 3, 1), "patient_count": 2, "revenue": 300000, "percentage": 100}]
        lines = rows_to_csv(rows, REVENUE_COLUMNS).splitlines()
        assert lines[0] == "STT,Ngày,Số bệnh nhân,Doanh thu,Tỷ lệ (%)"
        assert lines[1] == "1,01/03/2024,2,300000,100"

    def test_medicine_csv(self):
        rows = [{"id": "m1", "name": "Paracetamol", "unit": "Viên", "quantity": 15,
                 "usage_count": 2, "percentage": 100}]
        lines = rows_to_csv(rows, MEDICINE_COLUMNS).splitlines()
        assert lines[0] == "STT,Thuốc,Đơn vị tính,Số lượng,Số lần dùng,Tỷ lệ (%)"
        assert lines[1] == "1,Paracetamol,Viên,15,2,100"
