# File: services/report_service.py
import csv
import io
from datetime import date, datetime, timedelta
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from sqlalchemy.orm import Session

from core.exceptions import ValidationFailed
from repositories.billing_repo import InvoiceRepository
from repositories.medical_repo import ExaminationRepository
from services.prescription_service import coerce_medicine_list, normalize_medicine
from utils.helpers import format_date, month_range, round_half_up


def _to_date(value: Any) -> Optional[date]:
    # So sánh khoảng ngày trên kiểu date thật, không so chuỗi
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


def _percentage(part: float, total: float) -> int:
    return round_half_up(part / total * 100) if total > 0 else 0


def filter_by_exam_date(records: Iterable[Dict[str, Any]], start: date, end: date) -> List[Dict[str, Any]]:
    result = []
    for record in records:
        d = _to_date(record.get("exam_date"))
        if d is not None and start <= d <= end:
            result.append(record)
    return result


def build_revenue_report(invoices: Iterable[Dict[str, Any]], month_start, month_end) -> List[Dict[str, Any]]:
    """
    Doanh thu theo ngày trong khoảng [month_start, month_end] (bao gồm hai đầu).
    Luôn trả đủ một dòng cho mỗi ngày, kể cả ngày không có hóa đơn.
    """
    start, end = _to_date(month_start), _to_date(month_end)
    if start is None or end is None:
        raise ValueError("Khoảng ngày báo cáo không hợp lệ")

    buckets: Dict[date, Dict[str, Any]] = {}
    day = start
    while day <= end:
        buckets[day] = {"date": day, "patient_count": 0, "revenue": 0, "percentage": 0}
        day += timedelta(days=1)

    for invoice in invoices:
        d = _to_date(invoice.get("exam_date"))
        if d is None or d not in buckets:
            continue
        buckets[d]["patient_count"] += 1
        buckets[d]["revenue"] += int(invoice.get("total_amount") or 0)

    total_revenue = sum(b["revenue"] for b in buckets.values())
    for bucket in buckets.values():
        bucket["percentage"] = _percentage(bucket["revenue"], total_revenue)

    return sorted(buckets.values(), key=lambda b: b["date"])


def build_medicine_usage_report(examinations: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Thống kê thuốc đã kê, gom nhóm theo id của dòng thuốc (không gom theo tên).
    usage_count tăng 1 cho mỗi lần xuất hiện; tên lấy theo lần xuất hiện sau cùng
    nếu khác rỗng, đơn vị lấy theo lần sau cùng sau khi chuẩn hóa.
    Sắp xếp giảm dần theo số lượng.
    """
    groups: Dict[str, Dict[str, Any]] = {}

    for exam in examinations:
        for index, entry in enumerate(coerce_medicine_list(exam.get("medicines"))):
            if not isinstance(entry, dict):
                continue
            med_id = str(entry.get("id") or "").strip()
            if not med_id:
                # Không có id thì không gom nhóm được, dòng này không vào thống kê
                continue

            # Đơn vị/số lượng qua bộ chuẩn hóa giống lúc tính tiền thuốc
            med = normalize_medicine(entry, index)
            group = groups.setdefault(med_id, {
                "id": med_id, "name": "", "unit": "", "quantity": 0, "usage_count": 0,
            })
            group["quantity"] += med["quantity"]
            group["usage_count"] += 1
            group["unit"] = med["unit"]

            # Tên rỗng không ghi đè tên đã có
            name = str(entry.get("name") or "").strip()
            if name:
                group["name"] = name

    rows = [g for g in groups.values() if g["name"] and g["unit"]]
    total_quantity = sum(r["quantity"] for r in rows)
    for row in rows:
        row["percentage"] = _percentage(row["quantity"], total_quantity)

    return sorted(rows, key=lambda r: r["quantity"], reverse=True)


def summarize_revenue(rows: Sequence[Dict[str, Any]]) -> Dict[str, Any]:
    total_revenue = sum(r["revenue"] for r in rows)
    total_patients = sum(r["patient_count"] for r in rows)
    return {
        "total_revenue": total_revenue,
        "total_patients": total_patients,
        "average_per_day": round_half_up(total_revenue / len(rows)) if rows else 0,
    }


# --- XUẤT CSV ---
REVENUE_COLUMNS = [
    ("STT", None), ("Ngày", "date"), ("Số bệnh nhân", "patient_count"),
    ("Doanh thu", "revenue"), ("Tỷ lệ (%)", "percentage"),
]
MEDICINE_COLUMNS = [
    ("STT", None), ("Thuốc", "name"), ("Đơn vị tính", "unit"),
    ("Số lượng", "quantity"), ("Số lần dùng", "usage_count"), ("Tỷ lệ (%)", "percentage"),
]


def rows_to_csv(rows: Sequence[Dict[str, Any]], columns: Sequence[Tuple[str, Optional[str]]]) -> str:
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow([header for header, _ in columns])
    for index, row in enumerate(rows, start=1):
        line = []
        for _, field in columns:
            if field is None:
                line.append(index)
            elif field == "date":
                line.append(format_date(row[field]))
            else:
                line.append(row[field])
        writer.writerow(line)
    return output.getvalue()


class ReportService:
    def __init__(self, db: Session):
        self.invoice_repo = InvoiceRepository(db)
        self.exam_repo = ExaminationRepository(db)

    def _month_bounds(self, month: str) -> Tuple[date, date]:
        try:
            return month_range(month)
        except ValueError as e:
            raise ValidationFailed([str(e)])

    def get_monthly_report(self, month: str) -> Dict[str, Any]:
        start, end = self._month_bounds(month)

        # CSDL chỉ hỗ trợ lọc bằng, nên lấy hết rồi lọc theo khoảng ngày ở đây
        invoices = [i.to_dict() for i in self.invoice_repo.list_all()]
        examinations = filter_by_exam_date(
            [e.to_dict() for e in self.exam_repo.list_all()], start, end
        )

        revenue = build_revenue_report(invoices, start, end)
        return {
            "month": month,
            "start_date": start,
            "end_date": end,
            "revenue": revenue,
            "medicines": build_medicine_usage_report(examinations),
            "summary": summarize_revenue(revenue),
        }

    def export_monthly_csv(self, month: str, kind: str) -> str:
        report = self.get_monthly_report(month)
        if kind == "revenue":
            return rows_to_csv(report["revenue"], REVENUE_COLUMNS)
        if kind == "medicines":
            return rows_to_csv(report["medicines"], MEDICINE_COLUMNS)
        raise ValidationFailed([f"Loại báo cáo không hợp lệ: {kind} (revenue | medicines)"])
