import datetime
from pydantic import BaseModel
from typing import List, Union

class DailyRevenue(BaseModel):
    date: datetime.date
    patient_count: int
    revenue: int
    percentage: int

class MedicineUsage(BaseModel):
    id: str
    name: str
    unit: str
    quantity: Union[int, float]
    usage_count: int
    percentage: int

class RevenueSummary(BaseModel):
    total_revenue: int
    total_patients: int
    average_per_day: int

class MonthlyReportResponse(BaseModel):
    month: str
    start_date: datetime.date
    end_date: datetime.date
    revenue: List[DailyRevenue]
    medicines: List[MedicineUsage]
    summary: RevenueSummary
