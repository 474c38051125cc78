from pydantic import BaseModel, Field

class Regulations(BaseModel):
    max_patients_per_day: int = Field(gt=0)
    consultation_fee: int = Field(ge=0)

class RegulationsState(Regulations):
    # True khi chưa đọc được quy định từ CSDL (đang dùng giá trị mặc định)
    loading: bool = False
