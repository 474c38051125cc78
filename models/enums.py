import enum


class Gender(str, enum.Enum):
    MALE = "Nam"
    FEMALE = "Nữ"


class PatientStatus(str, enum.Enum):
    WAITING = "waiting"      # Đang chờ khám (mặc định)
    PROCESSED = "processed"  # Đã lập hóa đơn, rời danh sách chờ
