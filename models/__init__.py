from .base import Base
from .medical import Patient, Examination
from .billing import Invoice
from .pharmacy import Medicine
from .settings import Setting
from .enums import Gender, PatientStatus
