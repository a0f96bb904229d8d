# Re-export Beanie documents
from .patient import Patient
from .appointment import DoctorAppointment
from .doctor import Doctor
