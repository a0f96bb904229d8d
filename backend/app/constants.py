from enum import Enum

class Collection(str, Enum):
    """MongoDB collections read by the API."""
    PATIENTS = "patients"
    DOCTORS = "doctors"


class AppointmentOrder(str, Enum):
    """Ordering of a patient's flattened appointments."""
    STORED = "stored"                # doctor order, then embedded order
    CHRONOLOGICAL = "chronological"  # by appointmentDate, appointmentTime
