from datetime import datetime
from pydantic import BaseModel, Field
from typing import Any, Optional, List, Union

# -------------------- Patient Schemas --------------------


class PatientOut(BaseModel):
    """Projection returned by GET /record/{id}."""

    UHID: str
    name: str
    # stored values pass through as-is
    age: Optional[Any] = None
    phoneNumber: Optional[Any] = None
    totalVisits: Optional[Any] = Field(None, description="Mirrors totalAppointments")

# -------------------- Appointment Schemas --------------------


class PatientAppointmentOut(BaseModel):
    """Embedded appointment flattened with its doctor's context."""

    appointmentDate: Optional[Union[str, datetime]] = None
    appointmentTime: Optional[Union[str, datetime]] = None
    department: Optional[str] = None
    doctorName: Optional[str] = None


class PatientAppointmentsOut(BaseModel):
    message: str = "Appointments retrieved successfully"
    appointments: List[PatientAppointmentOut]

# -------------------- Generic --------------------


class MessageOut(BaseModel):
    message: str
