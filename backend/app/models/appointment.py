from pydantic import BaseModel


class DoctorAppointment(BaseModel):
    """Appointment embedded in a doctor document.

    patientId holds a Patient UHID but nothing enforces that the patient exists.
    """
    patientId: str
    appointmentDate: str | None = None
    appointmentTime: str | None = None
