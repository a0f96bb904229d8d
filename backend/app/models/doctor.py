from beanie import Document
from pydantic import Field
from pymongo import ASCENDING, IndexModel

from .appointment import DoctorAppointment


class Doctor(Document):
    """Doctor with the appointments booked against them."""
    name: str
    dept_name: str | None = None
    appointments: list[DoctorAppointment] = Field(default_factory=list)

    class Settings:
        name = "doctors"
        # multikey index backing the appointments.patientId containment query
        indexes = [IndexModel([("appointments.patientId", ASCENDING)])]
