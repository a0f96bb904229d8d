from datetime import datetime
from typing import Any, Dict, Iterable, List, Tuple

from app.constants import AppointmentOrder, Collection
from app.exceptions import InternalError, InvalidArgument, NotFound, RecordsAPIError
from app.schemas import PatientAppointmentOut
from app.store import DocumentStore
from app.utils.logger import get_logger

logger = get_logger("appointment_service")


def flatten_patient_appointments(
    doctors: Iterable[Dict[str, Any]], patient_id: str
) -> List[PatientAppointmentOut]:
    """Pick the patient's entries out of each doctor's embedded list.

    The store query only guarantees that a doctor holds at least one matching
    entry, so every embedded appointment is checked again here. Output keeps
    doctor order, then embedded order.
    """
    return [
        PatientAppointmentOut(
            appointmentDate=appointment.get("appointmentDate"),
            appointmentTime=appointment.get("appointmentTime"),
            department=doctor.get("dept_name"),
            doctorName=doctor.get("name"),
        )
        for doctor in doctors
        for appointment in doctor.get("appointments") or []
        if appointment.get("patientId") == patient_id
    ]


def _sort_part(value: Any) -> Tuple[int, str]:
    # missing values sort last
    if value is None or value == "":
        return (1, "")
    if isinstance(value, datetime):
        return (0, value.isoformat())
    return (0, str(value))


def sort_chronologically(appointments: List[PatientAppointmentOut]) -> List[PatientAppointmentOut]:
    return sorted(
        appointments,
        key=lambda a: (_sort_part(a.appointmentDate), _sort_part(a.appointmentTime)),
    )


async def get_patient_appointments(
    store: DocumentStore,
    patient_id: str,
    order: AppointmentOrder = AppointmentOrder.STORED,
) -> List[PatientAppointmentOut]:
    """All of a patient's appointments across doctors, or NotFound."""
    if not patient_id or not isinstance(patient_id, str):
        raise InvalidArgument("Invalid patient ID")
    try:
        doctors = await store.find(
            Collection.DOCTORS.value, {"appointments.patientId": patient_id}
        )
        if not doctors:
            raise NotFound("No appointments found")

        appointments = flatten_patient_appointments(doctors, patient_id)
        if not appointments:
            logger.warning(
                f"{len(doctors)} doctor(s) matched patient {patient_id} but none hold a matching appointment"
            )
            raise NotFound("No appointments found")

        if order == AppointmentOrder.CHRONOLOGICAL:
            appointments = sort_chronologically(appointments)
        return appointments
    except RecordsAPIError:
        raise
    except Exception as e:
        logger.error(f"Error retrieving appointments for {patient_id}: {e}", exc_info=True)
        raise InternalError("Error retrieving appointments")
