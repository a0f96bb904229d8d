from fastapi import APIRouter, Depends, Query

from app.constants import AppointmentOrder
from app.deps import get_store
from app.schemas import MessageOut, PatientAppointmentsOut
from app.services.appointment_service import get_patient_appointments
from app.store import DocumentStore

router = APIRouter(prefix="/appointments", tags=["Appointments"])


@router.get(
    "/{patientId}",
    response_model=PatientAppointmentsOut,
    responses={
        400: {"model": MessageOut, "description": "Invalid patient ID provided"},
        404: {"model": MessageOut, "description": "No appointments found"},
        500: {"model": MessageOut, "description": "Error retrieving appointments"},
    },
)
async def patient_appointments(
    patientId: str,
    order: AppointmentOrder = Query(AppointmentOrder.STORED, description="stored | chronological"),
    store: DocumentStore = Depends(get_store),
):
    """Retrieve detailed appointments for a specific patient."""
    appointments = await get_patient_appointments(store, patientId, order)
    return PatientAppointmentsOut(appointments=appointments)
