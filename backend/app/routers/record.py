from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse
from typing import Any, Dict, List

from app.constants import AppointmentOrder
from app.deps import get_store
from app.exceptions import InternalError
from app.schemas import MessageOut, PatientAppointmentsOut, PatientOut
from app.services import patient_service
from app.services.appointment_service import get_patient_appointments
from app.store import DocumentStore

router = APIRouter(prefix="/record", tags=["Patients"])

_errors = {
    400: {"model": MessageOut, "description": "Invalid identifier"},
    404: {"model": MessageOut, "description": "Not found"},
    500: {"model": MessageOut, "description": "Error retrieving data"},
}


@router.get(
    "",
    response_model=List[Dict[str, Any]],
    responses={500: {"description": "Error retrieving records (plain text)"}},
)
async def list_records(store: DocumentStore = Depends(get_store)):
    """Retrieve all patients."""
    try:
        return await patient_service.list_patients(store)
    except InternalError as e:
        # listing failures are reported as a bare string
        return PlainTextResponse(e.detail, status_code=e.status_code)


@router.get("/appointments/{patientId}", response_model=PatientAppointmentsOut, responses=_errors)
async def record_appointments(
    patientId: str,
    order: AppointmentOrder = Query(AppointmentOrder.STORED, description="stored | chronological"),
    store: DocumentStore = Depends(get_store),
):
    """Retrieve detailed appointments for a specific patient."""
    appointments = await get_patient_appointments(store, patientId, order)
    return PatientAppointmentsOut(appointments=appointments)


@router.get("/{id}", response_model=PatientOut, responses=_errors)
async def get_record(id: str, store: DocumentStore = Depends(get_store)):
    """Retrieve a patient by UHID."""
    return await patient_service.get_patient(store, id)
