from typing import Any, Dict, List

from bson import ObjectId
from fastapi.encoders import jsonable_encoder

from app.constants import Collection
from app.exceptions import InternalError, InvalidArgument, NotFound, RecordsAPIError
from app.schemas import PatientOut
from app.store import DocumentStore
from app.utils.logger import get_logger

logger = get_logger("patient_service")


def _full_name(doc: Dict[str, Any]) -> str:
    """firstName + " " + lastName, skipping whichever part is missing."""
    parts = [doc.get("firstName"), doc.get("lastName")]
    return " ".join(str(p) for p in parts if p not in (None, ""))


def to_patient_out(doc: Dict[str, Any]) -> PatientOut:
    return PatientOut(
        UHID=doc["UHID"],
        name=_full_name(doc),
        age=doc.get("age"),
        phoneNumber=doc.get("phoneNumber"),
        totalVisits=doc.get("totalAppointments"),
    )


async def list_patients(store: DocumentStore) -> List[Dict[str, Any]]:
    """Every patient document as stored; ObjectIds rendered as hex strings.

    No paging: the whole collection is returned in store order.
    """
    try:
        docs = await store.find(Collection.PATIENTS.value, {})
        return jsonable_encoder(docs, custom_encoder={ObjectId: str})
    except Exception as e:
        logger.error(f"Error retrieving records: {e}", exc_info=True)
        raise InternalError("Error retrieving records")


async def get_patient(store: DocumentStore, uhid: str) -> PatientOut:
    """Patient projection for a UHID or NotFound."""
    if not isinstance(uhid, str):
        raise InvalidArgument("Invalid UHID")
    try:
        doc = await store.find_one(Collection.PATIENTS.value, {"UHID": uhid})
        if not doc:
            raise NotFound("Record not found")
        return to_patient_out(doc)
    except RecordsAPIError:
        raise
    except Exception as e:
        logger.error(f"Error retrieving record {uhid}: {e}", exc_info=True)
        raise InternalError("Error retrieving record")
