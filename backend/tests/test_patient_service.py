import pytest
from bson import ObjectId

from app.exceptions import InternalError, InvalidArgument, NotFound
from app.services.patient_service import get_patient, list_patients, to_patient_out
from conftest import FakeStore


@pytest.mark.asyncio
async def test_get_patient_returns_projection(store):
    patient = await get_patient(store, "P1")

    assert patient.model_dump() == {
        "UHID": "P1",
        "name": "Jane Doe",
        "age": 30,
        "phoneNumber": "555",
        "totalVisits": 2,
    }
    assert store.queries == [("patients", {"UHID": "P1"})]


@pytest.mark.asyncio
async def test_get_patient_unknown_uhid(store):
    with pytest.raises(NotFound) as exc:
        await get_patient(store, "NOPE")
    assert exc.value.status_code == 404
    assert exc.value.message == "Record not found"


@pytest.mark.asyncio
async def test_get_patient_empty_uhid_is_looked_up(store):
    # only the type is checked; an empty string simply matches nothing
    with pytest.raises(NotFound):
        await get_patient(store, "")


@pytest.mark.asyncio
@pytest.mark.parametrize("uhid", [123, None, ["P1"], {"UHID": "P1"}])
async def test_get_patient_rejects_non_string(store, uhid):
    with pytest.raises(InvalidArgument) as exc:
        await get_patient(store, uhid)
    assert exc.value.status_code == 400
    assert store.queries == []


@pytest.mark.asyncio
async def test_get_patient_store_failure(failing_store):
    with pytest.raises(InternalError) as exc:
        await get_patient(failing_store, "P1")
    assert exc.value.status_code == 500
    assert exc.value.message == "Error retrieving record"


@pytest.mark.asyncio
async def test_get_patient_passes_stored_values_through():
    store = FakeStore({"patients": [
        {"UHID": "P9", "firstName": "Ann", "age": "30", "phoneNumber": 5550100, "totalAppointments": 2.5}
    ]})

    patient = await get_patient(store, "P9")

    assert patient.age == "30"
    assert patient.phoneNumber == 5550100
    assert patient.totalVisits == 2.5


def test_projection_with_missing_name_parts():
    assert to_patient_out({"UHID": "P5", "firstName": "Cher"}).name == "Cher"
    assert to_patient_out({"UHID": "P6", "lastName": "Prince"}).name == "Prince"
    out = to_patient_out({"UHID": "P7"})
    assert out.name == ""
    assert out.age is None
    assert out.totalVisits is None


@pytest.mark.asyncio
async def test_list_patients_returns_documents_verbatim(store, patients):
    records = await list_patients(store)
    assert records == patients


@pytest.mark.asyncio
async def test_list_patients_empty_store():
    assert await list_patients(FakeStore()) == []


@pytest.mark.asyncio
async def test_list_patients_renders_object_ids():
    oid = ObjectId()
    store = FakeStore({"patients": [{"_id": oid, "UHID": "P1"}]})

    records = await list_patients(store)

    assert records == [{"_id": str(oid), "UHID": "P1"}]


@pytest.mark.asyncio
async def test_list_patients_store_failure(failing_store):
    with pytest.raises(InternalError) as exc:
        await list_patients(failing_store)
    assert exc.value.message == "Error retrieving records"
