from app.models import Doctor, Patient


def _index_options(model, field):
    index_type, options = model.model_fields[field].annotation._indexed
    return options


def test_uhid_index_allows_existing_duplicates():
    assert not _index_options(Patient, "UHID").get("unique")


def test_doctor_appointments_index_targets_patient_id():
    keys = [list(index.document["key"]) for index in Doctor.Settings.indexes]
    assert keys == [["appointments.patientId"]]
