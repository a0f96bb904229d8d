from beanie import Document, Indexed


class Patient(Document):
    """Patient record, keyed by UHID.
    - Written by other systems; this API only reads it.
    - totalAppointments is a counter maintained by the writer.
    """
    # non-unique: the collection is owned by the writer and may hold duplicates
    UHID: Indexed(str)
    firstName: str | None = None
    lastName: str | None = None
    age: int | None = None
    phoneNumber: str | None = None
    totalAppointments: int = 0

    class Settings:
        name = "patients"
