"""
Seed script to populate database with demo data
Creates: patients, doctors with embedded appointments

Run with: python -m app.scripts.seed_demo_data
"""
import asyncio
from datetime import date, timedelta

from app.config import get_settings
from app.database import init_db, close_db
from app.models import Patient, Doctor, DoctorAppointment


DEMO_PATIENTS = [
    {"UHID": "P1", "firstName": "Jane", "lastName": "Doe", "age": 30, "phoneNumber": "555-0101"},
    {"UHID": "P2", "firstName": "John", "lastName": "Smith", "age": 45, "phoneNumber": "555-0102"},
    {"UHID": "P3", "firstName": "Amira", "lastName": "Hassan", "age": 27, "phoneNumber": "555-0103"},
    {"UHID": "P4", "firstName": "Liam", "lastName": "Brown", "age": 61, "phoneNumber": "555-0104"},
]

DEMO_DOCTORS = [
    {"name": "Dr. Xavier Reed", "dept_name": "Cardiology"},
    {"name": "Dr. Mei Lin", "dept_name": "Dermatology"},
    {"name": "Dr. Omar Said", "dept_name": "Orthopedics"},
]

# (doctor index, patient UHID, days from today, time)
DEMO_BOOKINGS = [
    (0, "P1", 3, "10:00"),
    (0, "P2", 3, "10:30"),
    (0, "P1", 17, "09:00"),
    (1, "P3", 5, "14:00"),
    (1, "P1", 8, "11:15"),
    (2, "P4", 1, "16:45"),
]


async def create_demo_patients() -> list[Patient]:
    print("\n=== Creating Patients ===")
    patients = []
    for data in DEMO_PATIENTS:
        existing = await Patient.find_one(Patient.UHID == data["UHID"])
        if existing:
            print(f"[SKIP] Patient '{data['UHID']}' already exists")
            patients.append(existing)
            continue
        total = sum(1 for _, uhid, _, _ in DEMO_BOOKINGS if uhid == data["UHID"])
        patient = Patient(**data, totalAppointments=total)
        await patient.insert()
        print(f"[OK] Created patient {patient.UHID}: {patient.firstName} {patient.lastName}")
        patients.append(patient)
    return patients


async def create_demo_doctors() -> list[Doctor]:
    print("\n=== Creating Doctors ===")
    today = date.today()
    doctors = []
    for index, data in enumerate(DEMO_DOCTORS):
        existing = await Doctor.find_one(Doctor.name == data["name"])
        if existing:
            print(f"[SKIP] Doctor '{data['name']}' already exists")
            doctors.append(existing)
            continue
        appointments = [
            DoctorAppointment(
                patientId=uhid,
                appointmentDate=(today + timedelta(days=days)).isoformat(),
                appointmentTime=at,
            )
            for doctor_index, uhid, days, at in DEMO_BOOKINGS
            if doctor_index == index
        ]
        doctor = Doctor(**data, appointments=appointments)
        await doctor.insert()
        print(f"[OK] Created {doctor.name} ({doctor.dept_name}) with {len(appointments)} appointment(s)")
        doctors.append(doctor)
    return doctors


async def main():
    """Main function"""
    print("=" * 50)
    print("Starting Demo Data Seeding")
    print("=" * 50)

    settings = get_settings()
    print(f"\nMongoDB URI: {settings.MONGODB_URI}")

    await init_db()
    print("[OK] Connected to database")

    try:
        patients = await create_demo_patients()
        await create_demo_doctors()

        print("\n" + "=" * 50)
        print("[SUCCESS] Demo data seeding completed!")
        print("=" * 50)
        print("\nTry:")
        for patient in patients[:2]:
            print(f"  GET http://localhost:{settings.PORT}/record/{patient.UHID}")
            print(f"  GET http://localhost:{settings.PORT}/record/appointments/{patient.UHID}")
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio.run(main())
