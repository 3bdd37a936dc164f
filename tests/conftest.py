import os

os.environ.setdefault("AUTO_CREATE_TABLES", "false")

from datetime import datetime
from decimal import Decimal
from types import SimpleNamespace

import pytest
from httpx import ASGITransport, AsyncClient

import app.model_registry  # noqa: F401
from app.database.connection import Base, build_engine, build_session_factory, get_db
from app.main import app as clinic_app
from app.system_models.doctor_model.doctor_schemas import DoctorCreate
from app.system_models.medication_model.medication_schemas import MedicationCreate
from app.system_models.patient_model.patient_schemas import PatientCreate
from app.system_models.room_model.room_schemas import RoomCreate
from app.system_models.service_model.service_schemas import ServiceCreate
from app.system_models.specialty_model.specialty_schemas import SpecialtyCreate
from app.system_services import (
    catalog_service,
    doctor_service,
    medication_service,
    patient_service,
    room_service,
    specialty_service,
)
from app.users import user_services
from app.users.user_models.schemas import UserCreate

MONDAY_9AM = datetime(2026, 3, 2, 9, 0)
MONDAY_930AM = datetime(2026, 3, 2, 9, 30)


@pytest.fixture
async def engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'clinic_test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    clinic_app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=clinic_app), base_url="http://test") as ac:
        yield ac
    clinic_app.dependency_overrides.clear()


@pytest.fixture
async def clinic(db):
    """One of everything an appointment needs, as plain ids."""
    user = await user_services.create_user(
        db,
        UserCreate(
            username="frontdesk",
            email="frontdesk@northclinic.org",
            password="s3cret-pass",
            full_name="Front Desk",
        ),
    )
    patient = await patient_service.create_patient(
        db, PatientCreate(first_name="Amina", last_name="Yusuf", national_id="NID-001")
    )
    specialty = await specialty_service.create_specialty(db, SpecialtyCreate(name="Cardiology"))
    doctor = await doctor_service.create_doctor(
        db,
        DoctorCreate(
            first_name="Omar",
            last_name="Haddad",
            license_number="LIC-100",
            specialty_ids=[specialty.specialty_id],
        ),
    )
    room = await room_service.create_room(db, RoomCreate(room_name="Exam 1"))
    service = await catalog_service.create_service(
        db, ServiceCreate(code="CONS", name="Consultation", price=Decimal("40.00"))
    )
    medication = await medication_service.create_medication(
        db, MedicationCreate(name="Amoxicillin", strength="500 mg", unit="capsule")
    )
    return SimpleNamespace(
        user_id=user.user_id,
        patient_id=patient.patient_id,
        specialty_id=specialty.specialty_id,
        doctor_id=doctor.doctor_id,
        room_id=room.room_id,
        service_id=service.service_id,
        medication_id=medication.medication_id,
    )
