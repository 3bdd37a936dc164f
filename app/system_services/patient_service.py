# app/system_services/patient_service.py
from typing import Optional

from sqlalchemy import delete, insert, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.helpers.time import today
from app.shared.exceptions import RecordNotFound
from app.system_models.patient_model.patient_model import Patient, PatientDoctor
from app.system_models.patient_model.patient_schemas import PatientCreate, PatientDoctorCreate, PatientUpdate
from app.system_services.crud import (
    add_and_commit,
    delete_by_pk,
    get_or_raise,
    list_rows,
    translate_integrity_errors,
    update_and_commit,
)


async def create_patient(db: AsyncSession, patient: PatientCreate) -> Patient:
    """Register a new patient."""
    db_patient = Patient(**patient.model_dump())
    return await add_and_commit(db, db_patient, "patient")


async def get_patient(db: AsyncSession, patient_id: int) -> Patient:
    return await get_or_raise(db, Patient, patient_id, "patient")


async def list_patients(
    db: AsyncSession,
    search: Optional[str] = None,
    offset: int = 0,
    limit: Optional[int] = None,
) -> list[Patient]:
    """Patients ordered by last name, first name; `search` matches either name or the national ID."""
    stmt = select(Patient).order_by(Patient.last_name, Patient.first_name, Patient.patient_id)
    if search:
        pattern = f"%{search.strip()}%"
        stmt = stmt.where(
            or_(
                Patient.first_name.ilike(pattern),
                Patient.last_name.ilike(pattern),
                Patient.national_id.ilike(pattern),
            )
        )
    return await list_rows(db, stmt, offset, limit)


async def update_patient(db: AsyncSession, patient_id: int, changes: PatientUpdate) -> Patient:
    db_patient = await get_patient(db, patient_id)
    return await update_and_commit(db, db_patient, changes.model_dump(exclude_unset=True), "patient")


async def delete_patient(db: AsyncSession, patient_id: int) -> None:
    """Fails with ForeignKeyViolation while appointments or invoices reference the patient."""
    await delete_by_pk(db, Patient, patient_id, "patient")


# ============================================================
# ✅ Patient <-> doctor assignments
# ============================================================
async def assign_doctor(db: AsyncSession, patient_id: int, assignment: PatientDoctorCreate) -> PatientDoctor:
    values = {
        "patient_id": patient_id,
        "doctor_id": assignment.doctor_id,
        "is_primary": assignment.is_primary,
        "assigned_date": assignment.assigned_date or today(),
    }
    async with translate_integrity_errors(db, "patient doctor assignment"):
        await db.execute(insert(PatientDoctor).values(**values))
        await db.commit()
    return await _get_assignment(db, patient_id, assignment.doctor_id)


async def list_patient_doctors(db: AsyncSession, patient_id: int) -> list[PatientDoctor]:
    await get_patient(db, patient_id)
    result = await db.execute(
        select(PatientDoctor)
        .where(PatientDoctor.patient_id == patient_id)
        .order_by(PatientDoctor.is_primary.desc(), PatientDoctor.assigned_date)
        .execution_options(populate_existing=True)
    )
    return list(result.scalars().all())


async def unassign_doctor(db: AsyncSession, patient_id: int, doctor_id: int) -> None:
    result = await db.execute(
        delete(PatientDoctor)
        .where(PatientDoctor.patient_id == patient_id, PatientDoctor.doctor_id == doctor_id)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        await db.rollback()
        raise RecordNotFound("patient doctor assignment", f"{patient_id}/{doctor_id}")
    await db.commit()


async def _get_assignment(db: AsyncSession, patient_id: int, doctor_id: int) -> PatientDoctor:
    result = await db.execute(
        select(PatientDoctor)
        .where(PatientDoctor.patient_id == patient_id, PatientDoctor.doctor_id == doctor_id)
        .execution_options(populate_existing=True)
    )
    link = result.scalars().first()
    if link is None:
        raise RecordNotFound("patient doctor assignment", f"{patient_id}/{doctor_id}")
    return link
