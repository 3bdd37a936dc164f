# app/system_services/doctor_service.py
import logging
from typing import Optional

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.exceptions import RecordNotFound
from app.system_models.doctor_model.doctor_model import Doctor, DoctorSpecialty
from app.system_models.doctor_model.doctor_schemas import DoctorCreate, DoctorUpdate
from app.system_models.specialty_model.specialty_model import Specialty
from app.system_services.crud import (
    delete_by_pk,
    get_or_raise,
    list_rows,
    translate_integrity_errors,
    update_and_commit,
)

logger = logging.getLogger(__name__)


async def create_doctor(db: AsyncSession, doctor: DoctorCreate) -> Doctor:
    """Create a doctor and its specialty links in one transaction."""
    db_doctor = Doctor(**doctor.model_dump(exclude={"specialty_ids"}))
    async with translate_integrity_errors(db, "doctor"):
        db.add(db_doctor)
        await db.flush()
        for specialty_id in doctor.specialty_ids:
            db.add(DoctorSpecialty(doctor_id=db_doctor.doctor_id, specialty_id=specialty_id))
        await db.commit()
    logger.info(f"Created doctor {db_doctor.doctor_id} with {len(doctor.specialty_ids)} specialties")
    return await get_doctor(db, db_doctor.doctor_id)


async def get_doctor(db: AsyncSession, doctor_id: int) -> Doctor:
    return await get_or_raise(db, Doctor, doctor_id, "doctor")


async def list_doctors(
    db: AsyncSession,
    specialty_id: Optional[int] = None,
    offset: int = 0,
    limit: Optional[int] = None,
) -> list[Doctor]:
    stmt = select(Doctor).order_by(Doctor.last_name, Doctor.first_name, Doctor.doctor_id)
    if specialty_id is not None:
        stmt = stmt.join(DoctorSpecialty, DoctorSpecialty.doctor_id == Doctor.doctor_id).where(
            DoctorSpecialty.specialty_id == specialty_id
        )
    return await list_rows(db, stmt, offset, limit)


async def update_doctor(db: AsyncSession, doctor_id: int, changes: DoctorUpdate) -> Doctor:
    db_doctor = await get_doctor(db, doctor_id)
    await update_and_commit(db, db_doctor, changes.model_dump(exclude_unset=True), "doctor")
    return await get_doctor(db, doctor_id)


async def delete_doctor(db: AsyncSession, doctor_id: int) -> None:
    """Blocked while appointments or prescriptions reference the doctor."""
    await delete_by_pk(db, Doctor, doctor_id, "doctor")


# ============================================================
# ✅ Doctor <-> specialty links
# ============================================================
async def add_doctor_specialty(db: AsyncSession, doctor_id: int, specialty_id: int) -> DoctorSpecialty:
    async with translate_integrity_errors(db, "doctor specialty"):
        await db.execute(insert(DoctorSpecialty).values(doctor_id=doctor_id, specialty_id=specialty_id))
        await db.commit()
    return DoctorSpecialty(doctor_id=doctor_id, specialty_id=specialty_id)


async def remove_doctor_specialty(db: AsyncSession, doctor_id: int, specialty_id: int) -> None:
    result = await db.execute(
        delete(DoctorSpecialty)
        .where(DoctorSpecialty.doctor_id == doctor_id, DoctorSpecialty.specialty_id == specialty_id)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        await db.rollback()
        raise RecordNotFound("doctor specialty", f"{doctor_id}/{specialty_id}")
    await db.commit()


async def list_doctor_specialties(db: AsyncSession, doctor_id: int) -> list[Specialty]:
    await get_doctor(db, doctor_id)
    result = await db.execute(
        select(Specialty)
        .join(DoctorSpecialty, DoctorSpecialty.specialty_id == Specialty.specialty_id)
        .where(DoctorSpecialty.doctor_id == doctor_id)
        .order_by(Specialty.name)
    )
    return list(result.scalars().all())
