# app/system_services/medication_service.py
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.system_models.medication_model.medication_model import Medication
from app.system_models.medication_model.medication_schemas import MedicationCreate, MedicationUpdate
from app.system_services.crud import add_and_commit, delete_by_pk, get_or_raise, list_rows, update_and_commit


async def create_medication(db: AsyncSession, medication: MedicationCreate) -> Medication:
    """Create a new medication; (name, strength) must be unique."""
    return await add_and_commit(db, Medication(**medication.model_dump()), "medication")


async def get_medication(db: AsyncSession, medication_id: int) -> Medication:
    return await get_or_raise(db, Medication, medication_id, "medication")


async def list_medications(
    db: AsyncSession,
    search: Optional[str] = None,
    offset: int = 0,
    limit: Optional[int] = None,
) -> list[Medication]:
    stmt = select(Medication).order_by(Medication.name, Medication.strength, Medication.medication_id)
    if search:
        stmt = stmt.where(Medication.name.ilike(f"%{search.strip()}%"))
    return await list_rows(db, stmt, offset, limit)


async def update_medication(db: AsyncSession, medication_id: int, changes: MedicationUpdate) -> Medication:
    db_medication = await get_medication(db, medication_id)
    return await update_and_commit(db, db_medication, changes.model_dump(exclude_unset=True), "medication")


async def delete_medication(db: AsyncSession, medication_id: int) -> None:
    """
    Removes the medication's inventory row and clears it from invoice items.
    Blocked while any prescription item still uses it.
    """
    await delete_by_pk(db, Medication, medication_id, "medication")
