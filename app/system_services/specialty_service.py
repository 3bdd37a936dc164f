# app/system_services/specialty_service.py
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.system_models.specialty_model.specialty_model import Specialty
from app.system_models.specialty_model.specialty_schemas import SpecialtyCreate, SpecialtyUpdate
from app.system_services.crud import add_and_commit, delete_by_pk, get_or_raise, list_rows, update_and_commit


async def create_specialty(db: AsyncSession, specialty: SpecialtyCreate) -> Specialty:
    """Create a new specialty."""
    return await add_and_commit(db, Specialty(**specialty.model_dump()), "specialty")


async def get_specialty(db: AsyncSession, specialty_id: int) -> Specialty:
    return await get_or_raise(db, Specialty, specialty_id, "specialty")


async def list_specialties(db: AsyncSession, offset: int = 0, limit: Optional[int] = None) -> list[Specialty]:
    return await list_rows(db, select(Specialty).order_by(Specialty.name), offset, limit)


async def update_specialty(db: AsyncSession, specialty_id: int, changes: SpecialtyUpdate) -> Specialty:
    db_specialty = await get_specialty(db, specialty_id)
    return await update_and_commit(db, db_specialty, changes.model_dump(exclude_unset=True), "specialty")


async def delete_specialty(db: AsyncSession, specialty_id: int) -> None:
    """Doctor links to the specialty are removed with it."""
    await delete_by_pk(db, Specialty, specialty_id, "specialty")
