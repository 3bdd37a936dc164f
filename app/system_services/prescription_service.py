# app/system_services/prescription_service.py
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.exceptions import RecordNotFound
from app.system_models.prescription_model.prescription_model import Prescription, PrescriptionItem
from app.system_models.prescription_model.prescription_schemas import (
    PrescriptionCreate,
    PrescriptionItemCreate,
    PrescriptionUpdate,
)
from app.system_services.crud import (
    add_and_commit,
    delete_by_pk,
    get_or_raise,
    translate_integrity_errors,
    update_and_commit,
)


async def create_prescription(db: AsyncSession, prescription: PrescriptionCreate) -> Prescription:
    """Create the (single) prescription of an appointment together with its items."""
    db_prescription = Prescription(**prescription.model_dump(exclude={"items"}))
    for item in prescription.items:
        db_prescription.items.append(PrescriptionItem(**item.model_dump()))

    async with translate_integrity_errors(db, "prescription"):
        db.add(db_prescription)
        await db.commit()
    return await get_prescription(db, db_prescription.prescription_id)


async def get_prescription(db: AsyncSession, prescription_id: int) -> Prescription:
    return await get_or_raise(db, Prescription, prescription_id, "prescription")


async def get_prescription_for_appointment(db: AsyncSession, appointment_id: int) -> Prescription:
    result = await db.execute(
        select(Prescription)
        .where(Prescription.appointment_id == appointment_id)
        .execution_options(populate_existing=True)
    )
    db_prescription = result.scalars().first()
    if db_prescription is None:
        raise RecordNotFound("prescription for appointment", appointment_id)
    return db_prescription


async def update_prescription(db: AsyncSession, prescription_id: int, changes: PrescriptionUpdate) -> Prescription:
    db_prescription = await get_prescription(db, prescription_id)
    await update_and_commit(db, db_prescription, changes.model_dump(exclude_unset=True), "prescription")
    return await get_prescription(db, prescription_id)


async def delete_prescription(db: AsyncSession, prescription_id: int) -> None:
    await delete_by_pk(db, Prescription, prescription_id, "prescription")


async def add_prescription_item(
    db: AsyncSession, prescription_id: int, item: PrescriptionItemCreate
) -> PrescriptionItem:
    db_item = PrescriptionItem(prescription_id=prescription_id, **item.model_dump())
    return await add_and_commit(db, db_item, "prescription item")


async def remove_prescription_item(db: AsyncSession, prescription_id: int, prescription_item_id: int) -> None:
    db_item = await get_or_raise(db, PrescriptionItem, prescription_item_id, "prescription item")
    if db_item.prescription_id != prescription_id:
        raise RecordNotFound("prescription item", prescription_item_id)
    await delete_by_pk(db, PrescriptionItem, prescription_item_id, "prescription item")
