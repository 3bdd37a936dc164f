# app/system_services/appointment_service.py
import logging
from datetime import datetime, time, timedelta
from decimal import Decimal
from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.exceptions import RecordNotFound
from app.system_models.appointment_model.appointment_model import Appointment, AppointmentService
from app.system_models.appointment_model.appointment_schemas import (
    AppointmentCreate,
    AppointmentFilter,
    AppointmentServiceLine,
    AppointmentServiceUpdate,
    AppointmentUpdate,
)
from app.system_services.catalog_service import current_prices
from app.system_services.crud import (
    delete_by_pk,
    get_or_raise,
    list_rows,
    translate_integrity_errors,
    update_and_commit,
)

logger = logging.getLogger(__name__)


async def _resolve_unit_prices(db: AsyncSession, lines: list[AppointmentServiceLine]) -> dict[int, Decimal]:
    """Snapshot the catalog price for every line that did not bring its own."""
    missing = [line.service_id for line in lines if line.unit_price is None]
    prices = await current_prices(db, missing)
    resolved = {}
    for line in lines:
        if line.unit_price is not None:
            resolved[line.service_id] = line.unit_price
        elif line.service_id in prices:
            resolved[line.service_id] = prices[line.service_id]
        else:
            raise RecordNotFound("service", line.service_id)
    return resolved


# ============================================================
# ✅ Appointments
# ============================================================
async def create_appointment(db: AsyncSession, appointment: AppointmentCreate) -> Appointment:
    """Create an appointment and its service lines in one transaction."""
    unit_prices = await _resolve_unit_prices(db, appointment.services)

    db_appointment = Appointment(**appointment.model_dump(exclude={"services"}))
    for line in appointment.services:
        db_appointment.service_lines.append(
            AppointmentService(
                service_id=line.service_id,
                quantity=line.quantity,
                unit_price=unit_prices[line.service_id],
            )
        )

    async with translate_integrity_errors(db, "appointment"):
        db.add(db_appointment)
        await db.commit()
    logger.info(
        f"Booked appointment {db_appointment.appointment_id} for patient {appointment.patient_id} "
        f"with doctor {appointment.doctor_id} ({len(appointment.services)} services)"
    )
    return await get_appointment(db, db_appointment.appointment_id)


async def get_appointment(db: AsyncSession, appointment_id: int) -> Appointment:
    return await get_or_raise(db, Appointment, appointment_id, "appointment")


async def list_appointments(
    db: AsyncSession,
    filters: Optional[AppointmentFilter] = None,
    offset: int = 0,
    limit: Optional[int] = None,
) -> list[Appointment]:
    """Appointments ordered by start time. `date_to` is inclusive."""
    stmt = select(Appointment).order_by(Appointment.scheduled_start, Appointment.appointment_id)
    if filters is not None:
        if filters.patient_id is not None:
            stmt = stmt.where(Appointment.patient_id == filters.patient_id)
        if filters.doctor_id is not None:
            stmt = stmt.where(Appointment.doctor_id == filters.doctor_id)
        if filters.room_id is not None:
            stmt = stmt.where(Appointment.room_id == filters.room_id)
        if filters.status is not None:
            stmt = stmt.where(Appointment.status == filters.status)
        if filters.date_from is not None:
            stmt = stmt.where(Appointment.scheduled_start >= datetime.combine(filters.date_from, time.min))
        if filters.date_to is not None:
            stmt = stmt.where(
                Appointment.scheduled_start < datetime.combine(filters.date_to + timedelta(days=1), time.min)
            )
    return await list_rows(db, stmt, offset, limit)


async def update_appointment(db: AsyncSession, appointment_id: int, changes: AppointmentUpdate) -> Appointment:
    """Reschedule or reassign; the database rejects an end that is not after the start."""
    db_appointment = await get_appointment(db, appointment_id)
    await update_and_commit(db, db_appointment, changes.model_dump(exclude_unset=True), "appointment")
    return await get_appointment(db, appointment_id)


async def set_appointment_status(db: AsyncSession, appointment_id: int, status: str) -> Appointment:
    db_appointment = await get_appointment(db, appointment_id)
    previous = db_appointment.status
    await update_and_commit(db, db_appointment, {"status": status}, "appointment")
    logger.info(f"Appointment {appointment_id} status {previous} -> {status}")
    return await get_appointment(db, appointment_id)


async def delete_appointment(db: AsyncSession, appointment_id: int) -> None:
    """Service lines and the prescription go with it; invoices keep existing without the link."""
    await delete_by_pk(db, Appointment, appointment_id, "appointment")


# ============================================================
# ✅ Appointment service lines
# ============================================================
async def add_service_line(
    db: AsyncSession, appointment_id: int, line: AppointmentServiceLine
) -> AppointmentService:
    unit_prices = await _resolve_unit_prices(db, [line])
    values = {
        "appointment_id": appointment_id,
        "service_id": line.service_id,
        "quantity": line.quantity,
        "unit_price": unit_prices[line.service_id],
    }
    async with translate_integrity_errors(db, "appointment service"):
        await db.execute(insert(AppointmentService).values(**values))
        await db.commit()
    return await _get_service_line(db, appointment_id, line.service_id)


async def update_service_line(
    db: AsyncSession, appointment_id: int, service_id: int, changes: AppointmentServiceUpdate
) -> AppointmentService:
    values = changes.model_dump(exclude_unset=True, exclude_none=True)
    if values:
        async with translate_integrity_errors(db, "appointment service"):
            result = await db.execute(
                update(AppointmentService)
                .where(
                    AppointmentService.appointment_id == appointment_id,
                    AppointmentService.service_id == service_id,
                )
                .values(**values)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                await db.rollback()
                raise RecordNotFound("appointment service", f"{appointment_id}/{service_id}")
            await db.commit()
    return await _get_service_line(db, appointment_id, service_id)


async def remove_service_line(db: AsyncSession, appointment_id: int, service_id: int) -> None:
    result = await db.execute(
        delete(AppointmentService)
        .where(
            AppointmentService.appointment_id == appointment_id,
            AppointmentService.service_id == service_id,
        )
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        await db.rollback()
        raise RecordNotFound("appointment service", f"{appointment_id}/{service_id}")
    await db.commit()


async def _get_service_line(db: AsyncSession, appointment_id: int, service_id: int) -> AppointmentService:
    result = await db.execute(
        select(AppointmentService)
        .where(
            AppointmentService.appointment_id == appointment_id,
            AppointmentService.service_id == service_id,
        )
        .execution_options(populate_existing=True)
    )
    line = result.scalars().first()
    if line is None:
        raise RecordNotFound("appointment service", f"{appointment_id}/{service_id}")
    return line
