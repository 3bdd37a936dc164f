# app/system_services/catalog_service.py
"""Billable service catalog (consultations, lab tests, procedures)."""
from decimal import Decimal
from typing import Iterable, Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.system_models.service_model.service_model import Service
from app.system_models.service_model.service_schemas import ServiceCreate, ServiceUpdate
from app.system_services.crud import add_and_commit, delete_by_pk, get_or_raise, list_rows, update_and_commit


async def create_service(db: AsyncSession, service: ServiceCreate) -> Service:
    return await add_and_commit(db, Service(**service.model_dump()), "service")


async def get_service(db: AsyncSession, service_id: int) -> Service:
    return await get_or_raise(db, Service, service_id, "service")


async def get_service_by_code(db: AsyncSession, code: str) -> Optional[Service]:
    result = await db.execute(select(Service).where(Service.code == code))
    return result.scalars().first()


async def list_services(
    db: AsyncSession,
    search: Optional[str] = None,
    offset: int = 0,
    limit: Optional[int] = None,
) -> list[Service]:
    stmt = select(Service).order_by(Service.name, Service.service_id)
    if search:
        pattern = f"%{search.strip()}%"
        stmt = stmt.where(or_(Service.name.ilike(pattern), Service.code.ilike(pattern)))
    return await list_rows(db, stmt, offset, limit)


async def update_service(db: AsyncSession, service_id: int, changes: ServiceUpdate) -> Service:
    """Price changes do not touch unit prices already copied onto appointments."""
    db_service = await get_service(db, service_id)
    return await update_and_commit(db, db_service, changes.model_dump(exclude_unset=True), "service")


async def delete_service(db: AsyncSession, service_id: int) -> None:
    """Blocked while booked on an appointment; invoice items lose the reference."""
    await delete_by_pk(db, Service, service_id, "service")


async def current_prices(db: AsyncSession, service_ids: Iterable[int]) -> dict[int, Decimal]:
    ids = set(service_ids)
    if not ids:
        return {}
    result = await db.execute(select(Service.service_id, Service.price).where(Service.service_id.in_(ids)))
    return {service_id: price for service_id, price in result.all()}
