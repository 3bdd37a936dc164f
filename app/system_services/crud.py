# app/system_services/crud.py
"""
Shared data-access helpers.

Every service module goes through these so that constraint violations come
back as ClinicDataError subclasses and lookups of missing rows raise
RecordNotFound.
"""
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional, Sequence

from sqlalchemy import delete, inspect, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.exceptions import RecordNotFound, classify_integrity_error
from config.appconfig import settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def translate_integrity_errors(db: AsyncSession, entity: str) -> AsyncIterator[None]:
    """Roll back and re-raise IntegrityError as a typed ConstraintViolation."""
    try:
        yield
    except IntegrityError as e:
        await db.rollback()
        error = classify_integrity_error(e, entity)
        logger.warning(f"{entity} write rejected ({error.code}): {error.details.get('reason')}")
        raise error from e


def primary_key_of(model) -> Any:
    return inspect(model).primary_key[0]


def page_limit(limit: Optional[int]) -> int:
    if limit is None:
        return settings.DEFAULT_PAGE_SIZE
    return max(1, min(limit, settings.MAX_PAGE_SIZE))


async def get_or_raise(db: AsyncSession, model, pk: Any, entity: str, options: Sequence = ()) -> Any:
    """Load one row by primary key, always reflecting the database state."""
    stmt = (
        select(model)
        .where(primary_key_of(model) == pk)
        .options(*options)
        .execution_options(populate_existing=True)
    )
    result = await db.execute(stmt)
    obj = result.scalars().first()
    if obj is None:
        raise RecordNotFound(entity, pk)
    return obj


async def list_rows(db: AsyncSession, stmt, offset: int = 0, limit: Optional[int] = None) -> list:
    result = await db.execute(stmt.offset(offset).limit(page_limit(limit)))
    return list(result.scalars().all())


async def add_and_commit(db: AsyncSession, obj: Any, entity: str) -> Any:
    async with translate_integrity_errors(db, entity):
        db.add(obj)
        await db.commit()
    logger.info(f"Created {entity} {inspect(obj).identity}")
    return obj


async def update_and_commit(db: AsyncSession, obj: Any, changes: dict, entity: str) -> Any:
    for field, value in changes.items():
        setattr(obj, field, value)
    async with translate_integrity_errors(db, entity):
        await db.commit()
    return obj


async def delete_by_pk(db: AsyncSession, model, pk: Any, entity: str) -> None:
    """Delete with a plain DELETE so the database applies CASCADE / RESTRICT / SET NULL."""
    async with translate_integrity_errors(db, entity):
        result = await db.execute(
            delete(model)
            .where(primary_key_of(model) == pk)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            await db.rollback()
            raise RecordNotFound(entity, pk)
        await db.commit()
    logger.info(f"Deleted {entity} {pk}")
