# app/system_services/inventory_service.py
import logging
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.helpers.time import today
from app.shared.exceptions import RecordNotFound
from app.system_models.inventory_model.inventory_model import Inventory
from app.system_models.inventory_model.inventory_schemas import InventoryCreate, InventoryRestock, InventoryUpdate
from app.system_services.crud import add_and_commit, delete_by_pk, list_rows, update_and_commit

logger = logging.getLogger(__name__)


async def create_inventory(db: AsyncSession, inventory: InventoryCreate) -> Inventory:
    """Open the stock record of a medication (one per medication)."""
    return await add_and_commit(db, Inventory(**inventory.model_dump()), "inventory")


async def get_inventory_for_medication(db: AsyncSession, medication_id: int) -> Inventory:
    result = await db.execute(
        select(Inventory)
        .where(Inventory.medication_id == medication_id)
        .execution_options(populate_existing=True)
    )
    db_inventory = result.scalars().first()
    if db_inventory is None:
        raise RecordNotFound("inventory for medication", medication_id)
    return db_inventory


async def list_inventory(
    db: AsyncSession,
    low_stock_only: bool = False,
    offset: int = 0,
    limit: Optional[int] = None,
) -> list[Inventory]:
    stmt = select(Inventory).order_by(Inventory.medication_id)
    if low_stock_only:
        stmt = stmt.where(Inventory.quantity_on_hand <= Inventory.reorder_level)
    return await list_rows(db, stmt, offset, limit)


async def update_inventory(db: AsyncSession, medication_id: int, changes: InventoryUpdate) -> Inventory:
    db_inventory = await get_inventory_for_medication(db, medication_id)
    return await update_and_commit(db, db_inventory, changes.model_dump(exclude_unset=True), "inventory")


async def restock(db: AsyncSession, medication_id: int, restock_in: InventoryRestock) -> Inventory:
    """Add received units and stamp the restock date."""
    result = await db.execute(
        update(Inventory)
        .where(Inventory.medication_id == medication_id)
        .values(
            quantity_on_hand=Inventory.quantity_on_hand + restock_in.quantity,
            last_restock=restock_in.restock_date or today(),
        )
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        await db.rollback()
        raise RecordNotFound("inventory for medication", medication_id)
    await db.commit()
    logger.info(f"Restocked medication {medication_id} with {restock_in.quantity} units")
    return await get_inventory_for_medication(db, medication_id)


async def delete_inventory(db: AsyncSession, medication_id: int) -> None:
    db_inventory = await get_inventory_for_medication(db, medication_id)
    await delete_by_pk(db, Inventory, db_inventory.inventory_id, "inventory")
