# app/system_services/room_service.py
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.system_models.room_model.room_model import Room
from app.system_models.room_model.room_schemas import RoomCreate, RoomUpdate
from app.system_services.crud import add_and_commit, delete_by_pk, get_or_raise, list_rows, update_and_commit


async def create_room(db: AsyncSession, room: RoomCreate) -> Room:
    """Create a new room."""
    return await add_and_commit(db, Room(**room.model_dump()), "room")


async def get_room(db: AsyncSession, room_id: int) -> Room:
    return await get_or_raise(db, Room, room_id, "room")


async def list_rooms(db: AsyncSession, offset: int = 0, limit: Optional[int] = None) -> list[Room]:
    return await list_rows(db, select(Room).order_by(Room.room_name), offset, limit)


async def update_room(db: AsyncSession, room_id: int, changes: RoomUpdate) -> Room:
    db_room = await get_room(db, room_id)
    return await update_and_commit(db, db_room, changes.model_dump(exclude_unset=True), "room")


async def delete_room(db: AsyncSession, room_id: int) -> None:
    # appointments keep their slot, room_id becomes NULL
    await delete_by_pk(db, Room, room_id, "room")
