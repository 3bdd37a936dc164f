# app/users/user_services.py
import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.system_services.crud import add_and_commit, get_or_raise, list_rows, update_and_commit
from app.users.security import get_password_hash
from app.users.user_models.schemas import UserCreate, UserUpdate
from app.users.user_models.user_model import User

logger = logging.getLogger(__name__)


# ============================================================
# ✅ PROVISION A NEW STAFF ACCOUNT
# ============================================================
async def create_user(db: AsyncSession, user_data: UserCreate) -> User:
    new_user = User(
        username=user_data.username,
        email=user_data.email,
        password_hash=get_password_hash(user_data.password),
        full_name=user_data.full_name,
        role=user_data.role,
        is_active=user_data.is_active,
    )
    return await add_and_commit(db, new_user, "user")


async def get_user(db: AsyncSession, user_id: int) -> User:
    return await get_or_raise(db, User, user_id, "user")


async def get_user_by_username(db: AsyncSession, username: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.username == username))
    return result.scalars().first()


async def list_users(
    db: AsyncSession,
    role: Optional[str] = None,
    is_active: Optional[bool] = None,
    offset: int = 0,
    limit: Optional[int] = None,
) -> tuple[list[User], int]:
    stmt = select(User)
    if role is not None:
        stmt = stmt.where(User.role == role)
    if is_active is not None:
        stmt = stmt.where(User.is_active == is_active)

    total = (await db.execute(select(func.count()).select_from(stmt.subquery()))).scalar_one()
    users = await list_rows(db, stmt.order_by(User.username), offset, limit)
    return users, total


# ============================================================
# ✅ UPDATE PROFILE
# ============================================================
async def update_user(db: AsyncSession, user_id: int, changes: UserUpdate) -> User:
    user = await get_user(db, user_id)
    return await update_and_commit(db, user, changes.model_dump(exclude_unset=True, exclude_none=True), "user")


# ============================================================
# ✅ CHANGE/UPDATE PASSWORD
# ============================================================
async def change_password(db: AsyncSession, user_id: int, new_password: str) -> User:
    user = await get_user(db, user_id)
    return await update_and_commit(db, user, {"password_hash": get_password_hash(new_password)}, "user")


# ============================================================
# ✅ DEACTIVATE / REACTIVATE (accounts are never deleted)
# ============================================================
async def set_user_active(db: AsyncSession, user_id: int, is_active: bool) -> User:
    user = await get_user(db, user_id)
    await update_and_commit(db, user, {"is_active": is_active}, "user")
    logger.info(f"User {user_id} {'reactivated' if is_active else 'deactivated'}")
    return user
