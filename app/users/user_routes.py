# app/users/user_routes.py
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.connection import get_db
from app.users import user_services
from app.users.user_models.schemas import ROLES, UserChangePassword, UserCreate, UserList, UserResponse, UserUpdate

router = APIRouter()


# ============================================================
# ✅ CREATE USER
# ============================================================
@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user_endpoint(user_data: UserCreate, db: AsyncSession = Depends(get_db)):
    """Provision a staff account."""
    return await user_services.create_user(db, user_data)


# ============================================================
# ✅ LIST / GET USERS
# ============================================================
@router.get("", response_model=UserList)
async def list_users_endpoint(
    role: Optional[ROLES] = None,
    is_active: Optional[bool] = None,
    offset: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1),
    db: AsyncSession = Depends(get_db),
):
    users, total = await user_services.list_users(db, role=role, is_active=is_active, offset=offset, limit=limit)
    return UserList(users=[UserResponse.model_validate(u) for u in users], total=total)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user_endpoint(user_id: int, db: AsyncSession = Depends(get_db)):
    return await user_services.get_user(db, user_id)


# ============================================================
# ✅ UPDATE USER
# ============================================================
@router.patch("/{user_id}", response_model=UserResponse)
async def update_user_endpoint(user_id: int, changes: UserUpdate, db: AsyncSession = Depends(get_db)):
    return await user_services.update_user(db, user_id, changes)


@router.put("/{user_id}/password", response_model=UserResponse)
async def change_password_endpoint(user_id: int, body: UserChangePassword, db: AsyncSession = Depends(get_db)):
    return await user_services.change_password(db, user_id, body.new_password)


# ============================================================
# ✅ DEACTIVATE / REACTIVATE
# ============================================================
@router.post("/{user_id}/deactivate", response_model=UserResponse)
async def deactivate_user_endpoint(user_id: int, db: AsyncSession = Depends(get_db)):
    return await user_services.set_user_active(db, user_id, False)


@router.post("/{user_id}/reactivate", response_model=UserResponse)
async def reactivate_user_endpoint(user_id: int, db: AsyncSession = Depends(get_db)):
    return await user_services.set_user_active(db, user_id, True)
