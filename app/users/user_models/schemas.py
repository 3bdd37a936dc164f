# app/users/user_models/schemas.py


from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

# Allowed values as constants
ROLES = Literal["admin", "receptionist", "doctor", "nurse", "pharmacist", "accountant"]


def _normalize_email(v):
    if isinstance(v, str):
        return v.strip().lower()
    return v


# ✅ Request schema for account provisioning
class UserCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=100)
    full_name: str = Field(..., min_length=1, max_length=200)
    role: ROLES = "receptionist"
    is_active: bool = True

    @field_validator("email", mode="before")
    def normalize_email(cls, v):
        return _normalize_email(v)

    @field_validator("username")
    def strip_username(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("username must not be blank")
        return v


# ✅ Request schema for profile edits
class UserUpdate(BaseModel):
    email: Optional[EmailStr] = None
    full_name: Optional[str] = Field(None, min_length=1, max_length=200)
    role: Optional[ROLES] = None

    @field_validator("email", mode="before")
    def normalize_email(cls, v):
        return _normalize_email(v)


# ✅ Request schema for change password
class UserChangePassword(BaseModel):
    new_password: str = Field(..., min_length=8, max_length=100)


# ✅ Response schema for user info
class UserResponse(BaseModel):
    user_id: int
    username: str
    email: str
    full_name: str
    role: ROLES
    is_active: bool
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class UserList(BaseModel):
    users: List[UserResponse]
    total: int
