# app/system_models/room_model/room_schemas.py
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field


class RoomBase(BaseModel):
    room_name: str = Field(..., min_length=1, max_length=50)
    description: Optional[str] = Field(None, max_length=255)
    capacity: int = Field(1, ge=0)


class RoomCreate(RoomBase):
    pass


class RoomUpdate(BaseModel):
    room_name: Optional[str] = Field(None, min_length=1, max_length=50)
    description: Optional[str] = Field(None, max_length=255)
    capacity: Optional[int] = Field(None, ge=0)


class RoomResponse(RoomBase):
    room_id: int
    created_at: datetime

    class Config:
        from_attributes = True
