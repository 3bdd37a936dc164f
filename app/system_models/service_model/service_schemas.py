# app/system_models/service_model/service_schemas.py
from typing import Optional
from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field


class ServiceBase(BaseModel):
    code: str = Field(..., min_length=1, max_length=30)
    name: str = Field(..., min_length=1, max_length=150)
    description: Optional[str] = None
    price: Decimal = Field(Decimal("0.00"), ge=0, max_digits=12, decimal_places=2)
    duration_minutes: int = Field(30, ge=0)


class ServiceCreate(ServiceBase):
    pass


class ServiceUpdate(BaseModel):
    code: Optional[str] = Field(None, min_length=1, max_length=30)
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    duration_minutes: Optional[int] = Field(None, ge=0)


class ServiceResponse(ServiceBase):
    service_id: int
    created_at: datetime

    class Config:
        from_attributes = True
