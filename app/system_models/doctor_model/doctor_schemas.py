# app/system_models/doctor_model/doctor_schemas.py
from typing import Optional, List
from datetime import date, datetime
from pydantic import BaseModel, Field, field_validator

from app.system_models.specialty_model.specialty_schemas import SpecialtyResponse


class DoctorBase(BaseModel):
    user_id: Optional[int] = None
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., max_length=100)
    phone: Optional[str] = Field(None, max_length=30)
    email: Optional[str] = Field(None, max_length=255)
    license_number: str = Field(..., min_length=1, max_length=100)
    hire_date: Optional[date] = None


class DoctorCreate(DoctorBase):
    specialty_ids: List[int] = []

    @field_validator("specialty_ids")
    def dedupe_specialties(cls, v):
        return list(dict.fromkeys(v))


class DoctorUpdate(BaseModel):
    user_id: Optional[int] = None
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=30)
    email: Optional[str] = Field(None, max_length=255)
    license_number: Optional[str] = Field(None, min_length=1, max_length=100)
    hire_date: Optional[date] = None


class DoctorResponse(DoctorBase):
    doctor_id: int
    created_at: datetime
    updated_at: datetime
    specialties: List[SpecialtyResponse] = []

    class Config:
        from_attributes = True


class DoctorSpecialtyResponse(BaseModel):
    doctor_id: int
    specialty_id: int

    class Config:
        from_attributes = True
