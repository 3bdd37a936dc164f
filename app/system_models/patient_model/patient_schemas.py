# app/system_models/patient_model/patient_schemas.py
from typing import Optional, Literal
from datetime import date, datetime
from pydantic import BaseModel, Field, field_validator

GENDER = Literal["male", "female", "other"]


class PatientBase(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., max_length=100)
    national_id: Optional[str] = Field(None, max_length=50)
    date_of_birth: Optional[date] = None
    gender: Optional[GENDER] = "other"
    phone: Optional[str] = Field(None, max_length=30)
    email: Optional[str] = Field(None, max_length=255)
    address: Optional[str] = None
    emergency_contact_name: Optional[str] = Field(None, max_length=200)
    emergency_contact_phone: Optional[str] = Field(None, max_length=30)


class PatientCreate(PatientBase):
    @field_validator("national_id")
    def blank_national_id_is_none(cls, v):
        # blank national_id is stored as NULL
        if v is not None and not v.strip():
            return None
        return v


class PatientUpdate(BaseModel):
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    national_id: Optional[str] = Field(None, max_length=50)
    date_of_birth: Optional[date] = None
    gender: Optional[GENDER] = None
    phone: Optional[str] = Field(None, max_length=30)
    email: Optional[str] = Field(None, max_length=255)
    address: Optional[str] = None
    emergency_contact_name: Optional[str] = Field(None, max_length=200)
    emergency_contact_phone: Optional[str] = Field(None, max_length=30)

    @field_validator("national_id")
    def blank_national_id_is_none(cls, v):
        if v is not None and not v.strip():
            return None
        return v


class PatientResponse(PatientBase):
    patient_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# patient <-> doctor assignments
class PatientDoctorCreate(BaseModel):
    doctor_id: int
    is_primary: bool = False
    assigned_date: Optional[date] = None


class PatientDoctorResponse(BaseModel):
    patient_id: int
    doctor_id: int
    is_primary: bool
    assigned_date: date

    class Config:
        from_attributes = True
