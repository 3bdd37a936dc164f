# app/system_models/medication_model/medication_schemas.py
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field


class MedicationBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    manufacturer: Optional[str] = Field(None, max_length=200)
    unit: Optional[str] = Field(None, max_length=50)
    strength: Optional[str] = Field(None, max_length=100)


class MedicationCreate(MedicationBase):
    pass


class MedicationUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    manufacturer: Optional[str] = Field(None, max_length=200)
    unit: Optional[str] = Field(None, max_length=50)
    strength: Optional[str] = Field(None, max_length=100)


class MedicationResponse(MedicationBase):
    medication_id: int
    created_at: datetime

    class Config:
        from_attributes = True
