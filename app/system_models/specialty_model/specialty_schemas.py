# app/system_models/specialty_model/specialty_schemas.py
from typing import Optional
from pydantic import BaseModel, Field


class SpecialtyBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None


class SpecialtyCreate(SpecialtyBase):
    pass


class SpecialtyUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None


class SpecialtyResponse(SpecialtyBase):
    specialty_id: int

    class Config:
        from_attributes = True
