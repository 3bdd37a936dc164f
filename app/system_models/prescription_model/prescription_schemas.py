# app/system_models/prescription_model/prescription_schemas.py
from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, Field


class PrescriptionItemBase(BaseModel):
    medication_id: int
    dosage: str = Field(..., min_length=1, max_length=100)
    frequency: str = Field(..., min_length=1, max_length=100)
    duration_days: Optional[int] = Field(None, ge=0)
    instructions: Optional[str] = None


class PrescriptionItemCreate(PrescriptionItemBase):
    pass


class PrescriptionItemResponse(PrescriptionItemBase):
    prescription_item_id: int
    prescription_id: int

    class Config:
        from_attributes = True


class PrescriptionBase(BaseModel):
    appointment_id: int
    prescribed_by: int
    notes: Optional[str] = None


class PrescriptionCreate(PrescriptionBase):
    items: List[PrescriptionItemCreate] = []


class PrescriptionUpdate(BaseModel):
    prescribed_by: Optional[int] = None
    notes: Optional[str] = None


class PrescriptionResponse(PrescriptionBase):
    prescription_id: int
    created_at: datetime
    items: List[PrescriptionItemResponse] = []

    class Config:
        from_attributes = True
