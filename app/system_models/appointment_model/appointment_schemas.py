# app/system_models/appointment_model/appointment_schemas.py
from typing import Optional, List, Literal
from datetime import date, datetime, timezone
from decimal import Decimal
from pydantic import BaseModel, Field, field_validator, model_validator

APPOINTMENT_STATUS = Literal["scheduled", "checked_in", "in_progress", "completed", "cancelled", "no_show"]


def _as_naive_utc(v: Optional[datetime]) -> Optional[datetime]:
    # scheduled_start / scheduled_end are stored without a timezone
    if v is not None and v.tzinfo is not None:
        return v.astimezone(timezone.utc).replace(tzinfo=None)
    return v


class AppointmentServiceLine(BaseModel):
    service_id: int
    quantity: int = Field(1, ge=1)
    # None -> copy the service's current catalog price
    unit_price: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)


class AppointmentServiceUpdate(BaseModel):
    quantity: Optional[int] = Field(None, ge=1)
    unit_price: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)


class AppointmentServiceResponse(BaseModel):
    appointment_id: int
    service_id: int
    quantity: int
    unit_price: Decimal

    class Config:
        from_attributes = True


class AppointmentBase(BaseModel):
    patient_id: int
    doctor_id: int
    room_id: Optional[int] = None
    scheduled_start: datetime
    scheduled_end: datetime
    status: APPOINTMENT_STATUS = "scheduled"
    reason: Optional[str] = None
    created_by: Optional[int] = None

    @field_validator("scheduled_start", "scheduled_end")
    def strip_timezone(cls, v):
        return _as_naive_utc(v)

    @model_validator(mode="after")
    def check_times(self):
        if self.scheduled_end <= self.scheduled_start:
            raise ValueError("scheduled_end must be after scheduled_start")
        return self


class AppointmentCreate(AppointmentBase):
    services: List[AppointmentServiceLine] = []

    @field_validator("services")
    def unique_services(cls, v):
        seen = set()
        for line in v:
            if line.service_id in seen:
                raise ValueError(f"service {line.service_id} listed more than once")
            seen.add(line.service_id)
        return v


class AppointmentUpdate(BaseModel):
    patient_id: Optional[int] = None
    doctor_id: Optional[int] = None
    room_id: Optional[int] = None
    scheduled_start: Optional[datetime] = None
    scheduled_end: Optional[datetime] = None
    status: Optional[APPOINTMENT_STATUS] = None
    reason: Optional[str] = None

    @field_validator("scheduled_start", "scheduled_end")
    def strip_timezone(cls, v):
        return _as_naive_utc(v)

    @model_validator(mode="after")
    def check_times(self):
        if self.scheduled_start and self.scheduled_end and self.scheduled_end <= self.scheduled_start:
            raise ValueError("scheduled_end must be after scheduled_start")
        return self


class AppointmentStatusUpdate(BaseModel):
    status: APPOINTMENT_STATUS


class AppointmentResponse(AppointmentBase):
    appointment_id: int
    created_at: datetime
    updated_at: datetime
    service_lines: List[AppointmentServiceResponse] = []

    class Config:
        from_attributes = True


class AppointmentFilter(BaseModel):
    patient_id: Optional[int] = None
    doctor_id: Optional[int] = None
    room_id: Optional[int] = None
    status: Optional[APPOINTMENT_STATUS] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None
