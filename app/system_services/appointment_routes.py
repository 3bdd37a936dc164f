# app/system_services/appointment_routes.py
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.connection import get_db
from app.system_models.appointment_model.appointment_schemas import (
    APPOINTMENT_STATUS,
    AppointmentCreate,
    AppointmentFilter,
    AppointmentResponse,
    AppointmentServiceLine,
    AppointmentServiceResponse,
    AppointmentServiceUpdate,
    AppointmentStatusUpdate,
    AppointmentUpdate,
)
from app.system_services import appointment_service

router = APIRouter()


@router.post("", response_model=AppointmentResponse, status_code=status.HTTP_201_CREATED)
async def create_appointment_endpoint(appointment: AppointmentCreate, db: AsyncSession = Depends(get_db)):
    """Book an appointment together with the services it includes."""
    return await appointment_service.create_appointment(db, appointment)


@router.get("", response_model=List[AppointmentResponse])
async def list_appointments_endpoint(
    patient_id: Optional[int] = None,
    doctor_id: Optional[int] = None,
    room_id: Optional[int] = None,
    status_filter: Optional[APPOINTMENT_STATUS] = Query(None, alias="status"),
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    offset: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1),
    db: AsyncSession = Depends(get_db),
):
    filters = AppointmentFilter(
        patient_id=patient_id,
        doctor_id=doctor_id,
        room_id=room_id,
        status=status_filter,
        date_from=date_from,
        date_to=date_to,
    )
    return await appointment_service.list_appointments(db, filters, offset=offset, limit=limit)


@router.get("/{appointment_id}", response_model=AppointmentResponse)
async def get_appointment_endpoint(appointment_id: int, db: AsyncSession = Depends(get_db)):
    return await appointment_service.get_appointment(db, appointment_id)


@router.patch("/{appointment_id}", response_model=AppointmentResponse)
async def update_appointment_endpoint(
    appointment_id: int, changes: AppointmentUpdate, db: AsyncSession = Depends(get_db)
):
    return await appointment_service.update_appointment(db, appointment_id, changes)


@router.put("/{appointment_id}/status", response_model=AppointmentResponse)
async def set_appointment_status_endpoint(
    appointment_id: int, body: AppointmentStatusUpdate, db: AsyncSession = Depends(get_db)
):
    return await appointment_service.set_appointment_status(db, appointment_id, body.status)


@router.delete("/{appointment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_appointment_endpoint(appointment_id: int, db: AsyncSession = Depends(get_db)):
    await appointment_service.delete_appointment(db, appointment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================
# ✅ Service lines
# ============================================================
@router.post(
    "/{appointment_id}/services",
    response_model=AppointmentServiceResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_service_line_endpoint(
    appointment_id: int, line: AppointmentServiceLine, db: AsyncSession = Depends(get_db)
):
    return await appointment_service.add_service_line(db, appointment_id, line)


@router.patch("/{appointment_id}/services/{service_id}", response_model=AppointmentServiceResponse)
async def update_service_line_endpoint(
    appointment_id: int,
    service_id: int,
    changes: AppointmentServiceUpdate,
    db: AsyncSession = Depends(get_db),
):
    return await appointment_service.update_service_line(db, appointment_id, service_id, changes)


@router.delete("/{appointment_id}/services/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_service_line_endpoint(appointment_id: int, service_id: int, db: AsyncSession = Depends(get_db)):
    await appointment_service.remove_service_line(db, appointment_id, service_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
