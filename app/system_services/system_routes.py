# app/system_services/system_routes.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.connection import get_db
from app.system_models.doctor_model.doctor_schemas import (
    DoctorCreate,
    DoctorResponse,
    DoctorSpecialtyResponse,
    DoctorUpdate,
)
from app.system_models.patient_model.patient_schemas import (
    PatientCreate,
    PatientDoctorCreate,
    PatientDoctorResponse,
    PatientResponse,
    PatientUpdate,
)
from app.system_models.room_model.room_schemas import RoomCreate, RoomResponse, RoomUpdate
from app.system_models.service_model.service_schemas import ServiceCreate, ServiceResponse, ServiceUpdate
from app.system_models.specialty_model.specialty_schemas import SpecialtyCreate, SpecialtyResponse, SpecialtyUpdate
from app.system_services import catalog_service, doctor_service, patient_service, room_service, specialty_service

router = APIRouter()


# ============================================================
# ✅ Patients
# ============================================================
@router.post("/patients", response_model=PatientResponse, status_code=status.HTTP_201_CREATED)
async def create_patient_endpoint(patient: PatientCreate, db: AsyncSession = Depends(get_db)):
    """Register a new patient."""
    return await patient_service.create_patient(db, patient)


@router.get("/patients", response_model=List[PatientResponse])
async def list_patients_endpoint(
    search: Optional[str] = None,
    offset: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1),
    db: AsyncSession = Depends(get_db),
):
    return await patient_service.list_patients(db, search=search, offset=offset, limit=limit)


@router.get("/patients/{patient_id}", response_model=PatientResponse)
async def get_patient_endpoint(patient_id: int, db: AsyncSession = Depends(get_db)):
    return await patient_service.get_patient(db, patient_id)


@router.patch("/patients/{patient_id}", response_model=PatientResponse)
async def update_patient_endpoint(patient_id: int, changes: PatientUpdate, db: AsyncSession = Depends(get_db)):
    return await patient_service.update_patient(db, patient_id, changes)


@router.delete("/patients/{patient_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_patient_endpoint(patient_id: int, db: AsyncSession = Depends(get_db)):
    await patient_service.delete_patient(db, patient_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/patients/{patient_id}/doctors",
    response_model=PatientDoctorResponse,
    status_code=status.HTTP_201_CREATED,
)
async def assign_doctor_endpoint(
    patient_id: int, assignment: PatientDoctorCreate, db: AsyncSession = Depends(get_db)
):
    """Assign a doctor to a patient."""
    return await patient_service.assign_doctor(db, patient_id, assignment)


@router.get("/patients/{patient_id}/doctors", response_model=List[PatientDoctorResponse])
async def list_patient_doctors_endpoint(patient_id: int, db: AsyncSession = Depends(get_db)):
    return await patient_service.list_patient_doctors(db, patient_id)


@router.delete("/patients/{patient_id}/doctors/{doctor_id}", status_code=status.HTTP_204_NO_CONTENT)
async def unassign_doctor_endpoint(patient_id: int, doctor_id: int, db: AsyncSession = Depends(get_db)):
    await patient_service.unassign_doctor(db, patient_id, doctor_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================
# ✅ Specialties
# ============================================================
@router.post("/specialties", response_model=SpecialtyResponse, status_code=status.HTTP_201_CREATED)
async def create_specialty_endpoint(specialty: SpecialtyCreate, db: AsyncSession = Depends(get_db)):
    return await specialty_service.create_specialty(db, specialty)


@router.get("/specialties", response_model=List[SpecialtyResponse])
async def list_specialties_endpoint(
    offset: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1),
    db: AsyncSession = Depends(get_db),
):
    return await specialty_service.list_specialties(db, offset=offset, limit=limit)


@router.get("/specialties/{specialty_id}", response_model=SpecialtyResponse)
async def get_specialty_endpoint(specialty_id: int, db: AsyncSession = Depends(get_db)):
    return await specialty_service.get_specialty(db, specialty_id)


@router.patch("/specialties/{specialty_id}", response_model=SpecialtyResponse)
async def update_specialty_endpoint(
    specialty_id: int, changes: SpecialtyUpdate, db: AsyncSession = Depends(get_db)
):
    return await specialty_service.update_specialty(db, specialty_id, changes)


@router.delete("/specialties/{specialty_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_specialty_endpoint(specialty_id: int, db: AsyncSession = Depends(get_db)):
    await specialty_service.delete_specialty(db, specialty_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================
# ✅ Doctors
# ============================================================
@router.post("/doctors", response_model=DoctorResponse, status_code=status.HTTP_201_CREATED)
async def create_doctor_endpoint(doctor: DoctorCreate, db: AsyncSession = Depends(get_db)):
    """Create a doctor, optionally with its specialties."""
    return await doctor_service.create_doctor(db, doctor)


@router.get("/doctors", response_model=List[DoctorResponse])
async def list_doctors_endpoint(
    specialty_id: Optional[int] = None,
    offset: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1),
    db: AsyncSession = Depends(get_db),
):
    return await doctor_service.list_doctors(db, specialty_id=specialty_id, offset=offset, limit=limit)


@router.get("/doctors/{doctor_id}", response_model=DoctorResponse)
async def get_doctor_endpoint(doctor_id: int, db: AsyncSession = Depends(get_db)):
    return await doctor_service.get_doctor(db, doctor_id)


@router.patch("/doctors/{doctor_id}", response_model=DoctorResponse)
async def update_doctor_endpoint(doctor_id: int, changes: DoctorUpdate, db: AsyncSession = Depends(get_db)):
    return await doctor_service.update_doctor(db, doctor_id, changes)


@router.delete("/doctors/{doctor_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_doctor_endpoint(doctor_id: int, db: AsyncSession = Depends(get_db)):
    await doctor_service.delete_doctor(db, doctor_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/doctors/{doctor_id}/specialties", response_model=List[SpecialtyResponse])
async def list_doctor_specialties_endpoint(doctor_id: int, db: AsyncSession = Depends(get_db)):
    return await doctor_service.list_doctor_specialties(db, doctor_id)


@router.put(
    "/doctors/{doctor_id}/specialties/{specialty_id}",
    response_model=DoctorSpecialtyResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_doctor_specialty_endpoint(doctor_id: int, specialty_id: int, db: AsyncSession = Depends(get_db)):
    return await doctor_service.add_doctor_specialty(db, doctor_id, specialty_id)


@router.delete("/doctors/{doctor_id}/specialties/{specialty_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_doctor_specialty_endpoint(doctor_id: int, specialty_id: int, db: AsyncSession = Depends(get_db)):
    await doctor_service.remove_doctor_specialty(db, doctor_id, specialty_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================
# ✅ Rooms
# ============================================================
@router.post("/rooms", response_model=RoomResponse, status_code=status.HTTP_201_CREATED)
async def create_room_endpoint(room: RoomCreate, db: AsyncSession = Depends(get_db)):
    return await room_service.create_room(db, room)


@router.get("/rooms", response_model=List[RoomResponse])
async def list_rooms_endpoint(
    offset: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1),
    db: AsyncSession = Depends(get_db),
):
    return await room_service.list_rooms(db, offset=offset, limit=limit)


@router.get("/rooms/{room_id}", response_model=RoomResponse)
async def get_room_endpoint(room_id: int, db: AsyncSession = Depends(get_db)):
    return await room_service.get_room(db, room_id)


@router.patch("/rooms/{room_id}", response_model=RoomResponse)
async def update_room_endpoint(room_id: int, changes: RoomUpdate, db: AsyncSession = Depends(get_db)):
    return await room_service.update_room(db, room_id, changes)


@router.delete("/rooms/{room_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_room_endpoint(room_id: int, db: AsyncSession = Depends(get_db)):
    await room_service.delete_room(db, room_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================
# ✅ Service catalog
# ============================================================
@router.post("/services", response_model=ServiceResponse, status_code=status.HTTP_201_CREATED)
async def create_service_endpoint(service: ServiceCreate, db: AsyncSession = Depends(get_db)):
    return await catalog_service.create_service(db, service)


@router.get("/services", response_model=List[ServiceResponse])
async def list_services_endpoint(
    search: Optional[str] = None,
    offset: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1),
    db: AsyncSession = Depends(get_db),
):
    return await catalog_service.list_services(db, search=search, offset=offset, limit=limit)


@router.get("/services/{service_id}", response_model=ServiceResponse)
async def get_service_endpoint(service_id: int, db: AsyncSession = Depends(get_db)):
    return await catalog_service.get_service(db, service_id)


@router.patch("/services/{service_id}", response_model=ServiceResponse)
async def update_service_endpoint(service_id: int, changes: ServiceUpdate, db: AsyncSession = Depends(get_db)):
    return await catalog_service.update_service(db, service_id, changes)


@router.delete("/services/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_service_endpoint(service_id: int, db: AsyncSession = Depends(get_db)):
    await catalog_service.delete_service(db, service_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
