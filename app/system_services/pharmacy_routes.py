# app/system_services/pharmacy_routes.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.connection import get_db
from app.system_models.inventory_model.inventory_schemas import (
    InventoryCreate,
    InventoryResponse,
    InventoryRestock,
    InventoryUpdate,
)
from app.system_models.medication_model.medication_schemas import (
    MedicationCreate,
    MedicationResponse,
    MedicationUpdate,
)
from app.system_models.prescription_model.prescription_schemas import (
    PrescriptionCreate,
    PrescriptionItemCreate,
    PrescriptionItemResponse,
    PrescriptionResponse,
    PrescriptionUpdate,
)
from app.system_services import inventory_service, medication_service, prescription_service

router = APIRouter()


# ============================================================
# ✅ Medications
# ============================================================
@router.post("/medications", response_model=MedicationResponse, status_code=status.HTTP_201_CREATED)
async def create_medication_endpoint(medication: MedicationCreate, db: AsyncSession = Depends(get_db)):
    return await medication_service.create_medication(db, medication)


@router.get("/medications", response_model=List[MedicationResponse])
async def list_medications_endpoint(
    search: Optional[str] = None,
    offset: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1),
    db: AsyncSession = Depends(get_db),
):
    return await medication_service.list_medications(db, search=search, offset=offset, limit=limit)


@router.get("/medications/{medication_id}", response_model=MedicationResponse)
async def get_medication_endpoint(medication_id: int, db: AsyncSession = Depends(get_db)):
    return await medication_service.get_medication(db, medication_id)


@router.patch("/medications/{medication_id}", response_model=MedicationResponse)
async def update_medication_endpoint(
    medication_id: int, changes: MedicationUpdate, db: AsyncSession = Depends(get_db)
):
    return await medication_service.update_medication(db, medication_id, changes)


@router.delete("/medications/{medication_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_medication_endpoint(medication_id: int, db: AsyncSession = Depends(get_db)):
    await medication_service.delete_medication(db, medication_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================
# ✅ Inventory
# ============================================================
@router.post("/inventory", response_model=InventoryResponse, status_code=status.HTTP_201_CREATED)
async def create_inventory_endpoint(inventory: InventoryCreate, db: AsyncSession = Depends(get_db)):
    return await inventory_service.create_inventory(db, inventory)


@router.get("/inventory", response_model=List[InventoryResponse])
async def list_inventory_endpoint(
    low_stock: bool = False,
    offset: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1),
    db: AsyncSession = Depends(get_db),
):
    """Stock records; `low_stock=true` keeps only rows at or below their reorder level."""
    return await inventory_service.list_inventory(db, low_stock_only=low_stock, offset=offset, limit=limit)


@router.get("/medications/{medication_id}/inventory", response_model=InventoryResponse)
async def get_inventory_endpoint(medication_id: int, db: AsyncSession = Depends(get_db)):
    return await inventory_service.get_inventory_for_medication(db, medication_id)


@router.patch("/medications/{medication_id}/inventory", response_model=InventoryResponse)
async def update_inventory_endpoint(
    medication_id: int, changes: InventoryUpdate, db: AsyncSession = Depends(get_db)
):
    return await inventory_service.update_inventory(db, medication_id, changes)


@router.post("/medications/{medication_id}/inventory/restock", response_model=InventoryResponse)
async def restock_endpoint(medication_id: int, restock_in: InventoryRestock, db: AsyncSession = Depends(get_db)):
    return await inventory_service.restock(db, medication_id, restock_in)


@router.delete("/medications/{medication_id}/inventory", status_code=status.HTTP_204_NO_CONTENT)
async def delete_inventory_endpoint(medication_id: int, db: AsyncSession = Depends(get_db)):
    await inventory_service.delete_inventory(db, medication_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================
# ✅ Prescriptions
# ============================================================
@router.post("/prescriptions", response_model=PrescriptionResponse, status_code=status.HTTP_201_CREATED)
async def create_prescription_endpoint(prescription: PrescriptionCreate, db: AsyncSession = Depends(get_db)):
    """Create a new prescription."""
    return await prescription_service.create_prescription(db, prescription)


@router.get("/prescriptions/{prescription_id}", response_model=PrescriptionResponse)
async def get_prescription_endpoint(prescription_id: int, db: AsyncSession = Depends(get_db)):
    return await prescription_service.get_prescription(db, prescription_id)


@router.get("/appointments/{appointment_id}/prescription", response_model=PrescriptionResponse)
async def get_appointment_prescription_endpoint(appointment_id: int, db: AsyncSession = Depends(get_db)):
    return await prescription_service.get_prescription_for_appointment(db, appointment_id)


@router.patch("/prescriptions/{prescription_id}", response_model=PrescriptionResponse)
async def update_prescription_endpoint(
    prescription_id: int, changes: PrescriptionUpdate, db: AsyncSession = Depends(get_db)
):
    return await prescription_service.update_prescription(db, prescription_id, changes)


@router.delete("/prescriptions/{prescription_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_prescription_endpoint(prescription_id: int, db: AsyncSession = Depends(get_db)):
    await prescription_service.delete_prescription(db, prescription_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/prescriptions/{prescription_id}/items",
    response_model=PrescriptionItemResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_prescription_item_endpoint(
    prescription_id: int, item: PrescriptionItemCreate, db: AsyncSession = Depends(get_db)
):
    return await prescription_service.add_prescription_item(db, prescription_id, item)


@router.delete("/prescriptions/{prescription_id}/items/{prescription_item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_prescription_item_endpoint(
    prescription_id: int, prescription_item_id: int, db: AsyncSession = Depends(get_db)
):
    await prescription_service.remove_prescription_item(db, prescription_id, prescription_item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
