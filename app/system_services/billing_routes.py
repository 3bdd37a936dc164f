# app/system_services/billing_routes.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.connection import get_db
from app.system_models.invoice_model.invoice_schemas import (
    INVOICE_STATUS,
    InvoiceCreate,
    InvoiceItemCreate,
    InvoiceItemResponse,
    InvoiceResponse,
    InvoiceStatusUpdate,
    InvoiceUpdate,
)
from app.system_services import invoice_service

router = APIRouter()


@router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
async def create_invoice_endpoint(invoice: InvoiceCreate, db: AsyncSession = Depends(get_db)):
    """Create an invoice with its line items."""
    return await invoice_service.create_invoice(db, invoice)


@router.get("", response_model=List[InvoiceResponse])
async def list_invoices_endpoint(
    patient_id: Optional[int] = None,
    status_filter: Optional[INVOICE_STATUS] = Query(None, alias="status"),
    offset: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1),
    db: AsyncSession = Depends(get_db),
):
    return await invoice_service.list_invoices(
        db, patient_id=patient_id, status=status_filter, offset=offset, limit=limit
    )


@router.get("/{invoice_id}", response_model=InvoiceResponse)
async def get_invoice_endpoint(invoice_id: int, db: AsyncSession = Depends(get_db)):
    return await invoice_service.get_invoice(db, invoice_id)


@router.patch("/{invoice_id}", response_model=InvoiceResponse)
async def update_invoice_endpoint(invoice_id: int, changes: InvoiceUpdate, db: AsyncSession = Depends(get_db)):
    return await invoice_service.update_invoice(db, invoice_id, changes)


@router.put("/{invoice_id}/status", response_model=InvoiceResponse)
async def set_invoice_status_endpoint(
    invoice_id: int, body: InvoiceStatusUpdate, db: AsyncSession = Depends(get_db)
):
    return await invoice_service.set_invoice_status(db, invoice_id, body.status)


@router.post("/{invoice_id}/recalculate", response_model=InvoiceResponse)
async def recalculate_invoice_endpoint(invoice_id: int, db: AsyncSession = Depends(get_db)):
    """Overwrite total_amount with the sum of the line totals."""
    return await invoice_service.recalculate_invoice_total(db, invoice_id)


@router.delete("/{invoice_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_invoice_endpoint(invoice_id: int, db: AsyncSession = Depends(get_db)):
    await invoice_service.delete_invoice(db, invoice_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{invoice_id}/items", response_model=InvoiceItemResponse, status_code=status.HTTP_201_CREATED)
async def add_invoice_item_endpoint(
    invoice_id: int, item: InvoiceItemCreate, db: AsyncSession = Depends(get_db)
):
    return await invoice_service.add_invoice_item(db, invoice_id, item)


@router.delete("/{invoice_id}/items/{invoice_item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_invoice_item_endpoint(invoice_id: int, invoice_item_id: int, db: AsyncSession = Depends(get_db)):
    await invoice_service.remove_invoice_item(db, invoice_id, invoice_item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
