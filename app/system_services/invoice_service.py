# app/system_services/invoice_service.py
"""
Invoices and their line items.

total_amount is a stored figure. It is filled from the items when an invoice
is created without one, and afterwards only changes through an explicit
update or recalculate_invoice_total.
"""
import logging
from decimal import Decimal
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.exceptions import RecordNotFound
from app.system_models.invoice_model.invoice_model import Invoice, InvoiceItem
from app.system_models.invoice_model.invoice_schemas import InvoiceCreate, InvoiceItemCreate, InvoiceUpdate
from app.system_services.crud import (
    delete_by_pk,
    get_or_raise,
    list_rows,
    translate_integrity_errors,
    update_and_commit,
)

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


def items_total(items: list[InvoiceItemCreate]) -> Decimal:
    total = sum((item.unit_price * item.quantity for item in items), Decimal("0"))
    return total.quantize(CENT)


async def create_invoice(db: AsyncSession, invoice: InvoiceCreate) -> Invoice:
    """Create an invoice and its items in one transaction."""
    data = invoice.model_dump(exclude={"items"}, exclude_none=True)
    if invoice.total_amount is None:
        data["total_amount"] = items_total(invoice.items)

    db_invoice = Invoice(**data)
    for item in invoice.items:
        db_invoice.items.append(InvoiceItem(**item.model_dump()))

    async with translate_integrity_errors(db, "invoice"):
        db.add(db_invoice)
        await db.commit()
    logger.info(
        f"Created invoice {db_invoice.invoice_id} for patient {invoice.patient_id}: "
        f"{len(invoice.items)} items, total {db_invoice.total_amount}"
    )
    return await get_invoice(db, db_invoice.invoice_id)


async def get_invoice(db: AsyncSession, invoice_id: int) -> Invoice:
    return await get_or_raise(db, Invoice, invoice_id, "invoice")


async def list_invoices(
    db: AsyncSession,
    patient_id: Optional[int] = None,
    status: Optional[str] = None,
    offset: int = 0,
    limit: Optional[int] = None,
) -> list[Invoice]:
    stmt = select(Invoice).order_by(Invoice.invoice_date.desc(), Invoice.invoice_id.desc())
    if patient_id is not None:
        stmt = stmt.where(Invoice.patient_id == patient_id)
    if status is not None:
        stmt = stmt.where(Invoice.status == status)
    return await list_rows(db, stmt, offset, limit)


async def update_invoice(db: AsyncSession, invoice_id: int, changes: InvoiceUpdate) -> Invoice:
    db_invoice = await get_invoice(db, invoice_id)
    await update_and_commit(db, db_invoice, changes.model_dump(exclude_unset=True), "invoice")
    return await get_invoice(db, invoice_id)


async def set_invoice_status(db: AsyncSession, invoice_id: int, status: str) -> Invoice:
    db_invoice = await get_invoice(db, invoice_id)
    await update_and_commit(db, db_invoice, {"status": status}, "invoice")
    logger.info(f"Invoice {invoice_id} marked {status}")
    return await get_invoice(db, invoice_id)


async def delete_invoice(db: AsyncSession, invoice_id: int) -> None:
    await delete_by_pk(db, Invoice, invoice_id, "invoice")


async def recalculate_invoice_total(db: AsyncSession, invoice_id: int) -> Invoice:
    """Set total_amount to the sum of the items' line_total."""
    db_invoice = await get_invoice(db, invoice_id)
    result = await db.execute(
        select(func.coalesce(func.sum(InvoiceItem.line_total), 0)).where(InvoiceItem.invoice_id == invoice_id)
    )
    total = Decimal(str(result.scalar_one())).quantize(CENT)
    await update_and_commit(db, db_invoice, {"total_amount": total}, "invoice")
    return await get_invoice(db, invoice_id)


# ============================================================
# ✅ Invoice items
# ============================================================
async def add_invoice_item(db: AsyncSession, invoice_id: int, item: InvoiceItemCreate) -> InvoiceItem:
    db_item = InvoiceItem(invoice_id=invoice_id, **item.model_dump())
    async with translate_integrity_errors(db, "invoice item"):
        db.add(db_item)
        await db.commit()
    return await get_invoice_item(db, db_item.invoice_item_id)


async def get_invoice_item(db: AsyncSession, invoice_item_id: int) -> InvoiceItem:
    return await get_or_raise(db, InvoiceItem, invoice_item_id, "invoice item")


async def remove_invoice_item(db: AsyncSession, invoice_id: int, invoice_item_id: int) -> None:
    db_item = await get_invoice_item(db, invoice_item_id)
    if db_item.invoice_id != invoice_id:
        raise RecordNotFound("invoice item", invoice_item_id)
    await delete_by_pk(db, InvoiceItem, invoice_item_id, "invoice item")
