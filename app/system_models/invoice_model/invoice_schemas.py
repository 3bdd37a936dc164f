# app/system_models/invoice_model/invoice_schemas.py
from typing import Optional, List, Literal
from datetime import date, datetime
from decimal import Decimal
from pydantic import BaseModel, Field, model_validator

INVOICE_STATUS = Literal["pending", "paid", "void"]


class InvoiceItemBase(BaseModel):
    description: str = Field("", max_length=255)
    service_id: Optional[int] = None
    medication_id: Optional[int] = None
    quantity: int = Field(1, ge=1)
    unit_price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)


class InvoiceItemCreate(InvoiceItemBase):
    @model_validator(mode="after")
    def require_subject(self):
        if self.service_id is None and self.medication_id is None and not self.description:
            raise ValueError("an invoice item needs a service, a medication or a description")
        return self


class InvoiceItemResponse(InvoiceItemBase):
    invoice_item_id: int
    invoice_id: int
    line_total: Decimal

    class Config:
        from_attributes = True


class InvoiceBase(BaseModel):
    patient_id: int
    appointment_id: Optional[int] = None
    invoice_date: Optional[date] = None
    status: INVOICE_STATUS = "pending"
    created_by: Optional[int] = None


class InvoiceCreate(InvoiceBase):
    # None -> sum of the item lines
    total_amount: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    items: List[InvoiceItemCreate] = []


class InvoiceUpdate(BaseModel):
    appointment_id: Optional[int] = None
    invoice_date: Optional[date] = None
    total_amount: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    status: Optional[INVOICE_STATUS] = None


class InvoiceStatusUpdate(BaseModel):
    status: INVOICE_STATUS


class InvoiceResponse(InvoiceBase):
    invoice_id: int
    invoice_date: date
    total_amount: Decimal
    created_at: datetime
    items: List[InvoiceItemResponse] = []

    class Config:
        from_attributes = True
