# app/system_models/inventory_model/inventory_schemas.py
from typing import Optional
from datetime import date
from pydantic import BaseModel, Field


class InventoryBase(BaseModel):
    quantity_on_hand: int = Field(0, ge=0)
    reorder_level: int = Field(0, ge=0)
    last_restock: Optional[date] = None


class InventoryCreate(InventoryBase):
    medication_id: int


class InventoryUpdate(BaseModel):
    quantity_on_hand: Optional[int] = Field(None, ge=0)
    reorder_level: Optional[int] = Field(None, ge=0)
    last_restock: Optional[date] = None


class InventoryRestock(BaseModel):
    quantity: int = Field(..., gt=0)
    restock_date: Optional[date] = None


class InventoryResponse(InventoryBase):
    inventory_id: int
    medication_id: int
    needs_reorder: bool

    class Config:
        from_attributes = True
