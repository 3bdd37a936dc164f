# app/system_models/inventory_model/inventory_model.py
from sqlalchemy import Column, Integer, Date, ForeignKey
from sqlalchemy.orm import relationship
from app.database.connection import Base


class Inventory(Base):
    """Stock level for a single medication."""

    __tablename__ = "inventory"

    inventory_id = Column(Integer, primary_key=True, autoincrement=True)
    medication_id = Column(
        Integer,
        ForeignKey("medications.medication_id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    quantity_on_hand = Column(Integer, nullable=False, default=0, server_default="0")
    reorder_level = Column(Integer, nullable=False, default=0, server_default="0")
    last_restock = Column(Date, nullable=True)

    medication = relationship("Medication", back_populates="inventory")

    @property
    def needs_reorder(self) -> bool:
        return self.quantity_on_hand <= self.reorder_level
