# app/system_models/medication_model/medication_model.py
from sqlalchemy import Column, Integer, String, DateTime, UniqueConstraint, func
from sqlalchemy.orm import relationship
from app.database.connection import Base
from app.helpers.time import utcnow


class Medication(Base):
    __tablename__ = "medications"

    medication_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    manufacturer = Column(String(200), nullable=True)
    unit = Column(String(50), nullable=True)  # tablet, ml, ...
    strength = Column(String(100), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())

    __table_args__ = (
        UniqueConstraint("name", "strength", name="uq_medications_name_strength"),
    )

    inventory = relationship("Inventory", back_populates="medication", uselist=False, passive_deletes=True)

    def __repr__(self):
        return f"<Medication(medication_id={self.medication_id}, name='{self.name}', strength='{self.strength}')>"
