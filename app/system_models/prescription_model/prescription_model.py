# app/system_models/prescription_model/prescription_model.py
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from app.database.connection import Base
from app.helpers.time import utcnow


class Prescription(Base):
    __tablename__ = "prescriptions"

    prescription_id = Column(Integer, primary_key=True, autoincrement=True)
    # unique: at most one prescription per appointment
    appointment_id = Column(
        Integer,
        ForeignKey("appointments.appointment_id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    prescribed_by = Column(Integer, ForeignKey("doctors.doctor_id", ondelete="RESTRICT"), nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())

    appointment = relationship("Appointment", back_populates="prescription")
    doctor = relationship("Doctor")
    items = relationship(
        "PrescriptionItem",
        back_populates="prescription",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
        order_by="PrescriptionItem.prescription_item_id",
    )


class PrescriptionItem(Base):
    __tablename__ = "prescription_items"

    prescription_item_id = Column(Integer, primary_key=True, autoincrement=True)
    prescription_id = Column(Integer, ForeignKey("prescriptions.prescription_id", ondelete="CASCADE"), nullable=False)
    medication_id = Column(Integer, ForeignKey("medications.medication_id", ondelete="RESTRICT"), nullable=False)
    dosage = Column(String(100), nullable=False)
    frequency = Column(String(100), nullable=False)
    duration_days = Column(Integer, nullable=True)
    instructions = Column(Text, nullable=True)

    prescription = relationship("Prescription", back_populates="items")
    medication = relationship("Medication")
