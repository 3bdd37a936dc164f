# app/system_models/patient_model/patient_model.py
from sqlalchemy import (
    Column, Integer, String, Text, Date, DateTime, Boolean, Enum, ForeignKey,
    CheckConstraint, Index, func, false, text,
)
from sqlalchemy.orm import relationship
from app.database.connection import Base
from app.helpers.time import utcnow, today


GENDERS = ("male", "female", "other")


class Patient(Base):
    __tablename__ = "patients"

    patient_id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    national_id = Column(String(50), unique=True, nullable=True)  # ID / passport
    date_of_birth = Column(Date, nullable=True)
    gender = Column(
        Enum(*GENDERS, name="patient_gender", create_constraint=True),
        nullable=True,
        default="other",
        server_default="other",
    )
    phone = Column(String(30), nullable=True)
    email = Column(String(255), nullable=True)
    address = Column(Text, nullable=True)
    emergency_contact_name = Column(String(200), nullable=True)
    emergency_contact_phone = Column(String(30), nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow, server_default=func.now())

    __table_args__ = (
        CheckConstraint("length(first_name) > 0", name="chk_patients_first_name"),
        Index("idx_patients_name", "last_name", "first_name"),
    )

    appointments = relationship("Appointment", back_populates="patient", passive_deletes="all")
    invoices = relationship("Invoice", back_populates="patient", passive_deletes="all")
    doctor_links = relationship("PatientDoctor", back_populates="patient", passive_deletes=True)

    def __repr__(self):
        return f"<Patient {self.patient_id}: {self.first_name} {self.last_name}>"


class PatientDoctor(Base):
    """Many-to-many link between patients and the doctors assigned to them."""

    __tablename__ = "patient_doctors"

    patient_id = Column(Integer, ForeignKey("patients.patient_id", ondelete="CASCADE"), primary_key=True)
    doctor_id = Column(Integer, ForeignKey("doctors.doctor_id", ondelete="CASCADE"), primary_key=True)
    is_primary = Column(Boolean, nullable=False, default=False, server_default=false())
    assigned_date = Column(Date, nullable=False, default=today, server_default=text("(CURRENT_DATE)"))

    patient = relationship("Patient", back_populates="doctor_links")
    doctor = relationship("Doctor", back_populates="patient_links")
