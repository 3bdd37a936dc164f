# app/system_models/doctor_model/doctor_model.py
from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from app.database.connection import Base
from app.helpers.time import utcnow


class Doctor(Base):
    __tablename__ = "doctors"

    doctor_id = Column(Integer, primary_key=True, autoincrement=True)
    # Optional one-to-one link to a staff account
    user_id = Column(Integer, ForeignKey("users.user_id", ondelete="SET NULL"), nullable=True, unique=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    phone = Column(String(30), nullable=True)
    email = Column(String(255), nullable=True)
    license_number = Column(String(100), nullable=False, unique=True)
    hire_date = Column(Date, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow, server_default=func.now())

    user = relationship("User", back_populates="doctor")
    specialties = relationship(
        "Specialty",
        secondary="doctor_specialties",
        viewonly=True,
        lazy="selectin",
        order_by="Specialty.name",
    )
    specialty_links = relationship("DoctorSpecialty", back_populates="doctor", passive_deletes=True)
    patient_links = relationship("PatientDoctor", back_populates="doctor", passive_deletes=True)
    appointments = relationship("Appointment", back_populates="doctor", passive_deletes="all")

    def __repr__(self):
        return f"<Doctor {self.doctor_id}: {self.first_name} {self.last_name} ({self.license_number})>"


class DoctorSpecialty(Base):
    __tablename__ = "doctor_specialties"

    doctor_id = Column(Integer, ForeignKey("doctors.doctor_id", ondelete="CASCADE"), primary_key=True)
    specialty_id = Column(Integer, ForeignKey("specialties.specialty_id", ondelete="CASCADE"), primary_key=True)

    doctor = relationship("Doctor", back_populates="specialty_links")
    specialty = relationship("Specialty", back_populates="doctor_links")
