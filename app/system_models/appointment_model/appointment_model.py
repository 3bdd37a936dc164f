# app/system_models/appointment_model/appointment_model.py
from sqlalchemy import (
    Column, Integer, Text, Numeric, DateTime, Enum, ForeignKey, CheckConstraint, Index, func,
)
from sqlalchemy.orm import relationship
from app.database.connection import Base
from app.helpers.time import utcnow


APPOINTMENT_STATUSES = ("scheduled", "checked_in", "in_progress", "completed", "cancelled", "no_show")


class Appointment(Base):
    __tablename__ = "appointments"

    appointment_id = Column(Integer, primary_key=True, autoincrement=True)
    patient_id = Column(Integer, ForeignKey("patients.patient_id", ondelete="RESTRICT"), nullable=False)
    doctor_id = Column(Integer, ForeignKey("doctors.doctor_id", ondelete="RESTRICT"), nullable=False)
    room_id = Column(Integer, ForeignKey("rooms.room_id", ondelete="SET NULL"), nullable=True)
    scheduled_start = Column(DateTime, nullable=False)
    scheduled_end = Column(DateTime, nullable=False)
    # No transition graph: any status may replace any other
    status = Column(
        Enum(*APPOINTMENT_STATUSES, name="appointment_status", create_constraint=True),
        nullable=False,
        default="scheduled",
        server_default="scheduled",
    )
    reason = Column(Text, nullable=True)
    created_by = Column(Integer, ForeignKey("users.user_id", ondelete="SET NULL"), nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow, server_default=func.now())

    # Overlapping bookings for the same doctor or room are not prevented here
    __table_args__ = (
        CheckConstraint("scheduled_end > scheduled_start", name="chk_times"),
        Index("idx_appointments_patient", "patient_id"),
        Index("idx_appointments_doctor", "doctor_id"),
    )

    patient = relationship("Patient", back_populates="appointments")
    doctor = relationship("Doctor", back_populates="appointments")
    room = relationship("Room", back_populates="appointments")
    creator = relationship("User")
    service_lines = relationship(
        "AppointmentService",
        back_populates="appointment",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
        order_by="AppointmentService.service_id",
    )
    prescription = relationship("Prescription", back_populates="appointment", uselist=False, passive_deletes=True)
    invoices = relationship("Invoice", back_populates="appointment", passive_deletes=True)

    def __repr__(self):
        return f"<Appointment {self.appointment_id}: patient={self.patient_id} doctor={self.doctor_id} {self.status}>"


class AppointmentService(Base):
    """Service performed during an appointment, with the price charged at booking time."""

    __tablename__ = "appointment_services"

    appointment_id = Column(Integer, ForeignKey("appointments.appointment_id", ondelete="CASCADE"), primary_key=True)
    service_id = Column(Integer, ForeignKey("services.service_id", ondelete="RESTRICT"), primary_key=True)
    quantity = Column(Integer, nullable=False, default=1, server_default="1")
    unit_price = Column(Numeric(12, 2), nullable=False)

    appointment = relationship("Appointment", back_populates="service_lines")
    service = relationship("Service")
