# app/system_models/invoice_model/invoice_model.py
from sqlalchemy import (
    Column, Integer, String, Numeric, Date, DateTime, Enum, ForeignKey, CheckConstraint, Computed, func, text,
)
from sqlalchemy.orm import relationship
from app.database.connection import Base
from app.helpers.time import utcnow, today


INVOICE_STATUSES = ("pending", "paid", "void")


class Invoice(Base):
    __tablename__ = "invoices"

    invoice_id = Column(Integer, primary_key=True, autoincrement=True)
    patient_id = Column(Integer, ForeignKey("patients.patient_id", ondelete="RESTRICT"), nullable=False)
    appointment_id = Column(Integer, ForeignKey("appointments.appointment_id", ondelete="SET NULL"), nullable=True)
    invoice_date = Column(Date, nullable=False, default=today, server_default=text("(CURRENT_DATE)"))
    # Stored figure, not derived from invoice_items by the database
    total_amount = Column(Numeric(12, 2), nullable=False, default=0, server_default="0.00")
    status = Column(
        Enum(*INVOICE_STATUSES, name="invoice_status", create_constraint=True),
        nullable=False,
        default="pending",
        server_default="pending",
    )
    created_by = Column(Integer, ForeignKey("users.user_id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())

    patient = relationship("Patient", back_populates="invoices")
    appointment = relationship("Appointment", back_populates="invoices")
    creator = relationship("User")
    items = relationship(
        "InvoiceItem",
        back_populates="invoice",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
        order_by="InvoiceItem.invoice_item_id",
    )

    def __repr__(self):
        return f"<Invoice {self.invoice_id}: patient={self.patient_id} total={self.total_amount} {self.status}>"


class InvoiceItem(Base):
    __tablename__ = "invoice_items"

    invoice_item_id = Column(Integer, primary_key=True, autoincrement=True)
    invoice_id = Column(Integer, ForeignKey("invoices.invoice_id", ondelete="CASCADE"), nullable=False)
    description = Column(String(255), nullable=False)
    service_id = Column(Integer, ForeignKey("services.service_id", ondelete="SET NULL"), nullable=True)
    medication_id = Column(Integer, ForeignKey("medications.medication_id", ondelete="SET NULL"), nullable=True)
    quantity = Column(Integer, nullable=False, default=1, server_default="1")
    unit_price = Column(Numeric(12, 2), nullable=False)
    # Virtual generated column, computed by the database on read
    line_total = Column(Numeric(12, 2), Computed("quantity * unit_price"))

    __table_args__ = (
        CheckConstraint(
            "service_id IS NOT NULL OR medication_id IS NOT NULL OR description <> ''",
            name="chk_invoice_items_subject",
        ),
    )

    invoice = relationship("Invoice", back_populates="items")
    service = relationship("Service")
    medication = relationship("Medication")
