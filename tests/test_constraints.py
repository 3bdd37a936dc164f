"""Database-level rules: CHECKs, keys, delete actions and the generated line_total."""
from datetime import timedelta
from decimal import Decimal

import pytest
from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError

from app.shared.exceptions import CheckViolation, ForeignKeyViolation, UniqueViolation, classify_integrity_error
from app.system_models.appointment_model.appointment_model import Appointment, AppointmentService
from app.system_models.doctor_model.doctor_model import Doctor, DoctorSpecialty
from app.system_models.inventory_model.inventory_model import Inventory
from app.system_models.invoice_model.invoice_model import Invoice, InvoiceItem
from app.system_models.medication_model.medication_model import Medication
from app.system_models.patient_model.patient_model import Patient
from app.system_models.prescription_model.prescription_model import Prescription, PrescriptionItem
from app.users.user_models.user_model import User

from tests.conftest import MONDAY_9AM, MONDAY_930AM


async def _rejected(db, statement=None):
    with pytest.raises(IntegrityError) as excinfo:
        if statement is not None:
            await db.execute(statement)
        await db.commit()
    await db.rollback()
    return classify_integrity_error(excinfo.value)


async def _book(db, clinic, **overrides):
    values = dict(
        patient_id=clinic.patient_id,
        doctor_id=clinic.doctor_id,
        room_id=clinic.room_id,
        scheduled_start=MONDAY_9AM,
        scheduled_end=MONDAY_930AM,
    )
    values.update(overrides)
    appointment = Appointment(**values)
    db.add(appointment)
    await db.commit()
    return appointment.appointment_id


async def _count(db, model, *criteria):
    return (await db.execute(select(func.count()).select_from(model).where(*criteria))).scalar_one()


def _delete(model, *criteria):
    return delete(model).where(*criteria).execution_options(synchronize_session=False)


# ============================================================
# ✅ CHECK constraints
# ============================================================
async def test_appointment_end_must_follow_start(db, clinic):
    db.add(
        Appointment(
            patient_id=clinic.patient_id,
            doctor_id=clinic.doctor_id,
            scheduled_start=MONDAY_9AM,
            scheduled_end=MONDAY_9AM,
        )
    )
    error = await _rejected(db)
    assert isinstance(error, CheckViolation)

    db.add(
        Appointment(
            patient_id=clinic.patient_id,
            doctor_id=clinic.doctor_id,
            scheduled_start=MONDAY_930AM,
            scheduled_end=MONDAY_930AM - timedelta(minutes=1),
        )
    )
    await _rejected(db)
    assert await _count(db, Appointment) == 0


async def test_patient_first_name_must_not_be_empty(db):
    db.add(Patient(first_name="", last_name="Nobody"))
    error = await _rejected(db)
    assert isinstance(error, CheckViolation)
    assert await _count(db, Patient) == 0


async def test_invoice_item_needs_a_subject(db, clinic):
    invoice = Invoice(patient_id=clinic.patient_id)
    db.add(invoice)
    await db.commit()
    invoice_id = invoice.invoice_id

    db.add(InvoiceItem(invoice_id=invoice_id, description="", unit_price=Decimal("5.00")))
    error = await _rejected(db)
    assert isinstance(error, CheckViolation)

    db.add_all(
        [
            InvoiceItem(invoice_id=invoice_id, description="Dressing change", unit_price=Decimal("5.00")),
            InvoiceItem(invoice_id=invoice_id, description="", service_id=clinic.service_id, unit_price=Decimal("40.00")),
            InvoiceItem(invoice_id=invoice_id, description="", medication_id=clinic.medication_id, unit_price=Decimal("2.50")),
        ]
    )
    await db.commit()
    assert await _count(db, InvoiceItem, InvoiceItem.invoice_id == invoice_id) == 3


async def test_unknown_appointment_status_is_rejected(db, clinic):
    db.add(
        Appointment(
            patient_id=clinic.patient_id,
            doctor_id=clinic.doctor_id,
            scheduled_start=MONDAY_9AM,
            scheduled_end=MONDAY_930AM,
            status="postponed",
        )
    )
    await _rejected(db)


# ============================================================
# ✅ Keys and uniqueness
# ============================================================
async def test_second_prescription_for_same_appointment_fails(db, clinic):
    appointment_id = await _book(db, clinic)
    db.add(Prescription(appointment_id=appointment_id, prescribed_by=clinic.doctor_id))
    await db.commit()

    db.add(Prescription(appointment_id=appointment_id, prescribed_by=clinic.doctor_id, notes="again"))
    error = await _rejected(db)
    assert isinstance(error, UniqueViolation)
    assert await _count(db, Prescription, Prescription.appointment_id == appointment_id) == 1


async def test_doctor_specialty_pair_is_unique(db, clinic):
    # the clinic doctor was created with this specialty already
    duplicate = DoctorSpecialty.__table__.insert().values(doctor_id=clinic.doctor_id, specialty_id=clinic.specialty_id)
    error = await _rejected(db, duplicate)
    assert isinstance(error, UniqueViolation)


async def test_medication_name_and_strength_are_unique_together(db):
    db.add_all([Medication(name="Ibuprofen", strength="200 mg"), Medication(name="Ibuprofen", strength="400 mg")])
    await db.commit()

    db.add(Medication(name="Ibuprofen", strength="200 mg"))
    error = await _rejected(db)
    assert isinstance(error, UniqueViolation)


async def test_one_inventory_row_per_medication(db, clinic):
    db.add(Inventory(medication_id=clinic.medication_id, quantity_on_hand=10))
    await db.commit()
    db.add(Inventory(medication_id=clinic.medication_id, quantity_on_hand=5))
    error = await _rejected(db)
    assert isinstance(error, UniqueViolation)


async def test_appointment_for_unknown_patient_fails(db, clinic):
    db.add(
        Appointment(
            patient_id=9999,
            doctor_id=clinic.doctor_id,
            scheduled_start=MONDAY_9AM,
            scheduled_end=MONDAY_930AM,
        )
    )
    error = await _rejected(db)
    assert isinstance(error, ForeignKeyViolation)


# ============================================================
# ✅ Delete actions
# ============================================================
async def test_deleting_medication_cascades_inventory_and_nulls_invoice_items(db, clinic):
    invoice = Invoice(patient_id=clinic.patient_id)
    invoice.items.append(
        InvoiceItem(description="Amoxicillin x10", medication_id=clinic.medication_id, quantity=10, unit_price=Decimal("0.80"))
    )
    db.add_all([invoice, Inventory(medication_id=clinic.medication_id, quantity_on_hand=40)])
    await db.commit()
    invoice_item_id = invoice.items[0].invoice_item_id

    await db.execute(_delete(Medication, Medication.medication_id == clinic.medication_id))
    await db.commit()

    assert await _count(db, Inventory, Inventory.medication_id == clinic.medication_id) == 0
    medication_ref = (
        await db.execute(select(InvoiceItem.medication_id).where(InvoiceItem.invoice_item_id == invoice_item_id))
    ).scalar_one()
    assert medication_ref is None


async def test_deleting_medication_on_a_prescription_is_restricted(db, clinic):
    appointment_id = await _book(db, clinic)
    prescription = Prescription(appointment_id=appointment_id, prescribed_by=clinic.doctor_id)
    prescription.items.append(PrescriptionItem(medication_id=clinic.medication_id, dosage="500 mg", frequency="tid"))
    db.add(prescription)
    await db.commit()

    error = await _rejected(db, _delete(Medication, Medication.medication_id == clinic.medication_id))
    assert isinstance(error, ForeignKeyViolation)


async def test_deleting_booked_doctor_is_restricted(db, clinic):
    appointment_id = await _book(db, clinic)

    error = await _rejected(db, _delete(Doctor, Doctor.doctor_id == clinic.doctor_id))
    assert isinstance(error, ForeignKeyViolation)

    # once the appointment is gone the doctor can be removed
    await db.execute(_delete(Appointment, Appointment.appointment_id == appointment_id))
    await db.execute(_delete(Doctor, Doctor.doctor_id == clinic.doctor_id))
    await db.commit()
    assert await _count(db, Doctor) == 0
    assert await _count(db, DoctorSpecialty) == 0


async def test_deleting_appointment_cascades_lines_and_prescription(db, clinic):
    appointment_id = await _book(db, clinic)
    db.add_all(
        [
            AppointmentService(appointment_id=appointment_id, service_id=clinic.service_id, unit_price=Decimal("40.00")),
            Prescription(appointment_id=appointment_id, prescribed_by=clinic.doctor_id),
            Invoice(patient_id=clinic.patient_id, appointment_id=appointment_id),
        ]
    )
    await db.commit()

    await db.execute(_delete(Appointment, Appointment.appointment_id == appointment_id))
    await db.commit()

    assert await _count(db, AppointmentService) == 0
    assert await _count(db, Prescription) == 0
    assert await _count(db, Invoice) == 1
    assert await _count(db, Invoice, Invoice.appointment_id.is_(None)) == 1


async def test_deleting_user_unlinks_doctor_and_appointments(db, clinic):
    await db.execute(Doctor.__table__.update().values(user_id=clinic.user_id).where(Doctor.doctor_id == clinic.doctor_id))
    await db.commit()
    await _book(db, clinic, created_by=clinic.user_id)

    await db.execute(_delete(User, User.user_id == clinic.user_id))
    await db.commit()

    assert await _count(db, Doctor, Doctor.user_id.is_(None)) == 1
    assert await _count(db, Appointment, Appointment.created_by.is_(None)) == 1


# ============================================================
# ✅ Generated column
# ============================================================
async def test_line_total_is_quantity_times_unit_price(db, clinic):
    invoice = Invoice(patient_id=clinic.patient_id)
    invoice.items.append(InvoiceItem(description="Physiotherapy session", quantity=3, unit_price=Decimal("50.00")))
    db.add(invoice)
    await db.commit()

    line_total = (
        await db.execute(select(InvoiceItem.line_total).where(InvoiceItem.invoice_id == invoice.invoice_id))
    ).scalar_one()
    assert Decimal(str(line_total)) == Decimal("150.00")
