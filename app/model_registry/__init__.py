# app/model_registry/__init__.py


# Register all models here

# User models
from app.users.user_models.user_model import User

# System models
from app.system_models.patient_model.patient_model import Patient, PatientDoctor
from app.system_models.specialty_model.specialty_model import Specialty
from app.system_models.doctor_model.doctor_model import Doctor, DoctorSpecialty
from app.system_models.room_model.room_model import Room
from app.system_models.service_model.service_model import Service
from app.system_models.appointment_model.appointment_model import Appointment, AppointmentService
from app.system_models.medication_model.medication_model import Medication
from app.system_models.prescription_model.prescription_model import Prescription, PrescriptionItem
from app.system_models.invoice_model.invoice_model import Invoice, InvoiceItem
from app.system_models.inventory_model.inventory_model import Inventory
