# app/system_models/specialty_model/specialty_model.py
from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship
from app.database.connection import Base


class Specialty(Base):
    __tablename__ = "specialties"

    specialty_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True)
    description = Column(Text, nullable=True)

    doctor_links = relationship("DoctorSpecialty", back_populates="specialty", passive_deletes=True)

    def __repr__(self):
        return f"<Specialty(specialty_id={self.specialty_id}, name='{self.name}')>"
