# app/system_models/room_model/room_model.py
from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship
from app.database.connection import Base
from app.helpers.time import utcnow


class Room(Base):
    __tablename__ = "rooms"

    room_id = Column(Integer, primary_key=True, autoincrement=True)
    room_name = Column(String(50), nullable=False, unique=True)
    description = Column(String(255), nullable=True)
    capacity = Column(Integer, nullable=False, default=1, server_default="1")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())

    appointments = relationship("Appointment", back_populates="room", passive_deletes=True)

    def __repr__(self):
        return f"<Room(room_id={self.room_id}, room_name='{self.room_name}')>"
