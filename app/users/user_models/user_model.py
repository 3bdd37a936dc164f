# app/users/user_models/user_model.py
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Enum, func, true
from sqlalchemy.orm import relationship
from app.database.connection import Base
from app.helpers.time import utcnow


USER_ROLES = ("admin", "receptionist", "doctor", "nurse", "pharmacist", "accountant")


class User(Base):
    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), nullable=False, unique=True)
    email = Column(String(255), nullable=False, unique=True)
    password_hash = Column(String(255), nullable=False)
    full_name = Column(String(200), nullable=False)
    role = Column(
        Enum(*USER_ROLES, name="user_role", create_constraint=True),
        nullable=False,
        default="receptionist",
        server_default="receptionist",
    )
    is_active = Column(Boolean, nullable=False, default=True, server_default=true())
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow, server_default=func.now())

    # Users are deactivated, never deleted; rows pointing here use ON DELETE SET NULL
    doctor = relationship("Doctor", back_populates="user", uselist=False, passive_deletes=True)

    def __repr__(self):
        return f"<User(user_id={self.user_id}, username='{self.username}', role='{self.role}')>"
