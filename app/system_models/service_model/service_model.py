# app/system_models/service_model/service_model.py
from sqlalchemy import Column, Integer, String, Text, Numeric, DateTime, Index, func
from app.database.connection import Base
from app.helpers.time import utcnow


class Service(Base):
    """Catalog entry: consultation type, lab test or procedure."""

    __tablename__ = "services"

    service_id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(30), nullable=False, unique=True)
    name = Column(String(150), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(12, 2), nullable=False, default=0, server_default="0.00")
    duration_minutes = Column(Integer, nullable=False, default=30, server_default="30")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())

    __table_args__ = (
        Index("idx_services_name", "name"),
    )

    def __repr__(self):
        return f"<Service(service_id={self.service_id}, code='{self.code}', price={self.price})>"
