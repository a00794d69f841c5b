# app/models/driver.py
"""
Registered park drivers.
A driver owns zero or more vehicles; deleting a driver removes them too
(done by the storage façade, not by a database cascade).
"""

from sqlalchemy import Column, Integer, String, DateTime, Text
from app.database import Base


class Driver(Base):
    __tablename__ = "drivers"
    __table_args__ = {"sqlite_autoincrement": True}   # ids are never reused

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    phone_number = Column(String(50), nullable=False)
    license_number = Column(String(100), unique=True, nullable=False, index=True)
    status = Column(String(20), default="active", nullable=False)  # active | inactive | suspended
    notes = Column(Text)
    created_at = Column(DateTime)

    def __repr__(self):
        return f"<Driver {self.id} {self.name} license={self.license_number} status={self.status}>"
