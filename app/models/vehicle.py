# app/models/vehicle.py
"""
Vehicles registered with the park, looked up by plate number on /api/verify.
Plate numbers are unique ignoring case. driver_id is a plain integer, not a
foreign key: referential checks live in app.services.integrity.
"""

from sqlalchemy import Column, Integer, String, DateTime
from app.database import Base


class Vehicle(Base):
    __tablename__ = "vehicles"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    plate_number = Column(String(50), unique=True, nullable=False, index=True)
    type = Column(String(100), nullable=False)
    driver_id = Column(Integer, nullable=False, index=True)
    status = Column(String(20), default="active", nullable=False)  # active | suspended | maintenance | retired
    registration_date = Column(DateTime)

    def __repr__(self):
        return f"<Vehicle {self.plate_number} type={self.type} driver={self.driver_id}>"
